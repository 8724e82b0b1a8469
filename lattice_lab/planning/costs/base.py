# lattice_lab/planning/costs/base.py
from abc import ABC, abstractmethod


class CostFunction(ABC):
    """
    边代价基类 (Strategy Interface)
    代价只取决于使用的运动基元，是配置常量，不随具体的边变化。
    """
    @abstractmethod
    def calculate(self, primitive_index: int) -> float:
        """
        :param primitive_index: 运动基元编号 (对应 angular_rates 中的位置)
        :return: 代价数值 (必须 >= 0)
        """
        pass

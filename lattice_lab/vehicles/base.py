# lattice_lab/vehicles/base.py
from abc import ABC, abstractmethod
from typing import List, Tuple

from lattice_lab.types import Configuration
from .config import VehicleConfig


class VehicleBase(ABC):
    """
    车辆接口基类
    """
    def __init__(self, config: VehicleConfig):
        self.config = config

    @abstractmethod
    def kinematic_propagate(self, start: Configuration, control: tuple, dt: float) -> Configuration:
        """核心物理推演，留给子类实现。返回的航向角不做归一化。"""
        pass

    @abstractmethod
    def primitive_controls(self) -> List[Tuple[float, float]]:
        """
        该车辆可用的离散控制集合 [(V, omega), ...]，顺序固定。
        """
        pass


# [配置] 该模块独有的配置数据类
from dataclasses import dataclass, field
from typing import Tuple
import math


@dataclass(frozen=True)
class VehicleConfig:
    """所有车辆通用的配置"""
    speed: float = 0.1          # [m/s] 恒定平移速度 V
    time_step: float = 0.1      # [s] 仿真步长 dT


@dataclass(frozen=True)
class UnicycleConfig(VehicleConfig):
    """
    独轮车/差速车模型配置
    每个运动基元 = (V, omega) 作用一个仿真步长。
    """
    # --- 1. 运动学参数 ---
    angular_rates: Tuple[float, ...] = (-math.pi / 6, 0.0, math.pi / 6)  # [rad/s]

    # --- 2. 派生属性 (自动计算，外部只读) ---
    max_rate: float = field(init=False)
    step_length: float = field(init=False)      # 单步弧长 V * dT
    turning_radius: float = field(init=False)   # 最小转弯半径 V / max|omega|

    def __post_init__(self):
        # frozen dataclass 只能用 object.__setattr__ 写派生字段
        object.__setattr__(self, "angular_rates", tuple(float(w) for w in self.angular_rates))
        max_rate = max((abs(w) for w in self.angular_rates), default=0.0)
        object.__setattr__(self, "max_rate", max_rate)
        object.__setattr__(self, "step_length", self.speed * self.time_step)
        turning_radius = self.speed / max_rate if max_rate > 0 else math.inf
        object.__setattr__(self, "turning_radius", turning_radius)

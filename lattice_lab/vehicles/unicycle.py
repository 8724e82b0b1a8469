# lattice_lab/vehicles/unicycle.py
import math
from typing import List, Tuple

from lattice_lab.types import Configuration
from .base import VehicleBase
from .config import UnicycleConfig


class UnicycleVehicle(VehicleBase):
    """
    恒速独轮车模型 (u, v, theta)

    特点：
    1. 控制：(V, omega)，V 固定，omega 取自有限集合。
    2. 积分：位置用起止航向的平均值 (中点航向) 推进，近似一个步长内走过的圆弧。
    """

    def __init__(self, config: UnicycleConfig):
        super().__init__(config)
        self.config: UnicycleConfig = config

    def primitive_controls(self) -> List[Tuple[float, float]]:
        return [(self.config.speed, w) for w in self.config.angular_rates]

    def kinematic_propagate(self, start: Configuration, control: tuple, dt: float) -> Configuration:
        v, omega = control

        # 中点航向必须用未归一化的 theta'，否则跨越 0/2pi 时平均值会指向反方向。
        # 旧版工具先归一化再取平均，穿过 0/2pi 的路径与它的输出不同。
        new_theta = start.theta_rad + omega * dt
        mid_theta = (start.theta_rad + new_theta) / 2.0

        new_u = start.u + v * dt * math.cos(mid_theta)
        new_v = start.v + v * dt * math.sin(mid_theta)

        return Configuration(new_u, new_v, new_theta)

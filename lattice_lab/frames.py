# lattice_lab/frames.py
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy.spatial.transform import Rotation

from lattice_lab.types import Configuration


@dataclass(frozen=True)
class FrameTransform:
    """
    平面刚体变换：先绕原点旋转 yaw，再平移 translation。
    用于把局部坐标系下的起点/子目标放进统一的工作空间坐标系。
    搜索核心本身从不调用它。
    """
    translation: Tuple[float, float] = (0.0, 0.0)
    yaw: float = 0.0     # [rad]

    @property
    def rotation(self) -> Rotation:
        return Rotation.from_euler('z', self.yaw)

    def apply(self, config: Configuration) -> Configuration:
        rotated = self.rotation.apply(np.array([config.u, config.v, 0.0]))
        return Configuration(float(rotated[0] + self.translation[0]),
                             float(rotated[1] + self.translation[1]),
                             config.theta_rad + self.yaw)

    def inverse(self) -> "FrameTransform":
        # p = R q + t  =>  q = R^-1 p - R^-1 t
        back = self.rotation.inv().apply(np.array([self.translation[0], self.translation[1], 0.0]))
        return FrameTransform((float(-back[0]), float(-back[1])), -self.yaw)

    def compose(self, inner: "FrameTransform") -> "FrameTransform":
        """返回先做 inner 再做 self 的变换"""
        moved = self.apply(Configuration(inner.translation[0], inner.translation[1], 0.0))
        return FrameTransform((moved.u, moved.v), self.yaw + inner.yaw)


def transform_configuration(config: Configuration, transform: FrameTransform) -> Configuration:
    """(Configuration, FrameTransform) -> Configuration"""
    return transform.apply(config)


def wrap_to_pi(angle: float) -> float:
    """角度折回 [-pi, pi)"""
    return (angle + math.pi) % (2 * math.pi) - math.pi

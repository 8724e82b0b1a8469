# lattice_lab/map/discretizer.py
import math
from typing import Tuple

from lattice_lab.config import CellSize, WorkspaceBounds
from lattice_lab.errors import OutOfWorkspaceError
from lattice_lab.types import Configuration, DiscreteState
from .axis import Axis


class Discretizer:
    """
    连续位形 <-> 栅格索引 的双向映射。

    - u / v 轴：硬边界，不回绕。越界的值必须在调用前被拒绝，这里不会截断。
    - q 轴：周期轴，离散化前先回绕到 [q_min, q_max)。
    - 反向映射取格子中心，保证 to_state(to_configuration(s)) == s。
    """

    def __init__(self, bounds: WorkspaceBounds, cell_size: CellSize):
        self.bounds = bounds
        self.cell_size = cell_size
        self.u_axis = Axis("u", bounds.u_min, bounds.u_max, cell_size.du)
        self.v_axis = Axis("v", bounds.v_min, bounds.v_max, cell_size.dv)
        self.q_axis = Axis("q", bounds.q_min, bounds.q_max, cell_size.dq, periodic=True)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.u_axis.size, self.v_axis.size, self.q_axis.size

    def to_state(self, config: Configuration) -> DiscreteState:
        """Configuration -> DiscreteState，要求位置已在工作空间内、航向已回绕"""
        return DiscreteState(self.u_axis.to_index(config.u),
                             self.v_axis.to_index(config.v),
                             self.q_axis.to_index(config.theta_rad))

    def to_configuration(self, state: DiscreteState) -> Configuration:
        """DiscreteState -> 格子中心的 Configuration"""
        return Configuration(self.u_axis.to_value(state.i),
                             self.v_axis.to_value(state.j),
                             self.q_axis.to_value(state.k))

    def wrap_heading(self, theta: float) -> float:
        return self.q_axis.wrap(theta)

    def contains(self, config: Configuration) -> bool:
        return self.u_axis.contains(config.u) and self.v_axis.contains(config.v)

    def is_valid(self, state: DiscreteState) -> bool:
        return (self.u_axis.is_valid_index(state.i) and
                self.v_axis.is_valid_index(state.j) and
                self.q_axis.is_valid_index(state.k))

    def discretize_endpoint(self, config: Configuration, which: str) -> DiscreteState:
        """
        起点/终点的离散化：在搜索开始前调用，越界直接报错。
        外部给定的航向可以是任意角度，这里先折回航向区间。
        """
        if not self.u_axis.contains(config.u):
            raise OutOfWorkspaceError(
                which, config, f"u={config.u} not in [{self.u_axis.min}, {self.u_axis.max})")
        if not self.v_axis.contains(config.v):
            raise OutOfWorkspaceError(
                which, config, f"v={config.v} not in [{self.v_axis.min}, {self.v_axis.max})")

        if not math.isfinite(config.theta_rad):
            raise OutOfWorkspaceError(which, config, "non-finite heading")

        theta = self.q_axis.normalize(config.theta_rad)
        state = self.to_state(Configuration(config.u, config.v, theta))
        if not self.is_valid(state):
            raise OutOfWorkspaceError(which, config, f"index {state} outside grid shape {self.shape}")
        return state

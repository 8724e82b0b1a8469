# [关键] 全局配置定义

# lattice_lab/config.py
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from lattice_lab.errors import PlannerConfigError
from lattice_lab.types import Configuration
from lattice_lab.vehicles.config import UnicycleConfig

FULL_TURN = 2.0 * math.pi


class SearchMode(Enum):
    # 所有边代价为 1，FIFO 队列，首次发现即最优
    BFS = 0

    # 边代价非负且可不同，最小堆 + 惰性删除
    DIJKSTRA = 1


@dataclass(frozen=True)
class WorkspaceBounds:
    """工作空间 [u_min, u_max) x [v_min, v_max) x [q_min, q_max)"""
    u_min: float
    u_max: float
    v_min: float
    v_max: float
    q_min: float = 0.0
    q_max: float = FULL_TURN

    def __post_init__(self):
        for name, value in (("u_min", self.u_min), ("u_max", self.u_max),
                            ("v_min", self.v_min), ("v_max", self.v_max),
                            ("q_min", self.q_min), ("q_max", self.q_max)):
            if not math.isfinite(value):
                raise PlannerConfigError(f"bound {name} must be finite, got {value}")
        for name, lo, hi in (("u", self.u_min, self.u_max),
                             ("v", self.v_min, self.v_max),
                             ("q", self.q_min, self.q_max)):
            if not lo < hi:
                raise PlannerConfigError(f"{name}-axis bounds must satisfy min < max, got [{lo}, {hi})")
        # 航向轴按整圈回绕，区间长度必须恰好是一圈
        if not math.isclose(self.q_max - self.q_min, FULL_TURN, rel_tol=0.0, abs_tol=1e-9):
            raise PlannerConfigError(
                f"heading range must span one full turn, got [{self.q_min}, {self.q_max})")

    def contains_position(self, u: float, v: float) -> bool:
        return self.u_min <= u < self.u_max and self.v_min <= v < self.v_max


@dataclass(frozen=True)
class CellSize:
    du: float
    dv: float
    dq: float

    def __post_init__(self):
        for name, step in (("du", self.du), ("dv", self.dv), ("dq", self.dq)):
            if not (math.isfinite(step) and step > 0):
                raise PlannerConfigError(f"cell size {name} must be positive and finite, got {step}")


@dataclass(frozen=True)
class PlannerConfig:
    """
    一次搜索的全部参数，构造后不可变。
    不同参数的规划器可以同时存在，互不影响。
    """
    bounds: WorkspaceBounds
    cell_size: CellSize
    start: Configuration
    goal: Configuration
    speed: float = 0.1                      # [m/s]
    time_step: float = 0.1                  # [s]
    angular_rates: Tuple[float, ...] = (-math.pi / 6, 0.0, math.pi / 6)  # [rad/s]

    mode: SearchMode = SearchMode.BFS
    # 每个角速度对应的权重，Dijkstra 边代价 = time_step * weight
    rate_weights: Optional[Tuple[float, ...]] = None
    # 外部迭代上限，超过后按 "no path" 处理
    max_expansions: Optional[int] = None

    vehicle: UnicycleConfig = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "angular_rates", tuple(float(w) for w in self.angular_rates))
        if not self.angular_rates:
            raise PlannerConfigError("angular rate set must not be empty")
        if not all(math.isfinite(w) for w in self.angular_rates):
            raise PlannerConfigError(f"angular rates must be finite, got {self.angular_rates}")
        if not (math.isfinite(self.speed) and self.speed > 0):
            raise PlannerConfigError(f"speed must be positive and finite, got {self.speed}")
        if not (math.isfinite(self.time_step) and self.time_step > 0):
            raise PlannerConfigError(f"time step must be positive and finite, got {self.time_step}")

        if self.rate_weights is not None:
            weights = tuple(float(w) for w in self.rate_weights)
            if len(weights) != len(self.angular_rates):
                raise PlannerConfigError(
                    f"expected {len(self.angular_rates)} rate weights, got {len(weights)}")
            if any(not math.isfinite(w) or w < 0 for w in weights):
                raise PlannerConfigError(f"rate weights must be finite and non-negative, got {weights}")
            object.__setattr__(self, "rate_weights", weights)

        if self.max_expansions is not None and self.max_expansions <= 0:
            raise PlannerConfigError(f"max_expansions must be positive, got {self.max_expansions}")

        object.__setattr__(self, "vehicle", UnicycleConfig(
            speed=self.speed, time_step=self.time_step, angular_rates=self.angular_rates))

    @classmethod
    def from_degrees(cls,
                     bounds: Tuple[float, float, float, float, float, float],
                     cell_size: Tuple[float, float, float],
                     start: Tuple[float, float, float],
                     goal: Tuple[float, float, float],
                     angular_rates: Sequence[float],
                     **kwargs) -> "PlannerConfig":
        """
        航向、航向边界、角度栅格和角速度以度为单位给出，在这里统一换算成弧度。
        """
        u_min, u_max, v_min, v_max, q_min, q_max = bounds
        du, dv, dq = cell_size
        return cls(
            bounds=WorkspaceBounds(u_min, u_max, v_min, v_max, math.radians(q_min), math.radians(q_max)),
            cell_size=CellSize(du, dv, math.radians(dq)),
            start=Configuration(start[0], start[1], math.radians(start[2])),
            goal=Configuration(goal[0], goal[1], math.radians(goal[2])),
            angular_rates=tuple(math.radians(w) for w in angular_rates),
            **kwargs)

    def edge_weights(self) -> Tuple[float, ...]:
        if self.rate_weights is None:
            return tuple(1.0 for _ in self.angular_rates)
        return self.rate_weights

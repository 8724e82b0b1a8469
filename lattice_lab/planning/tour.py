# lattice_lab/planning/tour.py
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from lattice_lab.config import PlannerConfig, WorkspaceBounds
from lattice_lab.planning.interfaces import IPlannerObserver
from lattice_lab.planning.planners import create_planner
from lattice_lab.types import Configuration, PlanResult

# 分段衔接点的比较容差 (格子中心由不同窗口原点算出，可能差几个 ulp)
_JOINT_TOL = 1e-9


def _snap_down(value: float, origin: float, step: float) -> float:
    return origin + math.floor((value - origin) / step) * step


def _snap_above(value: float, origin: float, step: float) -> float:
    # 严格大于 value 的第一条格线，保证 value 落在半开区间内
    return origin + (math.floor((value - origin) / step) + 1) * step


def leg_bounds(start: Configuration,
               goal: Configuration,
               base: WorkspaceBounds,
               margin: float,
               du: float,
               dv: float) -> WorkspaceBounds:
    """
    单段路径的工作窗口：包住两个端点，四周至少留 margin。
    窗口边界对齐到 base 的格线 (base.u_min + n*du)，所有分段共用同一套格子，
    前一段的终点格与后一段的起点格是同一个格子。航向范围沿用 base。
    """
    return WorkspaceBounds(
        u_min=_snap_down(min(start.u, goal.u) - margin, base.u_min, du),
        u_max=_snap_above(max(start.u, goal.u) + margin, base.u_min, du),
        v_min=_snap_down(min(start.v, goal.v) - margin, base.v_min, dv),
        v_max=_snap_above(max(start.v, goal.v) + margin, base.v_min, dv),
        q_min=base.q_min,
        q_max=base.q_max,
    )


def _same_point(a: Configuration, b: Configuration) -> bool:
    return all(math.isclose(x, y, rel_tol=0.0, abs_tol=_JOINT_TOL)
               for x, y in zip(a.as_tuple(), b.as_tuple()))


@dataclass
class TourResult:
    legs: List[PlanResult] = field(default_factory=list)
    found: bool = False

    @property
    def total_cost(self) -> Optional[float]:
        if not self.found:
            return None
        return sum(leg.cost for leg in self.legs)

    @property
    def configurations(self) -> List[Configuration]:
        """
        各段位形首尾相接。衔接点只在前后两段给出同一个格子中心时去重，
        否则保留后一段的起点，不会悄悄丢掉一个点。
        """
        joined: List[Configuration] = []
        for leg in self.legs:
            if not leg.found:
                break
            points = leg.configurations
            if joined and points and _same_point(joined[-1], points[0]):
                points = points[1:]
            joined.extend(points)
        return joined


class TourPlanner:
    """
    依次经过一串子目标：每段 waypoints[i] -> waypoints[i+1] 独立规划。
    某一段找不到路径时停止，返回到该段为止的结果。

    fixed_bounds=True 时所有段共用 base_config 的工作空间；
    否则每段按端点自动划定窗口，边距默认取最小转弯半径 + 一格。
    """

    def __init__(self,
                 base_config: PlannerConfig,
                 fixed_bounds: bool = True,
                 margin: Optional[float] = None):
        self.base_config = base_config
        self.fixed_bounds = fixed_bounds
        if margin is None:
            radius = base_config.vehicle.turning_radius
            if math.isinf(radius):
                # 只有直行基元时没有转弯半径
                radius = 0.0
            margin = radius + max(base_config.cell_size.du, base_config.cell_size.dv)
        self.margin = margin

    def leg_config(self, start: Configuration, goal: Configuration) -> PlannerConfig:
        if self.fixed_bounds:
            return replace(self.base_config, start=start, goal=goal)
        cell = self.base_config.cell_size
        bounds = leg_bounds(start, goal, self.base_config.bounds, self.margin, cell.du, cell.dv)
        return replace(self.base_config, bounds=bounds, start=start, goal=goal)

    def plan_tour(self,
                  waypoints: Sequence[Configuration],
                  debugger: Optional[IPlannerObserver] = None) -> TourResult:
        if len(waypoints) < 2:
            raise ValueError("A tour needs at least two waypoints")

        result = TourResult()
        for start, goal in zip(waypoints[:-1], waypoints[1:]):
            planner = create_planner(self.leg_config(start, goal))
            leg = planner.plan(debugger=debugger)
            result.legs.append(leg)
            if not leg.found:
                return result

        result.found = True
        return result

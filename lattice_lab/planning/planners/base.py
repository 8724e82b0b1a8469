# lattice_lab/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from lattice_lab.config import PlannerConfig
from lattice_lab.map.discretizer import Discretizer
from lattice_lab.map.grid_store import GridStore
from lattice_lab.planning.costs.base import CostFunction
from lattice_lab.planning.interfaces import IPlannerObserver
from lattice_lab.planning.primitives import PrimitiveGenerator
from lattice_lab.planning.reconstruction import PathReconstructor
from lattice_lab.types import Configuration, DiscreteState, PlanResult
from lattice_lab.vehicles.unicycle import UnicycleVehicle
from lattice_lab.visualization.observers import EfficientObserver

# 搜索终止原因
GOAL_REACHED = "goal_reached"
FRONTIER_EXHAUSTED = "frontier_exhausted"
MAX_EXPANSIONS = "max_expansions"


class PlannerBase(ABC):
    """
    所有路径规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             start: Optional[Configuration] = None,
             goal: Optional[Configuration] = None,
             debugger: Optional[IPlannerObserver] = None) -> PlanResult:
        """
        执行路径规划
        :param start: 起点 (缺省使用配置中的起点)
        :param goal: 终点 (缺省使用配置中的终点)
        :param debugger: 观察者钩子 (用于记录搜索过程)
        :return: PlanResult；找不到路径时 found=False，不抛异常
        """
        pass


class LatticePlannerBase(PlannerBase):
    """
    栅格搜索的公共骨架。

    工作流程：
    1. 离散化起点/终点，越界直接报错 (在分配栅格之前)。
    2. 创建 GridStore，起点代价置 0。
    3. 子类实现 _search：从 frontier 取状态，调用 PrimitiveGenerator 展开，更新 GridStore。
    4. PathReconstructor 沿前驱回溯，输出连续位形与速度指令。
    """

    name = "Lattice"

    def __init__(self, config: PlannerConfig, cost_fn: CostFunction):
        self.config = config
        self.discretizer = Discretizer(config.bounds, config.cell_size)
        self.vehicle = UnicycleVehicle(config.vehicle)
        self.generator = PrimitiveGenerator(self.vehicle, self.discretizer, cost_fn)
        self.reconstructor = PathReconstructor(self.discretizer, self.generator.primitives)

    def plan(self,
             start: Optional[Configuration] = None,
             goal: Optional[Configuration] = None,
             debugger: Optional[IPlannerObserver] = None) -> PlanResult:

        if debugger is None:
            debugger = EfficientObserver()
        start = self.config.start if start is None else start
        goal = self.config.goal if goal is None else goal

        # 1. 坐标离散化 (Configuration -> DiscreteState)，失败即抛 OutOfWorkspaceError
        start_state = self.discretizer.discretize_endpoint(start, "start")
        goal_state = self.discretizer.discretize_endpoint(goal, "goal")

        # 2. 初始化栅格存储
        store = GridStore(self.discretizer.shape)
        debugger.set_map_info(store)
        debugger.log(f"[{self.name}] Plan requested: {start_state} -> {goal_state}",
                     payload={"shape": store.shape, "start": start, "goal": goal})

        store.set(start_state, 0.0)
        debugger.record_open_set_node(start_state, 0.0)

        # 3. 主循环
        reason, expansions = self._search(store, start_state, goal_state, debugger)

        if reason != GOAL_REACHED:
            debugger.log(f"[{self.name}] No path found ({reason}) after {expansions} expansions.",
                         level='WARN',
                         payload={"visited": store.visited_count()})
            return PlanResult.no_path(reason, expansions)

        # 4. 回溯路径
        result = self.reconstructor.reconstruct(store, start_state, goal_state, expansions)
        debugger.log(f"[{self.name}] Goal reached: cost={result.cost}, length={len(result.states)}",
                     payload={"expansions": expansions, "visited": store.visited_count()})
        return result

    @abstractmethod
    def _search(self,
                store: GridStore,
                start_state: DiscreteState,
                goal_state: DiscreteState,
                debugger: IPlannerObserver) -> Tuple[str, int]:
        """
        运行搜索直到终点出队、frontier 为空或达到扩展上限。
        :return: (终止原因, 扩展次数)
        """
        pass

    def _expansion_limit_reached(self, expansions: int) -> bool:
        limit = self.config.max_expansions
        return limit is not None and expansions >= limit

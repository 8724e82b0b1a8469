# lattice_lab/planning/planners/bfs.py
from collections import deque
from typing import Deque, Tuple

from lattice_lab.config import PlannerConfig
from lattice_lab.map.grid_store import GridStore
from lattice_lab.planning.costs.unit_cost import UnitCost
from lattice_lab.planning.interfaces import IPlannerObserver
from lattice_lab.types import DiscreteState
from .base import LatticePlannerBase, GOAL_REACHED, FRONTIER_EXHAUSTED, MAX_EXPANSIONS


class BFSPlanner(LatticePlannerBase):
    """
    等代价 (BFS) 模式：每条边代价为 1，frontier 是严格的 FIFO 队列。

    首次发现某状态时的代价就是最优代价，所以每个状态只入队一次，
    发现即定案 (UNVISITED -> FINALIZED)。终点出队 (而不是被发现) 时提前结束。
    """

    name = "BFS"

    def __init__(self, config: PlannerConfig):
        super().__init__(config, UnitCost())

    def _search(self,
                store: GridStore,
                start_state: DiscreteState,
                goal_state: DiscreteState,
                debugger: IPlannerObserver) -> Tuple[str, int]:

        store.mark_finalized(start_state)
        queue: Deque[DiscreteState] = deque([start_state])
        expansions = 0

        while queue:
            current = queue.popleft()
            current_cost = store.get(current)
            debugger.record_current_expansion(current, current_cost)

            # A. 终止条件
            if current == goal_state:
                return GOAL_REACHED, expansions

            if self._expansion_limit_reached(expansions):
                return MAX_EXPANSIONS, expansions
            expansions += 1

            # B. 从格子中心展开所有基元
            center = self.discretizer.to_configuration(current)
            for transition in self.generator.successors(center):
                nxt = transition.state
                if store.is_visited(nxt):
                    continue

                store.set(nxt, current_cost + transition.primitive.cost, current, transition.primitive.index)
                store.mark_finalized(nxt)
                queue.append(nxt)

                debugger.record_open_set_node(nxt, current_cost + transition.primitive.cost)
                debugger.record_edge(current, nxt)

        return FRONTIER_EXHAUSTED, expansions

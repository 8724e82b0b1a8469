# lattice_lab/planning/planners/dijkstra.py
import heapq
from itertools import count
from typing import List, Tuple

from lattice_lab.config import PlannerConfig
from lattice_lab.map.grid_store import GridStore
from lattice_lab.planning.costs.time_cost import TimeCost
from lattice_lab.planning.interfaces import IPlannerObserver
from lattice_lab.types import DiscreteState, FrontierEntry
from .base import LatticePlannerBase, GOAL_REACHED, FRONTIER_EXHAUSTED, MAX_EXPANSIONS


class DijkstraPlanner(LatticePlannerBase):
    """
    加权 (Dijkstra) 模式：边代价 = time_step * weight[primitive]，非负。

    frontier 是按累计代价排序的最小堆，同代价按插入顺序出队。
    同一状态可以多次入队 (惰性删除)：出队时若优先级大于 GridStore 中记录的代价，
    说明条目已过期，直接丢弃。每个状态只会以最优代价被扩展一次。
    """

    name = "Dijkstra"

    def __init__(self, config: PlannerConfig):
        super().__init__(config, TimeCost(config.time_step, config.edge_weights()))

    def _search(self,
                store: GridStore,
                start_state: DiscreteState,
                goal_state: DiscreteState,
                debugger: IPlannerObserver) -> Tuple[str, int]:

        sequence = count()
        open_set: List[FrontierEntry] = [FrontierEntry(0.0, next(sequence), start_state)]
        expansions = 0

        while open_set:
            entry = heapq.heappop(open_set)
            current = entry.state
            current_cost = store.get(current)

            # 过期条目：之后找到过更便宜的路径
            if entry.priority > current_cost:
                continue

            store.mark_finalized(current)
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
                new_cost = current_cost + transition.primitive.cost

                if store.is_finalized(nxt) or new_cost >= store.get(nxt):
                    continue

                store.set(nxt, new_cost, current, transition.primitive.index)
                heapq.heappush(open_set, FrontierEntry(new_cost, next(sequence), nxt))

                debugger.record_open_set_node(nxt, new_cost)
                debugger.record_edge(current, nxt)

        return FRONTIER_EXHAUSTED, expansions

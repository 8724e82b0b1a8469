# lattice_lab/planning/reconstruction.py
import math
from typing import List, Sequence

from lattice_lab.errors import LatticeInvariantError
from lattice_lab.map.discretizer import Discretizer
from lattice_lab.map.grid_store import GridStore
from lattice_lab.planning.primitives import MotionPrimitive
from lattice_lab.types import DiscreteState, PlanResult


class PathReconstructor:
    """
    从终点沿前驱回溯到起点，再反转得到 起点 -> 终点 的状态序列，
    并把每个状态换算回格子中心位形和对应的速度指令。
    """

    def __init__(self, discretizer: Discretizer, primitives: Sequence[MotionPrimitive]):
        self.discretizer = discretizer
        self.primitives = list(primitives)

    def backtrace(self, store: GridStore, start: DiscreteState, goal: DiscreteState) -> List[DiscreteState]:
        """回溯前驱链；链条断裂或成环属于内部缺陷"""
        path = [goal]
        current = goal
        # 前驱构成以起点为根的树，链长不可能超过格子总数
        for _ in range(store.size):
            if current == start:
                break
            prev = store.predecessor(current)
            if prev is None:
                raise LatticeInvariantError(f"predecessor chain broken at {current}")
            path.append(prev)
            current = prev
        else:
            raise LatticeInvariantError(f"predecessor chain from {goal} never reaches {start}")

        if store.get(start) != 0.0:
            raise LatticeInvariantError(f"start state {start} has non-zero cost {store.get(start)}")
        return path[::-1]

    def reconstruct(self,
                    store: GridStore,
                    start: DiscreteState,
                    goal: DiscreteState,
                    expansions: int = 0) -> PlanResult:
        cost = store.get(goal)
        if not math.isfinite(cost):
            return PlanResult.no_path("goal_not_reached", expansions)

        states = self.backtrace(store, start, goal)
        configurations = [self.discretizer.to_configuration(s) for s in states]

        commands = []
        for state in states[1:]:
            primitive = store.primitive(state)
            if primitive is None:
                raise LatticeInvariantError(f"state {state} has a predecessor but no primitive")
            commands.append(self.primitives[primitive].command)

        return PlanResult(found=True,
                          reason="goal_reached",
                          cost=cost,
                          states=states,
                          configurations=configurations,
                          commands=commands,
                          expansions=expansions)

# lattice_lab/planning/costs/time_cost.py
from typing import Sequence

from .base import CostFunction


class TimeCost(CostFunction):
    """
    时间代价：Cost = time_step * weight[primitive]
    权重全为 1 时即累计时间。
    """
    def __init__(self, time_step: float, weights: Sequence[float]):
        self.time_step = time_step
        self.weights = tuple(weights)

    def calculate(self, primitive_index: int) -> float:
        return self.time_step * self.weights[primitive_index]

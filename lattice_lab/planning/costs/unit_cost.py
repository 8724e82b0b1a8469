# lattice_lab/planning/costs/unit_cost.py
from .base import CostFunction


class UnitCost(CostFunction):
    """每条边代价为 1，代价即步数 (BFS)"""
    def calculate(self, primitive_index: int) -> float:
        return 1.0

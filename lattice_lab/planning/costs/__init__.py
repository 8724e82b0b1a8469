# lattice_lab/planning/costs/__init__.py

from .base import CostFunction
from .unit_cost import UnitCost
from .time_cost import TimeCost

__all__ = ['CostFunction', 'UnitCost', 'TimeCost']

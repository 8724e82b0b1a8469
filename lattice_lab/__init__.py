# lattice_lab/__init__.py

from .types import Configuration, DiscreteState, FrontierEntry, PlanResult, VelocityCommand
from .config import PlannerConfig, WorkspaceBounds, CellSize, SearchMode
from .errors import PlannerConfigError, OutOfWorkspaceError, LatticeInvariantError

__all__ = [
    "Configuration",
    "DiscreteState",
    "FrontierEntry",
    "PlanResult",
    "VelocityCommand",
    "PlannerConfig",
    "WorkspaceBounds",
    "CellSize",
    "SearchMode",
    "PlannerConfigError",
    "OutOfWorkspaceError",
    "LatticeInvariantError",
]

# lattice_lab/planning/planners/__init__.py

from lattice_lab.config import PlannerConfig, SearchMode
from .base import PlannerBase, LatticePlannerBase
from .bfs import BFSPlanner
from .dijkstra import DijkstraPlanner


def create_planner(config: PlannerConfig) -> LatticePlannerBase:
    """按配置中的 SearchMode 选择规划器"""
    if config.mode == SearchMode.BFS:
        return BFSPlanner(config)
    if config.mode == SearchMode.DIJKSTRA:
        return DijkstraPlanner(config)
    raise ValueError(f"Unsupported search mode: {config.mode}")


__all__ = [
    "PlannerBase",
    "LatticePlannerBase",
    "BFSPlanner",
    "DijkstraPlanner",
    "create_planner",
]

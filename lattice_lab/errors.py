# lattice_lab/errors.py
from typing import Any


class PlannerConfigError(ValueError):
    """配置非法：边界 min >= max、栅格尺寸 <= 0、角速度集合为空等"""
    pass


class OutOfWorkspaceError(ValueError):
    """起点或终点不在工作空间内 (在分配栅格之前检测)"""

    def __init__(self, which: str, configuration: Any, reason: str = ""):
        self.which = which
        self.configuration = configuration
        message = f"{which} {configuration} is outside the workspace"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class LatticeInvariantError(RuntimeError):
    """
    内部不变量被破坏 (索引越界、负代价、前驱链断裂)。
    离散化与运动基元保证它不会发生，一旦出现即是程序缺陷，不应被捕获。
    """
    pass

# lattice_lab/types.py
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class Configuration:
    """
    连续位形 (u, v, theta)
    """
    u: float             # [m]
    v: float             # [m]
    theta_rad: float     # [rad]

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.u, self.v, self.theta_rad


class DiscreteState(NamedTuple):
    """栅格索引 (i, j, k)，搜索图的节点键"""
    i: int
    j: int
    k: int

    def __str__(self):
        return f"({self.i}, {self.j}, {self.k})"


@dataclass(order=True)
class FrontierEntry:
    """
    优先队列条目：按 (priority, sequence) 升序排列。
    sequence 是插入序号，相同代价时按先进先出出队。
    """
    priority: float
    sequence: int
    state: DiscreteState = field(compare=False)


@dataclass(frozen=True)
class VelocityCommand:
    """单步指令：平移速度 [m/s] 与角速度 [rad/s]"""
    speed: float
    angular_rate: float


@dataclass
class PlanResult:
    """
    一次搜索的结果。
    found=False 表示 "no path"，此时 states/configurations/commands 均为空。
    """
    found: bool
    reason: str
    cost: Optional[float] = None
    states: List[DiscreteState] = field(default_factory=list)
    configurations: List[Configuration] = field(default_factory=list)
    commands: List[VelocityCommand] = field(default_factory=list)
    expansions: int = 0

    @classmethod
    def no_path(cls, reason: str, expansions: int = 0) -> "PlanResult":
        return cls(found=False, reason=reason, expansions=expansions)

    def __bool__(self):
        return self.found

    def rows(self) -> Iterator[Tuple[float, float, float, float]]:
        """
        逐状态输出 (u, v, V, theta)。
        起点没有产生它的指令，沿用第一条指令的速度 (或 0)。
        """
        speed = self.commands[0].speed if self.commands else 0.0
        for config in self.configurations:
            yield config.u, config.v, speed, config.theta_rad

# lattice_lab/map/axis.py
import math
from dataclasses import dataclass, field

# 区间长度 / 栅格尺寸 的取整容差，避免 2pi / (pi/6) = 12.000000000000002 多出一格
_SIZE_EPS = 1e-9


@dataclass(frozen=True)
class Axis:
    """
    一条离散化坐标轴：半开区间 [min, max)，按 step 切分。
    第 n 个格子覆盖 [min + n*step, min + (n+1)*step)，代表值取格子中心。

    区间长度不是 step 整数倍时保留最后一个不完整的格子，它的中心可能落在 max 之外
    (例如 [0, 4.2) 按 0.5 切分，最后一格中心为 4.25)。输出的路径点是格子中心，
    不做截断；需要严格落在工作空间内时，让区间长度取 step 的整数倍。
    """
    name: str
    min: float
    max: float
    step: float
    periodic: bool = False
    size: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "size", int(math.ceil((self.max - self.min) / self.step - _SIZE_EPS)))

    def to_index(self, value: float) -> int:
        """
        物理值 -> 栅格索引
        向下取整：floor((value - min) / step)
        """
        index = int(math.floor((value - self.min) / self.step))
        if self.periodic:
            # 浮点误差可能把 max 附近的角度算进第 size 格
            index %= self.size
        return index

    def to_value(self, index: int) -> float:
        """
        栅格索引 -> 物理值
        返回格子中心：index * step + min + step/2
        """
        return index * self.step + self.min + self.step / 2.0

    def contains(self, value: float) -> bool:
        return self.min <= value < self.max

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.size

    def wrap(self, value: float) -> float:
        """
        周期轴：低于下界加一整圈，达到上界减一整圈。
        非周期轴原样返回 (越界由调用方拒绝，绝不截断)。
        """
        if not self.periodic:
            return value
        period = self.max - self.min
        if value < self.min:
            value += period
        elif value >= self.max:
            value -= period
        return value

    def normalize(self, value: float) -> float:
        """周期轴：任意角度折回 [min, max)，用于外部给定的起点/终点"""
        if not self.periodic:
            return value
        period = self.max - self.min
        value = self.min + math.fmod(value - self.min, period)
        if value < self.min:
            value += period
        return self.wrap(value)

# lattice_lab/map/grid_store.py
import numpy as np
from typing import Optional, Tuple

from lattice_lab.errors import LatticeInvariantError
from lattice_lab.types import DiscreteState

# 前驱/基元缺省值，只在数组内部使用，不会作为合法索引泄露出去
_NONE = -1


class GridStore:
    """
    每个离散状态的 最优代价 / 前驱 / 产生它的运动基元 / 是否已定案。

    底层是扁平 numpy 数组 + 线性索引函数，形状在创建时固定，之后不再改变。
    单次搜索独占，单线程修改。

    状态机：UNVISITED (cost=inf) -> FRONTIER (有限暂定代价) -> FINALIZED。
    定案后的代价不允许再被改写。
    """

    def __init__(self, shape: Tuple[int, int, int]):
        if any(n <= 0 for n in shape):
            raise LatticeInvariantError(f"grid shape must be positive, got {shape}")
        self._shape = tuple(int(n) for n in shape)
        size = self._shape[0] * self._shape[1] * self._shape[2]
        self._cost = np.full(size, np.inf, dtype=np.float64)            # 初始化为 "无穷"
        self._prev = np.full(size, _NONE, dtype=np.int64)               # 前驱的线性索引
        self._primitive = np.full(size, _NONE, dtype=np.int16)          # 产生该状态的基元编号
        self._finalized = np.zeros(size, dtype=bool)

    def __repr__(self):
        return f"GridStore(shape={self._shape}, visited={self.visited_count()})"

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self._shape

    @property
    def size(self) -> int:
        return self._cost.size

    def linear_index(self, state: DiscreteState) -> int:
        """(i, j, k) -> (i * Nj + j) * Nk + k，越界属于程序缺陷"""
        ni, nj, nk = self._shape
        i, j, k = state
        if not (0 <= i < ni and 0 <= j < nj and 0 <= k < nk):
            raise LatticeInvariantError(f"state {state} outside grid shape {self._shape}")
        return (i * nj + j) * nk + k

    def state_at(self, index: int) -> DiscreteState:
        _, nj, nk = self._shape
        ij, k = divmod(int(index), nk)
        i, j = divmod(ij, nj)
        return DiscreteState(i, j, k)

    def get(self, state: DiscreteState) -> float:
        return float(self._cost[self.linear_index(state)])

    def is_visited(self, state: DiscreteState) -> bool:
        return bool(np.isfinite(self._cost[self.linear_index(state)]))

    def set(self,
            state: DiscreteState,
            cost: float,
            predecessor: Optional[DiscreteState] = None,
            primitive: Optional[int] = None):
        idx = self.linear_index(state)
        if cost < 0:
            raise LatticeInvariantError(f"negative cost {cost} for state {state}")
        if self._finalized[idx]:
            raise LatticeInvariantError(
                f"state {state} is finalized with cost {self._cost[idx]}, refusing to record {cost}")
        self._cost[idx] = cost
        self._prev[idx] = _NONE if predecessor is None else self.linear_index(predecessor)
        self._primitive[idx] = _NONE if primitive is None else primitive

    def mark_finalized(self, state: DiscreteState):
        idx = self.linear_index(state)
        if self._finalized[idx]:
            raise LatticeInvariantError(f"state {state} finalized twice")
        if not np.isfinite(self._cost[idx]):
            raise LatticeInvariantError(f"state {state} finalized without a cost")
        self._finalized[idx] = True

    def is_finalized(self, state: DiscreteState) -> bool:
        return bool(self._finalized[self.linear_index(state)])

    def predecessor(self, state: DiscreteState) -> Optional[DiscreteState]:
        prev = int(self._prev[self.linear_index(state)])
        if prev == _NONE:
            return None
        return self.state_at(prev)

    def primitive(self, state: DiscreteState) -> Optional[int]:
        p = int(self._primitive[self.linear_index(state)])
        return None if p == _NONE else p

    def visited_count(self) -> int:
        return int(np.count_nonzero(np.isfinite(self._cost)))

    def cost_array(self) -> np.ndarray:
        """只读的 (Ni, Nj, Nk) 代价视图，供可视化使用"""
        view = self._cost.reshape(self._shape)
        view.flags.writeable = False
        return view

# lattice_lab/planning/primitives.py
from dataclasses import dataclass
from typing import List

from lattice_lab.map.discretizer import Discretizer
from lattice_lab.planning.costs.base import CostFunction
from lattice_lab.types import Configuration, DiscreteState, VelocityCommand
from lattice_lab.vehicles.base import VehicleBase


@dataclass(frozen=True)
class MotionPrimitive:
    """一个固定的候选动作：(V, omega) 作用一个仿真步长"""
    index: int
    speed: float
    angular_rate: float
    cost: float

    @property
    def command(self) -> VelocityCommand:
        return VelocityCommand(self.speed, self.angular_rate)


@dataclass(frozen=True)
class Transition:
    """一次被接受的基元展开"""
    primitive: MotionPrimitive
    configuration: Configuration     # 航向已回绕
    state: DiscreteState


class PrimitiveGenerator:
    """
    从任意位形出发，为每个角速度生成一个候选后继。

    theta' = wrap(theta + omega * dT)
    位置按中点航向推进 (见 UnicycleVehicle)。
    位置落在工作空间外的候选直接丢弃，不会进入离散化。
    """

    def __init__(self, vehicle: VehicleBase, discretizer: Discretizer, cost_fn: CostFunction):
        self.vehicle = vehicle
        self.discretizer = discretizer
        self.time_step = vehicle.config.time_step
        self.primitives: List[MotionPrimitive] = [
            MotionPrimitive(idx, v, w, cost_fn.calculate(idx))
            for idx, (v, w) in enumerate(vehicle.primitive_controls())
        ]

    def apply(self, config: Configuration, primitive: MotionPrimitive) -> Configuration:
        """施加一个基元，返回航向已回绕的后继 (不做边界检查)"""
        nxt = self.vehicle.kinematic_propagate(
            config, (primitive.speed, primitive.angular_rate), self.time_step)
        return Configuration(nxt.u, nxt.v, self.discretizer.wrap_heading(nxt.theta_rad))

    def successors(self, config: Configuration) -> List[Transition]:
        transitions = []
        for primitive in self.primitives:
            nxt = self.apply(config, primitive)

            # 越界检查
            if not self.discretizer.contains(nxt):
                continue

            transitions.append(Transition(primitive, nxt, self.discretizer.to_state(nxt)))
        return transitions

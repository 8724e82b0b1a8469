import math
import sys
import os

# Ensure lattice_lab can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lattice_lab.config import CellSize, PlannerConfig, WorkspaceBounds
from lattice_lab.types import Configuration


class BenchmarkConfig:
    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_lattice")

    # --- Workspace ---
    BOUNDS = WorkspaceBounds(u_min=-2.0, u_max=2.0, v_min=-2.0, v_max=2.0,
                             q_min=0.0, q_max=2.0 * math.pi)
    CELL_SIZE = CellSize(du=0.5, dv=0.5, dq=math.pi / 6)

    # --- Robot ---
    ANGULAR_RATES = (-math.pi / 6, 0.0, math.pi / 6)   # [rad/s]
    TIME_STEP = 1.0                                     # [s]
    SPEED = 0.5                                         # [m/s] one cell per step
    SLOW_SPEED = 0.1                                    # [m/s] never leaves the start cell

    # --- Start & Goal ---
    START = Configuration(0.0, 0.0, 0.0)
    GOAL = Configuration(1.0, 0.0, 0.0)

    # --- Dijkstra weights (turning costs more than driving straight) ---
    TURN_WEIGHTS = (3.0, 1.0, 3.0)

    # --- Safety cap ---
    MAX_EXPANSIONS = 200000

    # --- Sub-goal tour: (u [m], v [m], heading [deg]) ---
    TOUR_WAYPOINTS_DEG = [
        (1.863, 0.000, 270.0),
        (2.484, -0.600, 0.0),
        (3.726, 0.000, 30.0),
        (4.968, 0.600, 0.0),
        (5.589, 0.000, 270.0),
        (4.968, -0.600, 180.0),
        (3.726, 0.000, 150.0),
        (2.484, 0.600, 180.0),
        (1.863, 0.000, 270.0),
    ]
    TOUR_CELL = 0.010                  # [m]
    TOUR_DQ_DEG = 3.0                  # [deg]
    TOUR_SPEED = 0.1                   # [m/s]
    TOUR_TIME_STEP = 0.1               # [s]
    TOUR_RATES_DEG = (-30.0, 0.0, 30.0)

    @classmethod
    def basic(cls, **overrides) -> PlannerConfig:
        params = dict(bounds=cls.BOUNDS, cell_size=cls.CELL_SIZE,
                      start=cls.START, goal=cls.GOAL,
                      speed=cls.SPEED, time_step=cls.TIME_STEP,
                      angular_rates=cls.ANGULAR_RATES,
                      max_expansions=cls.MAX_EXPANSIONS)
        params.update(overrides)
        return PlannerConfig(**params)

    @classmethod
    def unreachable(cls, **overrides) -> PlannerConfig:
        return cls.basic(speed=cls.SLOW_SPEED, **overrides)

    @classmethod
    def tour_waypoints(cls):
        return [Configuration(u, v, math.radians(q)) for u, v, q in cls.TOUR_WAYPOINTS_DEG]

    @classmethod
    def tour_base(cls, **overrides) -> PlannerConfig:
        """
        航向格子以 0 度为中心：[-dq/2, 360 - dq/2)。
        位置窗口由 TourPlanner 按每段端点自动划定，这里的 u/v 只是占位。
        """
        waypoints = cls.tour_waypoints()
        half = cls.TOUR_DQ_DEG / 2.0
        params = dict(
            bounds=(min(w.u for w in waypoints) - 1.0, max(w.u for w in waypoints) + 1.0,
                    min(w.v for w in waypoints) - 1.0, max(w.v for w in waypoints) + 1.0,
                    -half, 360.0 - half),
            cell_size=(cls.TOUR_CELL, cls.TOUR_CELL, cls.TOUR_DQ_DEG),
            start=cls.TOUR_WAYPOINTS_DEG[0],
            goal=cls.TOUR_WAYPOINTS_DEG[1],
            angular_rates=cls.TOUR_RATES_DEG,
            speed=cls.TOUR_SPEED,
            time_step=cls.TOUR_TIME_STEP,
            max_expansions=cls.MAX_EXPANSIONS * 10,
        )
        params.update(overrides)
        return PlannerConfig.from_degrees(**params)

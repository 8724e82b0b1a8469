# tests/planning/test_tour.py
import sys
import os
import math
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from lattice_lab.config import CellSize, PlannerConfig, WorkspaceBounds
from lattice_lab.planning.tour import TourPlanner, TourResult, leg_bounds
from lattice_lab.types import Configuration, PlanResult

ORIGIN = Configuration(0.0, 0.0, 0.0)


def make_base(speed=0.5):
    return PlannerConfig(bounds=WorkspaceBounds(-2.0, 2.0, -2.0, 2.0),
                         cell_size=CellSize(0.5, 0.5, math.pi / 6),
                         start=ORIGIN,
                         goal=ORIGIN,
                         speed=speed,
                         time_step=1.0)


def test_tour_with_fixed_bounds():
    waypoints = [ORIGIN,
                 Configuration(-1.0, 0.0, math.radians(195.0)),
                 Configuration(0.0, 0.0, math.radians(10.0))]
    result = TourPlanner(make_base()).plan_tour(waypoints)

    assert result.found
    assert [leg.cost for leg in result.legs] == [13.0, 22.0]
    assert result.total_cost == 35.0

    # 衔接点只保留一次
    joined = result.configurations
    assert len(joined) == 14 + 23 - 1
    assert joined[13] == result.legs[1].configurations[0]
    assert result.legs[0].states[-1] == result.legs[1].states[0]


def test_tour_stops_at_failed_leg():
    waypoints = [ORIGIN, Configuration(1.0, 0.0, 0.0), ORIGIN]
    result = TourPlanner(make_base(speed=0.1)).plan_tour(waypoints)

    assert not result.found
    assert len(result.legs) == 1
    assert result.legs[0].reason == "frontier_exhausted"
    assert result.total_cost is None
    assert result.configurations == []


def test_tour_needs_two_waypoints():
    with pytest.raises(ValueError):
        TourPlanner(make_base()).plan_tour([ORIGIN])


def test_leg_bounds_follow_base_lattice():
    base = WorkspaceBounds(-2.0, 2.0, -2.0, 2.0, -0.1, 2.0 * math.pi - 0.1)
    bounds = leg_bounds(Configuration(0.0, 0.0, 0.0), Configuration(1.0, -1.0, 0.0), base, 0.3, 0.5, 0.5)

    assert bounds.u_min == pytest.approx(-0.5)
    assert bounds.u_max == pytest.approx(1.5)
    assert bounds.v_min == pytest.approx(-1.5)
    assert bounds.v_max == pytest.approx(0.5)
    assert (bounds.q_min, bounds.q_max) == (base.q_min, base.q_max)


def test_leg_windows_share_joint_cells():
    waypoints = [ORIGIN, Configuration(1.1, 0.0, 0.0), Configuration(2.0, 0.0, 0.0)]
    result = TourPlanner(make_base(), fixed_bounds=False, margin=0.37).plan_tour(waypoints)

    assert result.found
    assert [leg.cost for leg in result.legs] == [2.0, 2.0]

    end_of_first = result.legs[0].configurations[-1]
    start_of_second = result.legs[1].configurations[0]
    assert end_of_first.as_tuple() == pytest.approx(start_of_second.as_tuple())
    assert end_of_first.u == pytest.approx(1.25)

    joined = result.configurations
    assert len(joined) == 5
    assert [c.u for c in joined] == pytest.approx([0.25, 0.75, 1.25, 1.75, 2.25])


def test_joint_kept_when_legs_disagree():
    first = PlanResult(found=True, reason="goal_reached", cost=1.0,
                       configurations=[Configuration(0.0, 0.0, 0.0), Configuration(1.0, 0.0, 0.0)])
    second = PlanResult(found=True, reason="goal_reached", cost=1.0,
                        configurations=[Configuration(1.1, 0.0, 0.0), Configuration(2.0, 0.0, 0.0)])
    result = TourResult(legs=[first, second], found=True)

    assert [c.u for c in result.configurations] == [0.0, 1.0, 1.1, 2.0]
    assert result.total_cost == 2.0


def test_default_margin_and_leg_window():
    base = make_base()
    tour = TourPlanner(base, fixed_bounds=False)
    assert tour.margin == pytest.approx(0.5 / (math.pi / 6) + 0.5)

    start = Configuration(3.0, 3.0, 0.0)
    goal = Configuration(4.0, 3.0, 0.0)
    config = tour.leg_config(start, goal)
    assert config.start == start and config.goal == goal
    assert config.bounds.contains_position(start.u, start.v)
    assert config.bounds.contains_position(goal.u, goal.v)
    # 其余参数沿用 base
    assert config.speed == base.speed
    assert config.cell_size == base.cell_size

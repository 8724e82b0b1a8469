# tests/planning/test_reconstruction.py
import sys
import os
import math
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from lattice_lab.config import CellSize, PlannerConfig, WorkspaceBounds
from lattice_lab.errors import LatticeInvariantError
from lattice_lab.map.grid_store import GridStore
from lattice_lab.planning.planners import BFSPlanner
from lattice_lab.types import Configuration, DiscreteState, PlanResult, VelocityCommand

START = DiscreteState(4, 4, 0)
MIDDLE = DiscreteState(5, 4, 0)
GOAL = DiscreteState(6, 4, 0)


@pytest.fixture
def planner():
    config = PlannerConfig(bounds=WorkspaceBounds(-2.0, 2.0, -2.0, 2.0),
                           cell_size=CellSize(0.5, 0.5, math.pi / 6),
                           start=Configuration(0.0, 0.0, 0.0),
                           goal=Configuration(1.0, 0.0, 0.0),
                           speed=0.5,
                           time_step=1.0)
    return BFSPlanner(config)


@pytest.fixture
def store(planner):
    return GridStore(planner.discretizer.shape)


def test_reconstruct_chain(planner, store):
    store.set(START, 0.0)
    store.set(MIDDLE, 1.0, START, 1)
    store.set(GOAL, 2.0, MIDDLE, 1)

    result = planner.reconstructor.reconstruct(store, START, GOAL, expansions=7)

    assert result.found
    assert result.cost == 2.0
    assert result.expansions == 7
    assert result.states == [START, MIDDLE, GOAL]
    assert result.commands == [VelocityCommand(0.5, 0.0), VelocityCommand(0.5, 0.0)]
    assert [c.u for c in result.configurations] == pytest.approx([0.25, 0.75, 1.25])


def test_goal_without_cost_is_no_path(planner, store):
    store.set(START, 0.0)
    result = planner.reconstructor.reconstruct(store, START, GOAL)

    assert not result.found
    assert not result
    assert result.reason == "goal_not_reached"
    assert result.states == []


def test_broken_chain_is_fatal(planner, store):
    store.set(START, 0.0)
    store.set(GOAL, 2.0)
    with pytest.raises(LatticeInvariantError):
        planner.reconstructor.backtrace(store, START, GOAL)


def test_start_with_nonzero_cost_is_fatal(planner, store):
    store.set(START, 1.0)
    store.set(GOAL, 2.0, START, 1)
    with pytest.raises(LatticeInvariantError):
        planner.reconstructor.backtrace(store, START, GOAL)


def test_rows_use_cell_centers(planner):
    result = planner.plan()
    rows = list(result.rows())

    assert len(rows) == len(result.states)
    for (u, v, speed, theta), state in zip(rows, result.states):
        center = planner.discretizer.to_configuration(state)
        assert (u, v, theta) == center.as_tuple()
        assert speed == 0.5


def test_no_path_rows_are_empty():
    result = PlanResult.no_path("frontier_exhausted", 12)
    assert list(result.rows()) == []
    assert result.expansions == 12

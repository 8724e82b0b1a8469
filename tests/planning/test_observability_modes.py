import sys
import os
import glob
import math
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from lattice_lab.config import CellSize, PlannerConfig, SearchMode, WorkspaceBounds
from lattice_lab.map.grid_store import GridStore
from lattice_lab.planning.planners import create_planner
from lattice_lab.types import Configuration
from lattice_lab.visualization.observers import EfficientObserver, ExperimentObserver, DebugObserver


@pytest.fixture(params=[SearchMode.BFS, SearchMode.DIJKSTRA])
def planner(request):
    config = PlannerConfig(bounds=WorkspaceBounds(-2.0, 2.0, -2.0, 2.0),
                           cell_size=CellSize(0.5, 0.5, math.pi / 6),
                           start=Configuration(0.0, 0.0, 0.0),
                           goal=Configuration(1.0, 0.0, 0.0),
                           speed=0.5,
                           time_step=1.0,
                           mode=request.param)
    return create_planner(config)


def test_efficient_mode(planner):
    observer = EfficientObserver()

    result = planner.plan(debugger=observer)

    # EfficientObserver 不记录任何东西
    assert result.found
    assert not hasattr(observer, 'expanded_nodes')
    assert not hasattr(observer, 'open_set_history')


def test_default_observer(planner):
    assert planner.plan().cost > 0


def test_experiment_mode(planner):
    observer = ExperimentObserver()

    result = planner.plan(debugger=observer)

    assert result.found
    assert len(observer.expanded_nodes) > 0
    assert len(observer.edges) > 0
    assert observer.open_set_history[0] == (result.states[0], 0.0)
    assert observer.expanded_nodes[-1] == result.states[-1]
    assert isinstance(observer.map_info, GridStore)
    assert any("Goal reached" in message for _, message in observer.messages)


def test_experiment_mode_records_failure():
    config = PlannerConfig(bounds=WorkspaceBounds(-2.0, 2.0, -2.0, 2.0),
                           cell_size=CellSize(0.5, 0.5, math.pi / 6),
                           start=Configuration(0.0, 0.0, 0.0),
                           goal=Configuration(1.0, 0.0, 0.0),
                           speed=0.1,
                           time_step=1.0)
    observer = ExperimentObserver()

    create_planner(config).plan(debugger=observer)

    assert ('WARN', "[BFS] No path found (frontier_exhausted) after 12 expansions.") in observer.messages


def test_debug_mode(planner, tmp_path):
    log_dir = str(tmp_path / "planning_debug")
    observer = DebugObserver(log_dir=log_dir)

    result = planner.plan(debugger=observer)
    observer.close()

    assert result.found
    assert len(observer.expanded_nodes) > 0

    log_files = glob.glob(os.path.join(log_dir, "plan_debug_*.log"))
    assert len(log_files) == 1
    with open(log_files[0], encoding='utf-8') as f:
        content = f.read()
    assert "Debug Session Started" in content
    assert "Plan requested" in content
    assert "Expanding:" in content
    assert "Goal reached" in content

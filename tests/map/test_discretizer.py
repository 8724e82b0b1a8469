# tests/map/test_discretizer.py
import sys
import os
import math
import pytest

# --- 路径设置 (确保能导入 lattice_lab) ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from lattice_lab.config import CellSize, WorkspaceBounds
from lattice_lab.errors import OutOfWorkspaceError
from lattice_lab.map.axis import Axis
from lattice_lab.map.discretizer import Discretizer
from lattice_lab.types import Configuration, DiscreteState


@pytest.fixture
def discretizer():
    bounds = WorkspaceBounds(-2.0, 2.0, -2.0, 2.0, 0.0, 2.0 * math.pi)
    return Discretizer(bounds, CellSize(0.5, 0.5, math.pi / 6))


def test_shape(discretizer):
    assert discretizer.shape == (8, 8, 12)


def test_round_trip_every_index(discretizer):
    for axis in (discretizer.u_axis, discretizer.v_axis, discretizer.q_axis):
        for i in range(axis.size):
            assert axis.to_index(axis.to_value(i)) == i


def test_round_trip_fine_and_offset_axes():
    # 原始数据里常见的 "以 0 为格子中心" 的偏移区间
    d = 0.005
    axis = Axis("v", -1.2 - d / 2.0, 1.2 + 3.0 * d / 2.0, d)
    assert axis.size == 482
    for i in range(axis.size):
        assert axis.to_index(axis.to_value(i)) == i

    dq = math.pi / 60.0
    q_axis = Axis("q", -dq / 2.0, 2.0 * math.pi - dq / 2.0, dq, periodic=True)
    assert q_axis.size == 120
    for i in range(q_axis.size):
        assert q_axis.to_index(q_axis.to_value(i)) == i


def test_half_open_cells():
    axis = Axis("u", -2.0, 2.0, 0.5)
    assert axis.to_index(-2.0) == 0
    assert axis.to_index(-1.5) == 1          # 下边界属于新格子
    assert axis.to_index(-1.5000001) == 0
    assert axis.to_index(1.999) == 7
    assert axis.contains(-2.0)
    assert not axis.contains(2.0)


def test_cell_center_convention():
    axis = Axis("u", -2.0, 2.0, 0.5)
    assert axis.to_value(0) == pytest.approx(-1.75)
    assert axis.to_value(4) == pytest.approx(0.25)


def test_partial_last_cell():
    axis = Axis("u", 0.0, 4.2, 0.5)
    assert axis.size == 9
    assert axis.to_index(4.19) == 8
    # 不完整格子的中心落在区间之外，输出时不截断
    assert axis.to_value(8) == pytest.approx(4.25)
    assert not axis.contains(axis.to_value(8))


def test_heading_wrap(discretizer):
    two_pi = 2.0 * math.pi
    assert discretizer.wrap_heading(-0.1) == pytest.approx(two_pi - 0.1)
    assert discretizer.wrap_heading(two_pi + 0.1) == pytest.approx(0.1)
    assert discretizer.wrap_heading(two_pi) == pytest.approx(0.0)
    assert discretizer.wrap_heading(1.0) == 1.0


def test_heading_index_just_below_max(discretizer):
    q_axis = discretizer.q_axis
    assert q_axis.to_index(q_axis.max - 1e-12) == q_axis.size - 1


def test_position_axes_are_not_wrapped(discretizer):
    assert discretizer.u_axis.wrap(5.0) == 5.0
    assert not discretizer.contains(Configuration(2.0, 0.0, 0.0))
    assert not discretizer.contains(Configuration(0.0, -2.1, 0.0))


def test_to_state_and_back(discretizer):
    state = discretizer.to_state(Configuration(0.0, 0.0, 0.0))
    assert state == DiscreteState(4, 4, 0)

    center = discretizer.to_configuration(state)
    assert center.u == pytest.approx(0.25)
    assert center.v == pytest.approx(0.25)
    assert center.theta_rad == pytest.approx(math.pi / 12)
    assert discretizer.to_state(center) == state


def test_discretize_endpoint_normalizes_heading(discretizer):
    state = discretizer.discretize_endpoint(Configuration(0.0, 0.0, -math.pi / 2 + 0.01), "start")
    assert state.k == 9
    state = discretizer.discretize_endpoint(Configuration(0.0, 0.0, 4 * math.pi + 0.1), "start")
    assert state.k == 0


def test_discretize_endpoint_rejects_outside(discretizer):
    with pytest.raises(OutOfWorkspaceError) as info:
        discretizer.discretize_endpoint(Configuration(2.5, 0.0, 0.0), "goal")
    assert info.value.which == "goal"

    # 上界是开区间
    with pytest.raises(OutOfWorkspaceError):
        discretizer.discretize_endpoint(Configuration(0.0, 2.0, 0.0), "start")


@pytest.mark.parametrize("theta", [math.nan, math.inf, -math.inf])
def test_discretize_endpoint_rejects_non_finite_heading(discretizer, theta):
    with pytest.raises(OutOfWorkspaceError) as info:
        discretizer.discretize_endpoint(Configuration(0.0, 0.0, theta), "start")
    assert info.value.which == "start"
    assert "non-finite heading" in str(info.value)


@pytest.mark.parametrize("u, v", [(math.nan, 0.0), (0.0, math.nan), (math.inf, 0.0), (0.0, -math.inf)])
def test_discretize_endpoint_rejects_non_finite_position(discretizer, u, v):
    with pytest.raises(OutOfWorkspaceError):
        discretizer.discretize_endpoint(Configuration(u, v, 0.0), "goal")

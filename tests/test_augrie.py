import math

import pytest

from shallowflow.augrie import AugRieSolver
from shallowflow.updates import NetUpdates


@pytest.fixture
def solver():
    return AugRieSolver()


def test_dry_dry_gives_zero_updates(solver):
    assert solver.compute_net_updates(0.0, 0.001, 0.0, 0.0, 1.0, 2.0) == NetUpdates()


def test_still_water_flat_bottom(solver):
    updates = solver.compute_net_updates(10.0, 10.0, 0.0, 0.0, 0.0, 0.0)
    assert updates.h_left == pytest.approx(0.0, abs=1e-9)
    assert updates.h_right == pytest.approx(0.0, abs=1e-9)
    assert updates.hu_left == pytest.approx(0.0, abs=1e-9)
    assert updates.hu_right == pytest.approx(0.0, abs=1e-9)
    assert updates.max_wave_speed == pytest.approx(math.sqrt(9.81 * 10.0))


def test_lake_at_rest_is_well_balanced(solver):
    updates = solver.compute_net_updates(10.0, 8.0, 0.0, 0.0, 0.0, 2.0)
    for value in (updates.h_left, updates.h_right, updates.hu_left, updates.hu_right):
        assert value == pytest.approx(0.0, abs=1e-8)
    assert updates.max_wave_speed > 0.0


@pytest.mark.parametrize(
    "h_left, h_right, hu_left, hu_right",
    [
        (10.0, 5.0, 0.0, 0.0),
        (4.0, 6.0, 3.0, -2.0),
        (8.0, 8.0, 10.0, -10.0),
        (2.0, 3.0, -5.0, -6.0),
    ],
)
def test_mass_flux_is_conserved_on_flat_bottom(solver, h_left, h_right, hu_left, hu_right):
    updates = solver.compute_net_updates(h_left, h_right, hu_left, hu_right, 0.0, 0.0)
    assert updates.h_left + updates.h_right == pytest.approx(hu_right - hu_left, abs=1e-8)


@pytest.mark.parametrize(
    "h_left, h_right, hu_left, hu_right, b_left, b_right",
    [
        (10.0, 5.0, 0.0, 0.0, 0.0, 0.0),
        (4.0, 6.0, 3.0, -2.0, 0.0, 0.5),
        (7.0, 3.0, 1.0, 2.0, -1.0, 0.0),
    ],
)
def test_mirror_symmetry(solver, h_left, h_right, hu_left, hu_right, b_left, b_right):
    forward = solver.compute_net_updates(h_left, h_right, hu_left, hu_right, b_left, b_right)
    mirrored = solver.compute_net_updates(h_right, h_left, -hu_right, -hu_left, b_right, b_left)
    assert mirrored.h_left == pytest.approx(forward.h_right, rel=1e-6, abs=1e-9)
    assert mirrored.h_right == pytest.approx(forward.h_left, rel=1e-6, abs=1e-9)
    assert mirrored.hu_left == pytest.approx(-forward.hu_right, rel=1e-6, abs=1e-9)
    assert mirrored.hu_right == pytest.approx(-forward.hu_left, rel=1e-6, abs=1e-9)
    assert mirrored.max_wave_speed == pytest.approx(forward.max_wave_speed, rel=1e-6)


def test_still_water_against_wall_on_right(solver):
    updates = solver.compute_net_updates(5.0, 0.0, 0.0, 0.0, 0.0, 10.0)
    assert updates.h_right == 0.0
    assert updates.hu_right == 0.0
    assert updates.h_left == pytest.approx(0.0, abs=1e-9)
    assert updates.hu_left == pytest.approx(0.0, abs=1e-9)


def test_flow_into_wall_on_right_only_updates_left(solver):
    updates = solver.compute_net_updates(5.0, 0.0, 5.0, 0.0, 0.0, 10.0)
    assert updates.h_right == 0.0
    assert updates.hu_right == 0.0
    assert abs(updates.hu_left) > 0.0
    assert updates.max_wave_speed > 0.0


def test_flow_into_wall_on_left_only_updates_right(solver):
    updates = solver.compute_net_updates(0.0, 5.0, 0.0, -5.0, 10.0, 0.0)
    assert updates.h_left == 0.0
    assert updates.hu_left == 0.0
    assert abs(updates.hu_right) > 0.0


def test_wall_cases_mirror_each_other(solver):
    right_wall = solver.compute_net_updates(5.0, 0.0, 5.0, 0.0, 0.0, 10.0)
    left_wall = solver.compute_net_updates(0.0, 5.0, 0.0, -5.0, 10.0, 0.0)
    assert left_wall.h_right == pytest.approx(right_wall.h_left, rel=1e-6)
    assert left_wall.hu_right == pytest.approx(-right_wall.hu_left, rel=1e-6)
    assert left_wall.max_wave_speed == pytest.approx(right_wall.max_wave_speed, rel=1e-6)


def test_inundation_moves_water(solver):
    updates = solver.compute_net_updates(5.0, 0.0, 0.0, 0.0, 0.0, -1.0)
    assert updates.h_left + updates.h_right == pytest.approx(0.0, abs=1e-9)
    assert abs(updates.h_left) > 1e-6
    assert updates.max_wave_speed > 0.0


def test_strong_momentum_overcomes_step(solver):
    weak = solver.compute_net_updates(1.0, 0.0, 0.1, 0.0, 0.0, 1.5)
    strong = solver.compute_net_updates(1.0, 0.0, 20.0, 0.0, 0.0, 1.5)
    assert weak.h_right == 0.0
    assert strong.h_right != 0.0 or strong.hu_right != 0.0
    assert strong.max_wave_speed > weak.max_wave_speed


def test_max_wave_speed_grows_with_depth(solver):
    shallow = solver.compute_net_updates(1.0, 1.0, 0.0, 0.0, 0.0, 0.0)
    deep = solver.compute_net_updates(100.0, 100.0, 0.0, 0.0, 0.0, 0.0)
    assert deep.max_wave_speed > shallow.max_wave_speed


def test_gravity_parameter_is_used():
    updates = AugRieSolver(gravity=1.0).compute_net_updates(4.0, 4.0, 0.0, 0.0, 0.0, 0.0)
    assert updates.max_wave_speed == pytest.approx(2.0)
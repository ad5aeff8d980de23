import pytest

from shallowflow.updates import NetUpdates, accumulate_waves


def test_left_going_wave_updates_left_cell_only():
    updates = accumulate_waves([(1.5, -2.5)], [-3.0], 1e-9)
    assert updates.h_left == 1.5
    assert updates.hu_left == -2.5
    assert updates.h_right == 0.0
    assert updates.hu_right == 0.0


def test_right_going_wave_updates_right_cell_only():
    updates = accumulate_waves([(0.75, 4.25)], [2.0], 1e-9)
    assert updates.h_right == 0.75
    assert updates.hu_right == 4.25
    assert updates.h_left == 0.0
    assert updates.hu_left == 0.0


def test_standing_wave_is_split_between_cells():
    updates = accumulate_waves([(3.0, -7.0)], [0.0], 1e-5)
    assert updates.h_left == updates.h_right
    assert updates.hu_left == updates.hu_right
    assert updates.h_left + updates.h_right == pytest.approx(3.0)
    assert updates.hu_left + updates.hu_right == pytest.approx(-7.0)


def test_speed_inside_tolerance_counts_as_zero():
    updates = accumulate_waves([(2.0, 2.0)], [1e-6], 1e-5)
    assert updates.h_left == updates.h_right


def test_max_wave_speed_is_largest_absolute_speed():
    updates = accumulate_waves([(1.0, 1.0), (1.0, 1.0), (1.0, 1.0)], [-5.0, 0.5, 2.0], 1e-9)
    assert updates.max_wave_speed == 5.0


def test_multiple_waves_are_summed_and_total_is_conserved():
    waves = [(1.0, 2.0), (0.25, 0.5), (-3.0, 4.0)]
    updates = accumulate_waves(waves, [-1.0, 0.0, 1.0], 1e-9)
    assert updates.h_left + updates.h_right == pytest.approx(sum(w[0] for w in waves))
    assert updates.hu_left + updates.hu_right == pytest.approx(sum(w[1] for w in waves))


def test_no_waves_give_zero_updates():
    assert accumulate_waves([], [], 1e-9) == NetUpdates()


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        accumulate_waves([(1.0, 1.0)], [1.0, 2.0], 1e-9)


def test_without_left_and_right_clear_one_side():
    updates = NetUpdates(1.0, 2.0, 3.0, 4.0, 5.0)
    left_cleared = updates.without_left()
    right_cleared = updates.without_right()
    assert (left_cleared.h_left, left_cleared.hu_left) == (0.0, 0.0)
    assert (left_cleared.h_right, left_cleared.hu_right) == (2.0, 4.0)
    assert (right_cleared.h_right, right_cleared.hu_right) == (0.0, 0.0)
    assert (right_cleared.h_left, right_cleared.hu_left) == (1.0, 3.0)
    assert left_cleared.max_wave_speed == 5.0
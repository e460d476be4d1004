import math

import pytest

from simulation.eye import Eye


@pytest.fixture
def eye():
    return Eye(fov_range=1.0, fov_angle=math.pi, cells=3)


def test_food_straight_ahead_hits_middle_cell(eye):
    vision = eye.process_vision(0.5, 0.5, 0.0, [(0.5, 0.7)])
    assert vision.tolist() == pytest.approx([0.0, 0.8, 0.0])


def test_food_to_each_side(eye):
    assert eye.process_vision(0.5, 0.5, 0.0, [(0.7, 0.7)])[0] > 0
    assert eye.process_vision(0.5, 0.5, 0.0, [(0.3, 0.7)])[2] > 0


def test_food_behind_is_invisible(eye):
    assert eye.process_vision(0.5, 0.5, 0.0, [(0.5, 0.3)]).tolist() == [0.0, 0.0, 0.0]


def test_rotation_turns_the_field_of_view(eye):
    # facing -y now, so the food below is straight ahead
    vision = eye.process_vision(0.5, 0.5, math.pi, [(0.5, 0.3)])
    assert vision.tolist() == pytest.approx([0.0, 0.8, 0.0])


def test_food_out_of_range_is_invisible():
    eye = Eye(fov_range=0.1, fov_angle=math.pi, cells=3)
    assert eye.process_vision(0.5, 0.5, 0.0, [(0.5, 0.7)]).sum() == 0.0


def test_readings_are_capped_at_one(eye):
    vision = eye.process_vision(0.5, 0.5, 0.0, [(0.5, 0.51), (0.5, 0.52), (0.5, 0.53)])
    assert vision[1] == 1.0


def test_one_reading_per_cell():
    eye = Eye(fov_range=0.25, fov_angle=math.pi + math.pi / 4, cells=9)
    assert eye.process_vision(0.0, 0.0, 0.0, []).shape == (9,)

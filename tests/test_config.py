import math

import pytest

from simulation.config import Config
from simulation.errors import ConfigError


def test_defaults():
    cfg = Config()
    assert cfg.world_animals == 40
    assert cfg.world_foods == 60
    assert cfg.brain_neurons == 9
    assert cfg.eye_cells == 9
    assert cfg.eye_fov_angle == pytest.approx(math.pi * 1.25)
    assert cfg.food_size == 0.01
    cfg.validate()


def test_overrides_return_a_copy():
    base = Config()
    cfg = base.with_overrides({"world_foods": 5})
    assert cfg.world_foods == 5
    assert base.world_foods == 60


def test_unknown_field_is_rejected():
    with pytest.raises(ConfigError, match="unknown config field: wings"):
        Config().with_overrides({"wings": 2})


def test_integral_float_is_accepted_for_int_field():
    cfg = Config().with_overrides({"eye_cells": 4.0})
    assert cfg.eye_cells == 4
    assert isinstance(cfg.eye_cells, int)


def test_fractional_float_is_rejected_for_int_field():
    with pytest.raises(ConfigError):
        Config().with_overrides({"eye_cells": 4.5})


def test_int_is_widened_for_float_field():
    cfg = Config().with_overrides({"food_size": 1})
    assert cfg.food_size == 1.0
    assert isinstance(cfg.food_size, float)


@pytest.mark.parametrize("values", [
    {"eye_cells": 0},
    {"brain_neurons": 0},
    {"world_animals": 0},
    {"world_eagles": 0},
    {"world_foods": -1},
    {"sim_generation_length": 0},
    {"food_size": 0.0},
    {"food_size": float("nan")},
    {"ga_mut_chance": 1.5},
    {"ga_reverse": 2},
    {"sim_speed_min": 0.01, "sim_speed_max": 0.001},
])
def test_out_of_range_values_are_rejected(values):
    with pytest.raises(ConfigError):
        Config().with_overrides(values)


def test_no_foods_is_allowed():
    assert Config().with_overrides({"world_foods": 0}).world_foods == 0

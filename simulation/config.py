import math
from dataclasses import dataclass, fields, replace
from typing import Dict, Union

from .errors import ConfigError

Number = Union[int, float]


@dataclass(frozen=True)
class Config:
    # Brain
    brain_neurons: int = 9

    # Eye
    eye_fov_range: float = 0.25
    eye_fov_angle: float = math.pi + math.pi / 4
    eye_cells: int = 9

    # Food (also the base render size of every entity)
    food_size: float = 0.01

    # Genetic algorithm
    ga_reverse: int = 0          # 1 -> reward starving instead of eating
    ga_mut_chance: float = 0.01
    ga_mut_coeff: float = 0.3

    # Movement
    sim_speed_min: float = 0.001
    sim_speed_max: float = 0.005
    sim_speed_accel: float = 0.2
    sim_rotation_accel: float = math.pi / 2
    sim_generation_length: int = 2500   # steps per generation

    # World
    world_animals: int = 40
    world_foods: int = 60
    world_eagles: int = 10

    @classmethod
    def field_types(cls) -> Dict[str, type]:
        return {f.name: f.type for f in fields(cls)}

    def as_dict(self) -> Dict[str, Number]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, values: Dict[str, Number]) -> "Config":
        """Return a copy with ``values`` merged in; unknown names are rejected here."""
        types = self.field_types()
        merged = {}
        for name, value in values.items():
            if name not in types:
                raise ConfigError(f"unknown config field: {name}")
            merged[name] = _coerce(name, value, types[name])
        cfg = replace(self, **merged)
        cfg.validate()
        return cfg

    def validate(self):
        for name, value in self.as_dict().items():
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be a finite number, got {value}")

        if self.eye_cells < 1:
            raise ConfigError("eye_cells must be at least 1")
        if self.brain_neurons < 1:
            raise ConfigError("brain_neurons must be at least 1")
        if self.world_animals < 1:
            raise ConfigError("world_animals must be at least 1")
        if self.world_eagles < 1:
            raise ConfigError("world_eagles must be at least 1")
        if self.world_foods < 0:
            raise ConfigError("world_foods must not be negative")
        if self.sim_generation_length < 1:
            raise ConfigError("sim_generation_length must be at least 1")
        if self.food_size <= 0:
            raise ConfigError("food_size must be positive")
        if self.eye_fov_range <= 0 or self.eye_fov_angle <= 0:
            raise ConfigError("eye_fov_range and eye_fov_angle must be positive")
        if self.sim_speed_min > self.sim_speed_max:
            raise ConfigError("sim_speed_min must not exceed sim_speed_max")
        if not 0.0 <= self.ga_mut_chance <= 1.0:
            raise ConfigError("ga_mut_chance must be within [0, 1]")
        if self.ga_reverse not in (0, 1):
            raise ConfigError("ga_reverse must be 0 or 1")


def _coerce(name: str, value: Number, kind: type) -> Number:
    if kind is int:
        if isinstance(value, float):
            if not value.is_integer():
                raise ConfigError(f"{name} expects an integer, got {value}")
            return int(value)
        return int(value)
    return float(value)

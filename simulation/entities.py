import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple

import numpy as np

from .brain import Brain
from .config import Config
from .eye import Eye
from .utils import clamp, heading, wrap


class Role(Enum):
    PREY = "prey"
    PREDATOR = "predator"


@dataclass
class Food:
    x: float
    y: float

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Food":
        return cls(x=float(rng.random()), y=float(rng.random()))

    def respawn(self, rng: np.random.Generator):
        self.x, self.y = float(rng.random()), float(rng.random())


@dataclass
class Animal:
    role: Role
    x: float
    y: float
    rotation: float
    speed: float
    eye: Eye
    brain: Brain
    vision: np.ndarray = field(default=None)
    satiation: int = 0

    def __post_init__(self):
        if self.vision is None:
            self.vision = np.zeros(self.eye.cells, dtype=float)

    @classmethod
    def random(cls, cfg: Config, rng: np.random.Generator, role: Role) -> "Animal":
        return cls.from_brain(cfg, rng, role, Brain.random(cfg, rng))

    @classmethod
    def from_brain(cls, cfg: Config, rng: np.random.Generator, role: Role, brain: Brain) -> "Animal":
        return cls(
            role=role,
            x=float(rng.random()),
            y=float(rng.random()),
            rotation=float(rng.uniform(-math.pi, math.pi)),
            speed=cfg.sim_speed_max,
            eye=Eye.from_config(cfg),
            brain=brain,
        )

    @property
    def is_prey(self) -> bool:
        return self.role is Role.PREY

    def respawn(self, rng: np.random.Generator):
        self.x, self.y = float(rng.random()), float(rng.random())

    def process_brain(self, cfg: Config, targets: Iterable[Tuple[float, float]]):
        self.vision = self.eye.process_vision(self.x, self.y, self.rotation, targets)
        d_speed, d_rotation = self.brain.propagate(self.vision)
        self.speed = clamp(self.speed + d_speed, cfg.sim_speed_min, cfg.sim_speed_max)
        self.rotation = self.rotation + d_rotation

    def process_movement(self):
        hx, hy = heading(self.rotation)
        self.x = wrap(self.x + hx * self.speed, 0.0, 1.0)
        self.y = wrap(self.y + hy * self.speed, 0.0, 1.0)

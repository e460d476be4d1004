import math

import pytest

from console.playback import PlaybackController
from console.transcript import Transcript
from simulation.config import Config
from simulation.snapshot import AnimalView, FoodView, WorldView


class FakeSimulation:
    """Stands in for the engine: counts calls and returns scripted summaries."""

    def __init__(self, config, seed=None):
        self._config = config
        self.seed = seed
        self.steps = 0
        self.train_calls = 0
        self.step_summaries = []
        self.snapshot = WorldView(foods=(), birds=(), eagles=())
        self.generation = 0
        self.age = 0

    @staticmethod
    def default_config():
        return Config()

    def config(self):
        return self._config

    def world(self):
        return self.snapshot

    def step(self):
        self.steps += 1
        if self.step_summaries:
            return self.step_summaries.pop(0)
        return None

    def train(self):
        self.train_calls += 1
        return f"generation {self.train_calls - 1}:\nbirds: ok"


class RecordingViewport:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def draw_triangle(self, x, y, size, rotation, color):
        self.calls.append(("triangle", x, y, size, rotation, color))

    def draw_arc(self, x, y, radius, angle_from, angle_to, color):
        self.calls.append(("arc", x, y, radius, angle_from, angle_to, color))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def transcript():
    return Transcript()


@pytest.fixture
def fake_sim():
    return FakeSimulation(Config())


@pytest.fixture
def playback(fake_sim, transcript):
    return PlaybackController(fake_sim, transcript, factory=FakeSimulation)


@pytest.fixture
def small_config():
    return Config().with_overrides({
        "world_animals": 6,
        "world_eagles": 2,
        "world_foods": 8,
        "sim_generation_length": 3,
        "eye_cells": 4,
        "brain_neurons": 3,
    })


@pytest.fixture
def render_world():
    config = Config(eye_cells=3, eye_fov_angle=math.pi, food_size=0.02)
    world = WorldView(
        foods=(FoodView(0.1, 0.2), FoodView(0.7, 0.4)),
        birds=(AnimalView(x=0.5, y=0.5, rotation=0.5, vision=(0.0, 0.5, 1.0)),),
        eagles=(AnimalView(x=0.3, y=0.8, rotation=-2.0, vision=(1.0, 1.0, 0.25)),),
    )
    return config, world

"""Read-only copies of the world handed to the front end."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FoodView:
    x: float
    y: float


@dataclass(frozen=True)
class AnimalView:
    x: float
    y: float
    rotation: float
    vision: Tuple[float, ...]


@dataclass(frozen=True)
class WorldView:
    foods: Tuple[FoodView, ...]
    birds: Tuple[AnimalView, ...]
    eagles: Tuple[AnimalView, ...]


def view_of(world) -> WorldView:
    def animal(a):
        return AnimalView(x=a.x, y=a.y, rotation=a.rotation, vision=tuple(float(v) for v in a.vision))

    return WorldView(
        foods=tuple(FoodView(x=f.x, y=f.y) for f in world.foods),
        birds=tuple(animal(a) for a in world.birds),
        eagles=tuple(animal(a) for a in world.eagles),
    )

from typing import List

import numpy as np

from .config import Config
from .entities import Animal, Food, Role


class World:
    def __init__(self, birds: List[Animal], eagles: List[Animal], foods: List[Food]):
        self.birds = birds
        self.eagles = eagles
        self.foods = foods

    @classmethod
    def random(cls, cfg: Config, rng: np.random.Generator) -> "World":
        birds = [Animal.random(cfg, rng, Role.PREY) for _ in range(cfg.world_animals)]
        eagles = [Animal.random(cfg, rng, Role.PREDATOR) for _ in range(cfg.world_eagles)]
        foods = [Food.random(rng) for _ in range(cfg.world_foods)]
        return cls(birds, eagles, foods)

    def scatter_foods(self, rng: np.random.Generator):
        for food in self.foods:
            food.respawn(rng)

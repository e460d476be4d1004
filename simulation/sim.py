import math
from typing import List, Optional

import numpy as np

from .brain import Brain
from .config import Config
from .entities import Animal, Role
from .genetics import GaussianMutation, GeneticAlgorithm, Individual, RouletteWheelSelection, UniformCrossover
from .snapshot import WorldView, view_of
from .statistics import Statistics
from .world import World


class Simulation:
    """The engine: one world of birds, eagles and foods, evolved generation by generation."""

    def __init__(self, config: Config, seed: Optional[int] = None):
        config.validate()
        self._config = config
        self.rng = np.random.default_rng(seed)
        self._world = World.random(config, self.rng)
        self.age = 0
        self.generation = 0
        self.history: List[Statistics] = []

        print(f"[sim] NEW birds={len(self._world.birds)} eagles={len(self._world.eagles)} "
              f"foods={len(self._world.foods)} eye_cells={config.eye_cells} neurons={config.brain_neurons}")

    @staticmethod
    def default_config() -> Config:
        return Config()

    def config(self) -> Config:
        return self._config

    def world(self) -> WorldView:
        return view_of(self._world)

    # ----- stepping -----

    def step(self) -> Optional[str]:
        """Advance one tick; returns a summary when a generation just ended."""
        self._process_collisions()
        self._process_brains()
        self._process_movements()
        stats = self._try_evolving()
        return str(stats) if stats is not None else None

    def train(self) -> str:
        while True:
            summary = self.step()
            if summary:
                return summary

    # ----- per-tick mechanics -----

    def _process_collisions(self):
        reach = self._config.food_size
        for bird in self._world.birds:
            for food in self._world.foods:
                if math.hypot(bird.x - food.x, bird.y - food.y) <= reach:
                    bird.satiation += 1
                    food.respawn(self.rng)

        for eagle in self._world.eagles:
            for bird in self._world.birds:
                if math.hypot(eagle.x - bird.x, eagle.y - bird.y) <= reach:
                    eagle.satiation += 1
                    bird.respawn(self.rng)

    def _process_brains(self):
        foods = [(f.x, f.y) for f in self._world.foods]
        for bird in self._world.birds:
            bird.process_brain(self._config, foods)

        birds = [(b.x, b.y) for b in self._world.birds]
        for eagle in self._world.eagles:
            eagle.process_brain(self._config, birds)

    def _process_movements(self):
        for animal in self._world.birds + self._world.eagles:
            animal.process_movement()

    def _try_evolving(self) -> Optional[Statistics]:
        self.age += 1
        if self.age > self._config.sim_generation_length:
            return self._evolve()
        return None

    # ----- evolution -----

    def _evolve(self) -> Statistics:
        cfg = self._config
        self.age = 0
        self.generation += 1

        ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(cfg.ga_mut_chance, cfg.ga_mut_coeff),
        )

        birds, birds_stats = ga.evolve(self.rng, self._individuals(self._world.birds))
        eagles, eagles_stats = ga.evolve(self.rng, self._individuals(self._world.eagles))

        self._world.birds = [self._offspring(genes, Role.PREY) for genes in birds]
        self._world.eagles = [self._offspring(genes, Role.PREDATOR) for genes in eagles]
        self._world.scatter_foods(self.rng)

        stats = Statistics(generation=self.generation - 1, birds=birds_stats, eagles=eagles_stats)
        self.history.append(stats)
        print(f"[gen {stats.generation}] EVOLVE birds_avg={birds_stats.avg_fitness:.2f} "
              f"eagles_avg={eagles_stats.avg_fitness:.2f}")
        return stats

    def _individuals(self, animals: List[Animal]) -> List[Individual]:
        population = [Individual(fitness=float(a.satiation), chromosome=a.brain.as_chromosome())
                      for a in animals]
        if self._config.ga_reverse == 1:
            best = max(i.fitness for i in population)
            for i in population:
                i.fitness = best - i.fitness
        return population

    def _offspring(self, genes: np.ndarray, role: Role) -> Animal:
        brain = Brain.from_chromosome(self._config, genes)
        return Animal.from_brain(self._config, self.rng, role, brain)

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np


@dataclass
class Individual:
    fitness: float
    chromosome: np.ndarray


@dataclass
class PopulationStats:
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    median_fitness: float

    @classmethod
    def of(cls, population: Sequence[Individual]) -> "PopulationStats":
        assert len(population) > 0
        f = np.array([i.fitness for i in population], dtype=float)
        return cls(
            min_fitness=float(f.min()),
            max_fitness=float(f.max()),
            avg_fitness=float(f.mean()),
            median_fitness=float(np.median(f)),
        )

    def __str__(self):
        return (f"min[{self.min_fitness:.2f}] max[{self.max_fitness:.2f}] "
                f"avg[{self.avg_fitness:.2f}] median[{self.median_fitness:.2f}]")


class RouletteWheelSelection:
    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        f = np.array([i.fitness for i in population], dtype=float)
        total = f.sum()
        if total <= 0:
            # nobody scored; every parent is as good as any other
            return population[int(rng.integers(0, len(population)))]
        return population[int(rng.choice(len(population), p=f / total))]


class UniformCrossover:
    def crossover(self, rng: np.random.Generator, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        assert a.shape == b.shape
        mask = rng.random(a.shape) < 0.5
        return np.where(mask, a, b)


class GaussianMutation:
    def __init__(self, chance: float, coeff: float):
        assert 0.0 <= chance <= 1.0
        self.chance = chance
        self.coeff = coeff

    def mutate(self, rng: np.random.Generator, genes: np.ndarray) -> np.ndarray:
        out = genes.copy()
        hit = rng.random(out.shape) < self.chance
        sign = np.where(rng.random(out.shape) < 0.5, -1.0, 1.0)
        out[hit] += (sign * self.coeff * rng.random(out.shape))[hit]
        return out


class GeneticAlgorithm:
    def __init__(self, selection: RouletteWheelSelection, crossover: UniformCrossover,
                 mutation: GaussianMutation):
        self.selection = selection
        self.crossover = crossover
        self.mutation = mutation

    def evolve(self, rng: np.random.Generator,
               population: Sequence[Individual]) -> Tuple[List[np.ndarray], PopulationStats]:
        assert len(population) > 0
        children = []
        for _ in range(len(population)):
            a = self.selection.select(rng, population).chromosome
            b = self.selection.select(rng, population).chromosome
            child = self.crossover.crossover(rng, a, b)
            children.append(self.mutation.mutate(rng, child))
        return children, PopulationStats.of(population)

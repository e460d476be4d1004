from dataclasses import dataclass

from .genetics import PopulationStats


@dataclass
class Statistics:
    generation: int
    birds: PopulationStats
    eagles: PopulationStats

    def __str__(self):
        return (f"generation {self.generation}:\n"
                f"birds: {self.birds}\n"
                f"eagles: {self.eagles}")

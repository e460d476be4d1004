from typing import Type

from simulation.config import Config
from simulation.sim import Simulation

from .transcript import Transcript


class PlaybackController:
    """Owns the running simulation and decides whether a frame advances it."""

    def __init__(self, simulation: Simulation, transcript: Transcript,
                 factory: Type[Simulation] = Simulation):
        self.simulation = simulation
        self.transcript = transcript
        self.factory = factory
        self.active = True

    def toggle(self) -> bool:
        self.active = not self.active
        print(f"[playback] {'RESUME' if self.active else 'PAUSE'}")
        return self.active

    def tick(self):
        if not self.active:
            return
        summary = self.simulation.step()
        if summary:
            self.transcript.println(summary)

    def train(self, generations: int = 1):
        assert generations >= 1
        print(f"[playback] TRAIN generations={generations}")
        for i in range(generations):
            if i > 0:
                self.transcript.println("")
            self.transcript.println(self.simulation.train())

    def reset(self, config: Config):
        # build first, swap after: a failing constructor leaves the old world running
        simulation = self.factory(config)
        self.simulation = simulation
        print(f"[playback] RESET animals={config.world_animals} foods={config.world_foods} "
              f"neurons={config.brain_neurons} eye_cells={config.eye_cells}")

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .config import Config
from .utils import clamp


@dataclass
class Layer:
    biases: np.ndarray    # (outputs,)
    weights: np.ndarray   # (outputs, inputs)

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.maximum(self.weights @ inputs + self.biases, 0.0)

    @classmethod
    def random(cls, rng: np.random.Generator, inputs: int, outputs: int) -> "Layer":
        return cls(
            biases=rng.uniform(-1.0, 1.0, size=outputs),
            weights=rng.uniform(-1.0, 1.0, size=(outputs, inputs)),
        )


class Network:
    """Feed-forward ReLU network; genes are stored neuron by neuron as [bias, w0, w1, ...]."""

    def __init__(self, layers: List[Layer]):
        self.layers = layers

    @classmethod
    def random(cls, rng: np.random.Generator, topology: Sequence[int]) -> "Network":
        assert len(topology) > 1
        return cls([Layer.random(rng, i, o) for i, o in zip(topology[:-1], topology[1:])])

    @classmethod
    def from_weights(cls, topology: Sequence[int], genes: np.ndarray) -> "Network":
        genes = np.asarray(genes, dtype=float)
        layers = []
        offset = 0
        for inputs, outputs in zip(topology[:-1], topology[1:]):
            size = outputs * (inputs + 1)
            block = genes[offset:offset + size].reshape(outputs, inputs + 1)
            layers.append(Layer(biases=block[:, 0].copy(), weights=block[:, 1:].copy()))
            offset += size
        if offset != genes.size:
            raise ValueError(f"got {genes.size} genes, topology needs {offset}")
        return cls(layers)

    def weights(self) -> np.ndarray:
        return np.concatenate([
            np.column_stack([layer.biases, layer.weights]).ravel() for layer in self.layers
        ])

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        out = np.asarray(inputs, dtype=float)
        for layer in self.layers:
            out = layer.propagate(out)
        return out


def topology(cfg: Config) -> Tuple[int, int, int]:
    return cfg.eye_cells, cfg.brain_neurons, 2


class Brain:
    def __init__(self, cfg: Config, network: Network):
        self.cfg = cfg
        self.nn = network

    @classmethod
    def random(cls, cfg: Config, rng: np.random.Generator) -> "Brain":
        return cls(cfg, Network.random(rng, topology(cfg)))

    @classmethod
    def from_chromosome(cls, cfg: Config, genes: np.ndarray) -> "Brain":
        return cls(cfg, Network.from_weights(topology(cfg), genes))

    def as_chromosome(self) -> np.ndarray:
        return self.nn.weights()

    def propagate(self, vision: Sequence[float]) -> Tuple[float, float]:
        """Turn eye readings into (speed delta, rotation delta)."""
        response = self.nn.propagate(vision)
        r0 = clamp(response[0], 0.0, 1.0) - 0.5
        r1 = clamp(response[1], 0.0, 1.0) - 0.5
        speed = clamp(r0 + r1, -self.cfg.sim_speed_accel, self.cfg.sim_speed_accel)
        rotation = clamp(r0 - r1, -self.cfg.sim_rotation_accel, self.cfg.sim_rotation_accel)
        return speed, rotation

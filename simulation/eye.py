import math
from typing import Iterable, Tuple

import numpy as np

from .config import Config
from .utils import wrap_angle


class Eye:
    def __init__(self, fov_range: float, fov_angle: float, cells: int):
        assert fov_range > 0 and fov_angle > 0 and cells > 0
        self.fov_range = fov_range
        self.fov_angle = fov_angle
        self.cells = cells

    @classmethod
    def from_config(cls, cfg: Config) -> "Eye":
        return cls(cfg.eye_fov_range, cfg.eye_fov_angle, cfg.eye_cells)

    def process_vision(self, x: float, y: float, rotation: float,
                       targets: Iterable[Tuple[float, float]]) -> np.ndarray:
        """Energy seen per cell, left to right across the field of view, each within [0, 1]."""
        cells = np.zeros(self.cells, dtype=float)
        half = self.fov_angle / 2.0

        for tx, ty in targets:
            dx, dy = tx - x, ty - y
            dist = math.hypot(dx, dy)
            if dist >= self.fov_range:
                continue

            # angle between the +y axis and the target, relative to our heading
            angle = wrap_angle(math.atan2(-dx, dy) - rotation)
            if angle < -half or angle > half:
                continue

            cell = int((angle + half) / self.fov_angle * self.cells)
            cell = min(cell, self.cells - 1)
            cells[cell] += (self.fov_range - dist) / self.fov_range

        return np.clip(cells, 0.0, 1.0)

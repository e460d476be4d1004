from typing import List, Tuple

from simulation.config import Config
from simulation.snapshot import AnimalView

from .colors import COLORS

SENSOR_RADIUS = 2.5   # in food sizes


def sensor_arcs(animal: AnimalView, config: Config) -> List[Tuple[float, float, float]]:
    """(angle_from, angle_to, energy) per eye cell, left to right across the field of view."""
    angle_per_cell = config.eye_fov_angle / config.eye_cells
    start = animal.rotation - config.eye_fov_angle / 2.0

    arcs = []
    for cell_id in range(config.eye_cells):
        angle_from = start + cell_id * angle_per_cell
        angle_to = angle_from + angle_per_cell
        energy = min(max(float(animal.vision[cell_id]), 0.0), 1.0)
        arcs.append((angle_from, angle_to, energy))
    return arcs


def draw_animal(viewport, animal: AnimalView, config: Config, size: float, body_color, eye_color):
    viewport.draw_triangle(animal.x, animal.y, size, animal.rotation, body_color)

    for angle_from, angle_to, energy in sensor_arcs(animal, config):
        viewport.draw_arc(
            animal.x,
            animal.y,
            config.food_size * SENSOR_RADIUS,
            angle_from,
            angle_to,
            (*eye_color, int(round(energy * 255))),
        )


class RenderPipeline:
    """Paints one frame of the world; stepping is delegated to the playback controller."""

    def __init__(self, viewport, playback):
        self.viewport = viewport
        self.playback = playback

    def frame(self):
        self.playback.tick()

        sim = self.playback.simulation
        config = sim.config()
        world = sim.world()

        self.viewport.clear()

        for food in world.foods:
            self.viewport.draw_circle(food.x, food.y, config.food_size / 2.0, COLORS['FOOD'])

        for animal in world.birds:
            draw_animal(self.viewport, animal, config, config.food_size,
                        COLORS['BIRD'], COLORS['BIRD_EYE'])

        for animal in world.eagles:
            draw_animal(self.viewport, animal, config, config.food_size * 2.0,
                        COLORS['EAGLE'], COLORS['EAGLE_EYE'])

import math

import pygame
import pygame.gfxdraw

from .colors import COLORS

# engine rotation 0 faces +y; screen angles are measured from +x, clockwise
HEADING_OFFSET = math.pi / 2


class Viewport:
    """Draws in world coordinates ([0, 1] on both axes) onto a square area of a surface."""

    def __init__(self, surface, rect):
        self.surface = surface
        self.rect = pygame.Rect(rect)
        self.scale = min(self.rect.width, self.rect.height)

    def to_screen(self, x, y):
        return self.rect.x + x * self.scale, self.rect.y + y * self.scale

    def clear(self):
        pygame.draw.rect(self.surface, COLORS['WORLD_BACKGROUND'], self.rect)

    def draw_circle(self, x, y, radius, color):
        sx, sy = self.to_screen(x, y)
        r = max(1, int(round(radius * self.scale)))
        pygame.gfxdraw.filled_circle(self.surface, int(sx), int(sy), r, color)
        pygame.gfxdraw.aacircle(self.surface, int(sx), int(sy), r, color)

    def draw_triangle(self, x, y, size, rotation, color):
        sx, sy = self.to_screen(x, y)
        size *= self.scale
        points = []
        for angle, length in ((rotation, size * 1.5),
                              (rotation + 2.0 / 3.0 * math.pi, size),
                              (rotation + 4.0 / 3.0 * math.pi, size)):
            points.append((int(round(sx - math.sin(angle) * length)),
                           int(round(sy + math.cos(angle) * length))))
        (x1, y1), (x2, y2), (x3, y3) = points
        pygame.gfxdraw.filled_trigon(self.surface, x1, y1, x2, y2, x3, y3, color)
        pygame.gfxdraw.aatrigon(self.surface, x1, y1, x2, y2, x3, y3, color)

    def draw_arc(self, x, y, radius, angle_from, angle_to, color):
        """Stroke an arc; ``color`` may carry an alpha channel, which is blended."""
        if len(color) == 4 and color[3] <= 0:
            return
        sx, sy = self.to_screen(x, y)
        r = max(1, int(round(radius * self.scale)))
        start = int(round(math.degrees(angle_from + HEADING_OFFSET)))
        span = int(round(math.degrees(angle_to - angle_from)))
        if span <= 0:
            return
        start %= 360
        stop = (start + min(span, 359)) % 360
        for width in range(2):
            pygame.gfxdraw.arc(self.surface, int(sx), int(sy), r + width, start, stop, color)

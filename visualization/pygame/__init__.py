"""
Pygame-based front end for the evolution simulation.

Provides:
    - COLORS (shared color palette)
    - Viewport (world-coordinate drawing primitives)
    - RenderPipeline (per-frame world painting, incl. sensor arcs)
    - Terminal (operator input line and scrollback)
    - SimulationMonitor (window, event pump, frame loop)
"""

from .colors import COLORS
from .viewport import Viewport
from .world_renderer import RenderPipeline, sensor_arcs
from .terminal import Terminal
from .monitor import SimulationMonitor

__all__ = ["COLORS", "Viewport", "RenderPipeline", "sensor_arcs", "Terminal", "SimulationMonitor"]

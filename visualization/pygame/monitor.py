import pygame

from console import CommandInterpreter, PlaybackController, Transcript, print_help

from .colors import COLORS
from .event_handler import handle_events
from .terminal import Terminal
from .ui_renderer import draw_legend, draw_status
from .viewport import Viewport
from .world_renderer import RenderPipeline


class SimulationMonitor:
    def __init__(self, simulation, width=1400, height=860, fps=60):
        self.transcript = Transcript()
        self.playback = PlaybackController(simulation, self.transcript)
        self.interpreter = CommandInterpreter(self.playback, self.transcript)

        # --- Initialize pygame ---
        pygame.init()
        self.width, self.height = width, height
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Flocksim - Evolution Monitor")
        pygame.key.start_text_input()
        pygame.key.set_repeat(400, 40)

        # Fonts
        self.fonts = {
            "small": pygame.font.Font(None, 18),
            "medium": pygame.font.Font(None, 22),
            "mono": pygame.font.SysFont("monospace", 14),
        }

        # Layout: square world on the left, terminal on the right, status below the world
        self.world_size = min(self.height - 60, self.width - 420)
        self.world_rect = pygame.Rect(10, 10, self.world_size, self.world_size)
        self.status_rect = pygame.Rect(10, self.world_rect.bottom + 10, self.world_size, 30)
        self.terminal_rect = pygame.Rect(self.world_rect.right + 10, 10,
                                         self.width - self.world_rect.right - 20, self.height - 20)

        self.viewport = Viewport(self.screen, self.world_rect)
        self.pipeline = RenderPipeline(self.viewport, self.playback)
        self.terminal = Terminal(self.transcript)
        self.terminal.on_input(self.interpreter.submit)

        print_help(self.transcript, simulation.config())
        self.terminal.scroll_to_top()

        # UI state
        self.should_stop = False

        # FPS control
        self.fps_clock = pygame.time.Clock()
        self.fps = fps

    # ---------- Main loop ----------

    def render(self):
        """Process input and paint one frame; False once the window should close."""
        if not handle_events(self):
            return False

        self.screen.fill(COLORS['UI_BACKGROUND'])
        self.pipeline.frame()
        draw_status(self)
        draw_legend(self)
        self.terminal.draw(self.screen, self.terminal_rect, self.fonts['mono'])

        pygame.display.flip()
        self.fps_clock.tick(self.fps)
        return True

    def run(self):
        # exactly one frame loop; should_stop is the only way out
        while not self.should_stop:
            if not self.render():
                break

    # ---------- Utility ----------

    @property
    def simulation(self):
        return self.playback.simulation

    def stop(self):
        self.should_stop = True

    def cleanup(self):
        pygame.key.stop_text_input()
        pygame.quit()

import pygame
from .colors import COLORS


def draw_status(monitor):
    """One-line status bar under the world view."""
    rect = monitor.status_rect
    pygame.draw.rect(monitor.screen, COLORS['UI_BACKGROUND'], rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], rect, 1)

    sim = monitor.playback.simulation
    cfg = sim.config()
    if monitor.playback.active:
        status_text, status_color = "Running", COLORS['UI_RUNNING']
    else:
        status_text, status_color = "Paused", COLORS['UI_PAUSE']

    status_surface = monitor.fonts['medium'].render(status_text, True, status_color)
    monitor.screen.blit(status_surface, (rect.x + 10, rect.y + 8))

    info = (f"Generation {sim.generation} | Step {sim.age}/{cfg.sim_generation_length} | "
            f"Birds {cfg.world_animals} | Eagles {cfg.world_eagles} | Foods {cfg.world_foods} | "
            f"{monitor.fps_clock.get_fps():.0f} FPS")
    surf = monitor.fonts['small'].render(info, True, COLORS['UI_TEXT'])
    monitor.screen.blit(surf, (rect.x + 20 + status_surface.get_width(), rect.y + 11))


def draw_legend(monitor):
    rect = monitor.status_rect
    x = rect.right - 230
    y = rect.y + rect.height // 2
    items = [
        ("circle", COLORS['FOOD'], "Food"),
        ("triangle", COLORS['BIRD'], "Bird"),
        ("triangle", COLORS['EAGLE'], "Eagle"),
    ]
    for kind, color, label in items:
        if kind == "circle":
            pygame.draw.circle(monitor.screen, color, (x, y), 5)
        else:
            pygame.draw.polygon(monitor.screen, color, [(x, y - 6), (x - 6, y + 5), (x + 6, y + 5)])
        surf = monitor.fonts['small'].render(label, True, COLORS['UI_TEXT'])
        monitor.screen.blit(surf, (x + 10, y - surf.get_height() // 2))
        x += 20 + surf.get_width() + 20

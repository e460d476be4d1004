COLORS = {
    # World
    'WORLD_BACKGROUND': (0, 0, 0),
    'FOOD': (0, 255, 128),          # Green

    # Animals
    'BIRD': (255, 255, 255),        # White
    'EAGLE': (0, 255, 255),         # Cyan

    # Sensor arcs; alpha comes from the eye reading
    'BIRD_EYE': (0, 255, 128),
    'EAGLE_EYE': (0, 255, 128),     # same hue as birds for now

    # Terminal
    'TERM_BACKGROUND': (16, 16, 16),
    'TERM_TEXT': (200, 200, 200),
    'TERM_ERROR': (255, 120, 120),
    'TERM_PROMPT': (0, 255, 128),

    # UI elements
    'UI_BACKGROUND': (24, 24, 24),
    'UI_BORDER': (70, 70, 70),
    'UI_TEXT': (220, 220, 220),
    'UI_PAUSE': (255, 200, 80),       # Amber
    'UI_RUNNING': (0, 255, 128),      # Green
}

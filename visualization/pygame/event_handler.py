# event_handler.py
import pygame


def handle_events(monitor):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            monitor.should_stop = True
            return False
        elif event.type == pygame.TEXTINPUT:
            monitor.terminal.type_text(event.text)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                monitor.should_stop = True
                return False
            _handle_key(monitor, event.key)
        elif event.type == pygame.MOUSEWHEEL:
            monitor.terminal.scroll_by(-3 * event.y)
    return True


def _handle_key(monitor, key):
    terminal = monitor.terminal
    if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        terminal.submit()
    elif key == pygame.K_BACKSPACE:
        terminal.backspace()
    elif key == pygame.K_DELETE:
        terminal.clear_input()
    elif key == pygame.K_PAGEUP:
        terminal.scroll_by(-terminal.rows)
    elif key == pygame.K_PAGEDOWN:
        terminal.scroll_by(terminal.rows)
    elif key == pygame.K_HOME:
        terminal.scroll_to_top()
    elif key == pygame.K_END:
        terminal.scroll_to_bottom()

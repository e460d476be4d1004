from typing import Callable, List, Optional

import pygame

from console.transcript import Transcript

from .colors import COLORS

PROMPT = "$ "


class Terminal:
    """Text input line plus scrollback over a transcript."""

    def __init__(self, transcript: Transcript, rows: int = 30):
        self.transcript = transcript
        self.buffer = ""
        self.rows = rows
        self.top: Optional[int] = None   # None -> follow the tail
        self._callback: Optional[Callable[[str], None]] = None

    def on_input(self, callback: Callable[[str], None]):
        self._callback = callback

    # ---------- Input ----------

    def type_text(self, text: str):
        self.buffer += "".join(ch for ch in text if ch.isprintable())

    def backspace(self):
        self.buffer = self.buffer[:-1]

    def clear_input(self):
        self.buffer = ""

    def submit(self):
        line, self.buffer = self.buffer, ""
        if not line.strip():
            return
        self.scroll_to_bottom()
        if self._callback is not None:
            self._callback(line)

    # ---------- Scrollback ----------

    def _max_top(self) -> int:
        return max(0, len(self.transcript.lines) - self.rows)

    def scroll_by(self, delta: int):
        top = self._max_top() if self.top is None else self.top
        top = min(max(top + delta, 0), self._max_top())
        self.top = None if top >= self._max_top() else top

    def scroll_to_top(self):
        self.top = 0

    def scroll_to_bottom(self):
        self.top = None

    def visible_lines(self) -> List[str]:
        lines = self.transcript.lines
        top = self._max_top() if self.top is None else min(self.top, self._max_top())
        return lines[top:top + self.rows]

    # ---------- Drawing ----------

    def draw(self, surface, rect, font):
        rect = pygame.Rect(rect)
        pygame.draw.rect(surface, COLORS['TERM_BACKGROUND'], rect)
        pygame.draw.rect(surface, COLORS['UI_BORDER'], rect, 1)

        line_h = font.get_linesize()
        self.rows = max(1, (rect.height - line_h - 16) // line_h)

        y = rect.y + 6
        for line in self.visible_lines():
            color = COLORS['TERM_ERROR'] if line.lstrip().startswith("^ err:") else COLORS['TERM_TEXT']
            surface.blit(font.render(line, True, color), (rect.x + 8, y))
            y += line_h

        prompt_y = rect.bottom - line_h - 6
        pygame.draw.line(surface, COLORS['UI_BORDER'], (rect.x, prompt_y - 4), (rect.right, prompt_y - 4))
        surface.blit(font.render(PROMPT + self.buffer + "_", True, COLORS['TERM_PROMPT']), (rect.x + 8, prompt_y))

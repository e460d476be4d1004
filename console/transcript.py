from typing import List


class Transcript:
    """Append-only operator log; the terminal widget only ever reads it."""

    def __init__(self, echo: bool = False):
        self.lines: List[str] = []
        self.echo = echo

    def println(self, text: str = ""):
        for line in str(text).split("\n"):
            self.lines.append(line)
            if self.echo:
                print(line)

    def __len__(self):
        return len(self.lines)

    def text(self) -> str:
        return "\n".join(self.lines)

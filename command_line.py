import curses
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommandAction:
    save: bool = False
    quit: bool = False
    path: Optional[str] = None
    error: Optional[str] = None


def parse_command(text: str) -> CommandAction:
    """Parse a ``:`` command: ``w``, ``q``, ``wq``/``x``, ``w PATH``."""
    text = (text or "").strip()
    if text.startswith(":"):
        text = text[1:].strip()
    if not text:
        return CommandAction(error="No command")

    name, _, rest = text.partition(" ")
    path = rest.strip() or None

    if name == "w":
        return CommandAction(save=True, path=path)
    if name in ("wq", "x"):
        return CommandAction(save=True, quit=True, path=path)
    if name == "q" and path is None:
        return CommandAction(quit=True)
    return CommandAction(error=f"Unknown command: {text}")


class CommandLine:
    """Single-line ``:`` prompt drawn in the command window."""

    PROMPT = ":"

    def __init__(self):
        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def start(self, initial: str = ""):
        self.active = True
        self.buffer = initial
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def reset(self):
        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def handle_key(self, ch) -> Optional[str]:
        """Returns ``"submit"`` or ``"cancel"`` when the prompt closes."""
        if not self.active:
            return None

        if ch in (10, 13, curses.KEY_ENTER):
            self.active = False
            return "submit"

        if ch == 27:  # Esc
            self.reset()
            return "cancel"

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            elif not self.buffer:
                self.reset()
                return "cancel"
            return None

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return None

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return None

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return None

        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return None

        if 32 <= ch <= 126:
            self.buffer = self.buffer[: self.cursor] + chr(ch) + self.buffer[self.cursor :]
            self.cursor += 1
        return None

    def draw(self, win):
        h, w = win.getmaxyx()
        text_w = max(1, w - len(self.PROMPT) - 1)

        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        visible = self.buffer[self.hscroll : self.hscroll + text_w]

        try:
            win.erase()
            win.addnstr(0, 0, self.PROMPT, len(self.PROMPT))
            win.addnstr(0, len(self.PROMPT), visible, text_w)
            win.move(0, len(self.PROMPT) + (self.cursor - self.hscroll))
        except curses.error:
            pass
        win.refresh()

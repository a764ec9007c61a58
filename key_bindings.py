import curses

import intents
from editor_session import MODE_EDITING
from intents import Intent

KEY_ESC = 27
KEY_TAB = 9
CTRL_C = 3
CTRL_Q = 17
CTRL_R = 18
CTRL_S = 19

ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)

# navigating mode; PageUp/PageDown depend on the screen and are handled below
NAVIGATION_KEYS = {
    curses.KEY_UP: Intent.move("up"),
    curses.KEY_DOWN: Intent.move("down"),
    curses.KEY_LEFT: Intent.move("left"),
    curses.KEY_RIGHT: Intent.move("right"),
    ord("k"): Intent.move("up"),
    ord("j"): Intent.move("down"),
    ord("h"): Intent.move("left"),
    ord("l"): Intent.move("right"),
    KEY_TAB: Intent.move("right"),
    curses.KEY_BTAB: Intent.move("left"),
    10: intents.BeginEdit,
    13: intents.BeginEdit,
    curses.KEY_ENTER: intents.BeginEdit,
    curses.KEY_F2: intents.BeginEdit,
    ord("i"): intents.BeginEdit,
    ord("o"): intents.InsertRow,
    ord("O"): intents.DeleteRow,
    ord("a"): intents.InsertColumn,
    ord("A"): intents.DeleteColumn,
    ord("v"): intents.ToggleMark,
    ord("x"): intents.ClearBlock,
    ord("u"): intents.Undo,
    CTRL_R: intents.Redo,
    CTRL_S: intents.Save,
    CTRL_Q: intents.Quit,
    CTRL_C: intents.Quit,
    KEY_ESC: intents.Quit,
}


def _split_key(ch):
    # get_wch returns str for characters and int for function keys
    if isinstance(ch, str):
        if len(ch) != 1:
            return None, None
        code = ord(ch)
        if code < 32 or code == 127:
            return code, None
        return code, ch
    if 32 <= ch < 127:
        return ch, chr(ch)
    return ch, None


def key_to_intent(ch, mode: str, page_rows: int = 1) -> Intent | None:
    """Translate a curses key into an intent for the given mode.

    Returns None for keys that mean nothing in that mode.
    """
    if ch is None or ch == -1:
        return None
    code, char = _split_key(ch)
    if code is None:
        return None

    if mode == MODE_EDITING:
        if code in ENTER_KEYS:
            return intents.Commit
        if code == KEY_ESC:
            return intents.Cancel
        if code in BACKSPACE_KEYS:
            return Intent.backspace()
        if char is not None:
            return Intent.keystroke(char)
        return None

    if char is not None and code > 126:
        return None
    if code == curses.KEY_NPAGE:
        return Intent.move("down", max(1, page_rows))
    if code == curses.KEY_PPAGE:
        return Intent.move("up", max(1, page_rows))
    return NAVIGATION_KEYS.get(code)

from dataclasses import dataclass
from typing import Optional

# kinds
MOVE = "move"
BEGIN_EDIT = "begin_edit"
KEYSTROKE = "keystroke"
COMMIT = "commit"
CANCEL = "cancel"
INSERT_ROW = "insert_row"
DELETE_ROW = "delete_row"
INSERT_COLUMN = "insert_column"
DELETE_COLUMN = "delete_column"
SAVE = "save"
QUIT = "quit"
TOGGLE_MARK = "toggle_mark"
CLEAR_BLOCK = "clear_block"
UNDO = "undo"
REDO = "redo"

# directions as (d_row, d_col)
DIRECTIONS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

# a Keystroke carrying this character erases the last buffered character
BACKSPACE = "\b"

EDITING_KINDS = frozenset({KEYSTROKE, COMMIT, CANCEL})


@dataclass(frozen=True)
class Intent:
    kind: str
    direction: Optional[str] = None
    count: int = 1
    char: Optional[str] = None

    @classmethod
    def move(cls, direction: str, count: int = 1) -> "Intent":
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction '{direction}'")
        return cls(MOVE, direction=direction, count=max(1, count))

    @classmethod
    def keystroke(cls, char: str) -> "Intent":
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("Keystroke takes exactly one character")
        return cls(KEYSTROKE, char=char)

    @classmethod
    def backspace(cls) -> "Intent":
        return cls(KEYSTROKE, char=BACKSPACE)


BeginEdit = Intent(BEGIN_EDIT)
Commit = Intent(COMMIT)
Cancel = Intent(CANCEL)
InsertRow = Intent(INSERT_ROW)
DeleteRow = Intent(DELETE_ROW)
InsertColumn = Intent(INSERT_COLUMN)
DeleteColumn = Intent(DELETE_COLUMN)
Save = Intent(SAVE)
Quit = Intent(QUIT)
ToggleMark = Intent(TOGGLE_MARK)
ClearBlock = Intent(CLEAR_BLOCK)
Undo = Intent(UNDO)
Redo = Intent(REDO)


def Move(direction: str, count: int = 1) -> Intent:
    return Intent.move(direction, count)


def Keystroke(char: str) -> Intent:
    return Intent.keystroke(char)

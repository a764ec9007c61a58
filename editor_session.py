from dataclasses import dataclass
from typing import Callable, Optional

import grid_ops
import intents
from cell_address import CellAddress, CellRange
from grid import Grid
from grid_errors import GridError
from intents import Intent
from session_undo import SessionUndo

MODE_NAVIGATING = "navigating"
MODE_EDITING = "editing_cell"


@dataclass
class IntentResult:
    accepted: bool
    message: Optional[str] = None
    # serialized grid, set only by a successful Save
    text: Optional[str] = None


@dataclass(frozen=True)
class SessionView:
    grid: Grid
    cursor: CellAddress
    modified: bool
    mode: str
    buffer: str
    selection: Optional[CellRange]


class EditorSession:
    """Cursor and edit state machine over one Grid.

    The session never does I/O. ``Save`` hands the serialized text back in
    the result and the caller writes it out; failures from the grid are
    reported as rejected results with a message instead of being raised.
    Status messages are sent with no time-to-live so the receiver applies
    its configured one.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        set_status_cb: Callable[[str, float | None], None] | None = None,
        undo_max_depth: int = 50,
    ):
        self.grid = grid if grid is not None else Grid()
        self._set_status = set_status_cb or (lambda _msg, _secs: None)

        self.mode = MODE_NAVIGATING
        self.cursor = CellAddress(0, 0)
        self.buffer = ""
        self.modified = False
        self.mark: CellAddress | None = None
        self.quit_requested = False

        self.undo_mgr = SessionUndo(self, max_depth=undo_max_depth)

        self._handlers = {
            intents.MOVE: self._move,
            intents.BEGIN_EDIT: self._begin_edit,
            intents.KEYSTROKE: self._keystroke,
            intents.COMMIT: self._commit,
            intents.CANCEL: self._cancel,
            intents.INSERT_ROW: self._insert_row,
            intents.DELETE_ROW: self._delete_row,
            intents.INSERT_COLUMN: self._insert_column,
            intents.DELETE_COLUMN: self._delete_column,
            intents.SAVE: self._save,
            intents.QUIT: self._quit,
            intents.TOGGLE_MARK: self._toggle_mark,
            intents.CLEAR_BLOCK: self._clear_block,
            intents.UNDO: self._undo,
            intents.REDO: self._redo,
        }

    # ---------- public API ----------
    def apply_intent(self, intent: Intent) -> IntentResult:
        if self.mode == MODE_EDITING and intent.kind not in intents.EDITING_KINDS:
            return IntentResult(False)
        if self.mode == MODE_NAVIGATING and intent.kind in intents.EDITING_KINDS:
            return IntentResult(False)
        handler = self._handlers.get(intent.kind)
        if handler is None:
            return IntentResult(False, f"Unknown intent '{intent.kind}'")
        return handler(intent)

    def current_view(self) -> SessionView:
        return SessionView(
            grid=self.grid,
            cursor=self.cursor,
            modified=self.modified,
            mode=self.mode,
            buffer=self.buffer,
            selection=self.selection(),
        )

    def selection(self) -> CellRange | None:
        if self.mark is None:
            return None
        return CellRange(self.mark, self.cursor)

    def clamp_cursor(self):
        self.cursor = self.cursor.clamped(self.grid.row_count, self.grid.column_count)
        if self.mark is not None:
            self.mark = self.mark.clamped(self.grid.row_count, self.grid.column_count)

    def bind_status(self, set_status_cb: Callable[[str, float | None], None]):
        self._set_status = set_status_cb

    def mark_modified(self):
        self.modified = True

    # ---------- navigation ----------
    def _move(self, intent: Intent) -> IntentResult:
        d_row, d_col = intents.DIRECTIONS[intent.direction]
        target = self.cursor.moved(d_row * intent.count, d_col * intent.count)
        self.cursor = target.clamped(self.grid.row_count, self.grid.column_count)
        return IntentResult(True)

    # ---------- cell editing ----------
    def _begin_edit(self, _intent: Intent) -> IntentResult:
        self.buffer = self.grid.content_at(self.cursor) or ""
        self.mode = MODE_EDITING
        return IntentResult(True)

    def _keystroke(self, intent: Intent) -> IntentResult:
        if intent.char == intents.BACKSPACE:
            self.buffer = self.buffer[:-1]
        else:
            self.buffer += intent.char
        return IntentResult(True)

    def _commit(self, _intent: Intent) -> IntentResult:
        snap = self.undo_mgr.snapshot_state()
        try:
            grid_ops.set_cell(self.grid, self.cursor, self.buffer)
        except GridError as e:
            # stay in cell editing so the buffer can be fixed
            return self._reject(str(e))
        self.undo_mgr.push_undo(snap)
        self.buffer = ""
        self.mode = MODE_NAVIGATING
        self.modified = True
        return IntentResult(True)

    def _cancel(self, _intent: Intent) -> IntentResult:
        self.buffer = ""
        self.mode = MODE_NAVIGATING
        return IntentResult(True)

    # ---------- structure ----------
    def _structural(self, op, index: int, done: str) -> IntentResult:
        snap = self.undo_mgr.snapshot_state()
        try:
            op(self.grid, index)
        except GridError as e:
            return self._reject(str(e))
        self.undo_mgr.push_undo(snap)
        self.modified = True
        self.clamp_cursor()
        self._set_status(done, None)
        return IntentResult(True, done)

    def _insert_row(self, _intent: Intent) -> IntentResult:
        return self._structural(grid_ops.insert_row, self.cursor.row, "Inserted row")

    def _delete_row(self, _intent: Intent) -> IntentResult:
        return self._structural(grid_ops.delete_row, self.cursor.row, "Deleted row")

    def _insert_column(self, _intent: Intent) -> IntentResult:
        return self._structural(
            grid_ops.insert_column, self.cursor.column, "Inserted column"
        )

    def _delete_column(self, _intent: Intent) -> IntentResult:
        return self._structural(
            grid_ops.delete_column, self.cursor.column, "Deleted column"
        )

    # ---------- blocks ----------
    def _toggle_mark(self, _intent: Intent) -> IntentResult:
        if self.mark is None:
            self.mark = self.cursor
            return IntentResult(True, "Mark set")
        self.mark = None
        return IntentResult(True, "Mark cleared")

    def _clear_block(self, _intent: Intent) -> IntentResult:
        block = self.selection() or CellRange.single(self.cursor)
        snap = self.undo_mgr.snapshot_state()
        try:
            grid_ops.clear_range(self.grid, block)
        except GridError as e:
            return self._reject(str(e))
        self.undo_mgr.push_undo(snap)
        self.mark = None
        self.modified = True
        cells = block.row_span * block.column_span
        msg = f"Cleared {cells} cell{'s' if cells != 1 else ''}"
        self._set_status(msg, None)
        return IntentResult(True, msg)

    # ---------- history ----------
    def _undo(self, _intent: Intent) -> IntentResult:
        msg = self.undo_mgr.undo()
        if msg is None:
            return self._reject("Nothing to undo")
        self.modified = True
        self._set_status(msg, None)
        return IntentResult(True, msg)

    def _redo(self, _intent: Intent) -> IntentResult:
        msg = self.undo_mgr.redo()
        if msg is None:
            return self._reject("Nothing to redo")
        self.modified = True
        self._set_status(msg, None)
        return IntentResult(True, msg)

    # ---------- session ----------
    def _save(self, _intent: Intent) -> IntentResult:
        text = self.grid.to_text()
        self.modified = False
        return IntentResult(True, text=text)

    def _quit(self, _intent: Intent) -> IntentResult:
        self.quit_requested = True
        return IntentResult(True)

    def _reject(self, msg: str) -> IntentResult:
        self._set_status(msg, None)
        return IntentResult(False, msg)


def apply_intent(session: EditorSession, intent: Intent) -> IntentResult:
    return session.apply_intent(intent)


def current_view(session: EditorSession) -> SessionView:
    return session.current_view()

class SessionUndo:
    """Manages undo/redo stacks of grid snapshots for an EditorSession."""

    def __init__(self, session, max_depth: int = 50):
        self.session = session
        self.max_depth = max(1, max_depth)
        self.undo_stack: list[dict] = []
        self.redo_stack: list[dict] = []

    # ---------- snapshots ----------
    def snapshot_state(self):
        return {
            "grid": self.session.grid.copy(),
            "cursor": self.session.cursor,
        }

    def restore_state(self, snap):
        self.session.grid = snap["grid"]
        self.session.cursor = snap["cursor"]
        self.session.clamp_cursor()

    # ---------- stack helpers ----------
    def push_undo(self, snap=None):
        self.undo_stack.append(snap if snap is not None else self.snapshot_state())
        if len(self.undo_stack) > self.max_depth:
            self.undo_stack.pop(0)
        self.redo_stack.clear()

    # ---------- undo/redo ----------
    def undo(self) -> str | None:
        if not self.undo_stack:
            return None
        self.redo_stack.append(self.snapshot_state())
        self.restore_state(self.undo_stack.pop())
        remaining = len(self.undo_stack)
        return f"Undone ({remaining} more)" if remaining else "Undone"

    def redo(self) -> str | None:
        if not self.redo_stack:
            return None
        self.undo_stack.append(self.snapshot_state())
        if len(self.undo_stack) > self.max_depth:
            self.undo_stack.pop(0)
        self.restore_state(self.redo_stack.pop())
        remaining = len(self.redo_stack)
        return f"Redone ({remaining} more)" if remaining else "Redone"

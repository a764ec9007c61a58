import curses

from wcwidth import wcswidth, wcwidth

from cell_address import CellAddress
from editor_session import MODE_EDITING


def _fit(text: str, width: int) -> str:
    """Cut ``text`` to at most ``width`` display cells and pad the rest."""
    out = []
    used = 0
    for ch in text:
        cw = max(0, wcwidth(ch))
        if used + cw > width:
            break
        out.append(ch)
        used += cw
    return "".join(out) + " " * (width - used)


class GridPane:
    PAIR_CELL_TEXT = 1
    PAIR_CELL_ACTIVE = 2
    PAIR_SELECTION = 3
    HEADER_H = 1

    def __init__(self, grid, tab_size: int = 8):
        self.grid = grid
        self.tab_size = max(1, tab_size)
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(
                self.PAIR_CELL_ACTIVE, curses.COLOR_BLACK, curses.COLOR_WHITE
            )
            curses.init_pair(self.PAIR_SELECTION, curses.COLOR_BLACK, curses.COLOR_CYAN)
        except curses.error:
            pass

        self.row_offset = 0
        self.col_offset = 0

    # ---------- geometry ----------
    def gutter_width(self) -> int:
        return max(3, len(str(max(0, self.grid.row_count - 1))) + 1)

    def get_col_width(self, col_idx: int, widths=None) -> int:
        """Column width in screen cells, always a whole number of tab stops."""
        widths = widths if widths is not None else self.grid.display_widths(self.tab_size)
        if col_idx < 0 or col_idx >= len(widths):
            return self.tab_size
        return widths[col_idx] * self.tab_size

    def visible_col_count(self, avail_w: int, widths=None) -> int:
        widths = widths if widths is not None else self.grid.display_widths(self.tab_size)
        used = 0
        count = 0
        for c in range(self.col_offset, len(widths)):
            cw = widths[c] * self.tab_size
            if used + cw > avail_w and count > 0:
                break
            used += cw
            count += 1
        return max(1, count)

    def adjust_viewport(self, cursor, h: int, w: int, widths=None):
        """Scroll so ``cursor`` is on screen. ``h``/``w`` are the window size."""
        widths = widths if widths is not None else self.grid.display_widths(self.tab_size)
        visible_rows = max(1, h - self.HEADER_H)
        avail_w = max(1, w - self.gutter_width() - 1)

        if cursor.row < self.row_offset:
            self.row_offset = cursor.row
        elif cursor.row >= self.row_offset + visible_rows:
            self.row_offset = cursor.row - visible_rows + 1
        self.row_offset = max(0, min(self.row_offset, max(0, self.grid.row_count - 1)))

        if cursor.column < self.col_offset:
            self.col_offset = cursor.column
        while (
            self.col_offset < cursor.column
            and cursor.column >= self.col_offset + self.visible_col_count(avail_w, widths)
        ):
            self.col_offset += 1
        self.col_offset = max(0, min(self.col_offset, max(0, self.grid.column_count - 1)))

    # ---------- rendering ----------
    def draw(self, win, view):
        self.grid = view.grid
        win.erase()
        h, w = win.getmaxyx()
        widths = self.grid.display_widths(self.tab_size)
        self.adjust_viewport(view.cursor, h, w, widths)

        row_w = self.gutter_width()
        avail_w = max(1, w - row_w - 1)
        n_cols = self.visible_col_count(avail_w, widths)
        visible_cols = range(
            self.col_offset, min(self.grid.column_count, self.col_offset + n_cols)
        )
        visible_rows = range(
            self.row_offset, min(self.grid.row_count, self.row_offset + h - self.HEADER_H)
        )

        base_attr = curses.color_pair(self.PAIR_CELL_TEXT)
        editing = view.mode == MODE_EDITING

        # header
        x = row_w + 1
        for c in visible_cols:
            cw = min(self.get_col_width(c, widths), max(1, w - x - 1))
            try:
                win.addnstr(0, x, _fit(str(c), cw), cw, curses.A_BOLD)
            except curses.error:
                pass
            x += cw

        # rows
        cursor_xy = None
        for y, r in enumerate(visible_rows, start=self.HEADER_H):
            try:
                win.addnstr(y, 0, str(r).rjust(row_w), row_w)
            except curses.error:
                pass
            x = row_w + 1
            for c in visible_cols:
                cw = min(self.get_col_width(c, widths), max(1, w - x - 1))
                active = r == view.cursor.row and c == view.cursor.column
                text = self.grid.content_at((r, c)) or ""
                attr = base_attr
                if active:
                    attr = curses.color_pair(self.PAIR_CELL_ACTIVE) | curses.A_REVERSE
                    if editing:
                        # keep the tail of the buffer in view
                        text = view.buffer
                        tail = max(0, wcswidth(text))
                        while text and tail > cw - 1:
                            tail -= max(0, wcwidth(text[0]))
                            text = text[1:]
                        cursor_xy = (y, x + max(0, tail))
                elif view.selection is not None and view.selection.contains(
                    CellAddress(r, c)
                ):
                    attr = curses.color_pair(self.PAIR_SELECTION)
                try:
                    win.addnstr(y, x, _fit(text, cw), cw, attr)
                except curses.error:
                    pass
                x += cw

        if cursor_xy is not None:
            try:
                curses.curs_set(1)
                win.move(*cursor_xy)
            except curses.error:
                pass
        else:
            try:
                curses.curs_set(0)
            except curses.error:
                pass
        win.refresh()


import curses


class ScreenLayout:
    """Grid table on top, then one status line, then the ``:`` line.

    ``resize`` rebuilds the windows after ``KEY_RESIZE``.
    """

    STATUS_LINES = 1
    COMMAND_LINES = 1
    MIN_TABLE_LINES = 2

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.resize()

    def resize(self):
        self.H, self.W = self.stdscr.getmaxyx()
        self.table_h = max(
            self.MIN_TABLE_LINES, self.H - self.STATUS_LINES - self.COMMAND_LINES
        )
        status_y = self.table_h
        cmd_y = status_y + self.STATUS_LINES

        self.table_win = curses.newwin(self.table_h, self.W, 0, 0)
        self.status_win = curses.newwin(self.STATUS_LINES, self.W, status_y, 0)
        # the cursor belongs to the table or the command line
        self.status_win.leaveok(True)
        self.cmd_win = curses.newwin(self.COMMAND_LINES, self.W, cmd_y, 0)

    @property
    def page_rows(self) -> int:
        # rows that fit under the column header
        return max(1, self.table_h - 1)

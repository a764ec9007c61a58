import curses
import os
import time

import intents
from command_line import CommandLine, parse_command
from editor_session import MODE_NAVIGATING
from grid_pane import GridPane
from key_bindings import key_to_intent
from screen_layout import ScreenLayout
from status_bar import render_status
from text_file import TextFileHandler


class Orchestrator:
    def __init__(self, stdscr, session, file_handler=None, config=None, layout=None, grid_pane=None):
        self.stdscr = stdscr
        self.config = config or {}
        try:
            curses.raw()
            self.stdscr.nodelay(False)
            self.stdscr.timeout(100)
        except (curses.error, AttributeError):
            pass

        self.session = session
        self.session.bind_status(self._set_status)
        self.file_handler = file_handler

        self.layout = layout if layout is not None else ScreenLayout(stdscr)
        self.grid = (
            grid_pane
            if grid_pane is not None
            else GridPane(session.grid, tab_size=self.config.get("TAB_SIZE", 8))
        )
        self.command = CommandLine()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0
        self.exit_requested = False

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=None):
        if seconds is None:
            seconds = self.config.get("STATUS_SECONDS", 3)
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _expire_status(self) -> bool:
        """Drop a status message whose time is up. True if one was dropped."""
        if self.status_msg is None or time.time() < self.status_msg_until:
            return False
        self.status_msg = None
        return True

    @property
    def file_path(self):
        return self.file_handler.path if self.file_handler is not None else None

    # ---------------- saving ----------------

    def _save(self, path=None, and_quit=False) -> bool:
        if path:
            self.file_handler = TextFileHandler(path)
        if self.file_handler is None:
            self._set_status("No file name (use :w PATH)")
            self.command.start("w ")
            return False

        result = self.session.apply_intent(intents.Save)
        if not result.accepted:
            return False
        try:
            self.file_handler.save(result.text)
        except OSError as e:
            # the text never reached disk
            self.session.mark_modified()
            self._set_status(f"Save failed: {e}"[: max(1, self.layout.W - 2)])
            return False

        self._set_status(f"Saved {os.path.basename(self.file_path)}")
        if and_quit:
            self.exit_requested = True
        return True

    def _execute_command_buffer(self):
        action = parse_command(self.command.buffer)
        self.command.reset()
        if action.error:
            self._set_status(action.error)
            return
        if action.save:
            if not self._save(path=action.path, and_quit=action.quit):
                return
        elif action.quit:
            self.session.apply_intent(intents.Quit)

    # ---------------- input ----------------

    def handle_key(self, ch):
        if self.command.active:
            result = self.command.handle_key(ch if isinstance(ch, int) else ord(ch))
            if result == "submit":
                self._execute_command_buffer()
            return

        if self.session.mode == MODE_NAVIGATING and ch in (":", ord(":")):
            self.command.start()
            return

        intent = key_to_intent(ch, self.session.mode, self.layout.page_rows)
        if intent is None:
            return
        if intent.kind == intents.SAVE:
            self._save()
            return
        self.session.apply_intent(intent)

    # ---------------- UI ----------------

    def redraw(self):
        view = self.session.current_view()
        self.grid.draw(self.layout.table_win, view)

        sw = self.layout.status_win
        sw.erase()
        h, w = sw.getmaxyx()
        context = {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "mode": view.mode,
            "modified": view.modified,
            "file_path": self.file_path,
            "shape": view.grid.shape,
            "cursor": view.cursor,
            "selection": view.selection,
        }
        try:
            sw.addnstr(0, 0, render_status(context, w), max(1, w - 1))
        except curses.error:
            pass
        sw.refresh()

        cw = self.layout.cmd_win
        if self.command.active:
            try:
                curses.curs_set(1)
            except curses.error:
                pass
            self.command.draw(cw)
        else:
            cw.erase()
            cw.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            try:
                ch = self.stdscr.get_wch()
            except curses.error:
                # timeout with no input
                if self._expire_status():
                    self.redraw()
                continue

            if ch == curses.KEY_RESIZE:
                self.layout.resize()
                self.redraw()
                continue

            self.handle_key(ch)
            if self.session.quit_requested or self.exit_requested:
                break
            self.redraw()

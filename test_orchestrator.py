import os
import tempfile
import time
import unittest

from editor_session import MODE_EDITING, EditorSession
from grid import Grid
from orchestrator import Orchestrator
from text_file import TextFileHandler


class DummyStdscr:
    def getmaxyx(self):
        return 24, 80

    def nodelay(self, flag):
        pass

    def timeout(self, ms):
        pass


class DummyLayout:
    W = 80
    page_rows = 20


class DummyGridPane:
    def draw(self, win, view):
        pass


class FailingHandler:
    path = "/readonly/sheet.txt"

    def save(self, text):
        raise PermissionError("Permission denied")


def _orchestrator(text="a\tb", handler=None, config=None):
    session = EditorSession(Grid.parse(text))
    orch = Orchestrator(
        DummyStdscr(),
        session,
        file_handler=handler,
        config=config,
        layout=DummyLayout(),
        grid_pane=DummyGridPane(),
    )
    return orch, session


def _keys(orch, text):
    for ch in text:
        orch.handle_key(ch)


class OrchestratorEditingTests(unittest.TestCase):
    def test_keys_drive_cell_edit(self):
        orch, session = _orchestrator()

        _keys(orch, "l\n")
        self.assertEqual(session.mode, MODE_EDITING)
        _keys(orch, "!\n")

        self.assertEqual(session.grid.rows(), [["a", "b!"]])
        self.assertTrue(session.modified)

    def test_colon_is_text_while_editing(self):
        orch, session = _orchestrator()

        _keys(orch, "\n:\n")

        self.assertFalse(orch.command.active)
        self.assertEqual(session.grid.content_at((0, 0)), "a:")

    def test_rejected_edit_shows_status(self):
        orch, session = _orchestrator("only")

        orch.handle_key("O")

        self.assertEqual(orch.status_msg, "Cannot delete the only row")
        self.assertEqual(session.grid.rows(), [["only"]])


class OrchestratorStatusTests(unittest.TestCase):
    def test_session_messages_use_configured_seconds(self):
        orch, _ = _orchestrator("only", config={"STATUS_SECONDS": 30})

        orch.handle_key("O")

        ttl = orch.status_msg_until - time.time()
        self.assertGreater(ttl, 20)
        self.assertLessEqual(ttl, 30)

    def test_command_messages_use_configured_seconds(self):
        orch, _ = _orchestrator(config={"STATUS_SECONDS": 30})

        _keys(orch, ":frobnicate\n")

        self.assertGreater(orch.status_msg_until - time.time(), 20)

    def test_live_message_is_kept(self):
        orch, _ = _orchestrator()
        orch._set_status("Saved sheet.txt", 30)

        self.assertFalse(orch._expire_status())
        self.assertEqual(orch.status_msg, "Saved sheet.txt")

    def test_expired_message_is_dropped_once(self):
        orch, _ = _orchestrator()
        orch._set_status("Saved sheet.txt", -1)

        self.assertTrue(orch._expire_status())
        self.assertIsNone(orch.status_msg)
        # nothing left to redraw on the next idle tick
        self.assertFalse(orch._expire_status())


class OrchestratorSaveTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "sheet.txt")

    def tearDown(self):
        self._tmp.cleanup()

    def test_ctrl_s_writes_file(self):
        orch, session = _orchestrator(handler=TextFileHandler(self.path))
        _keys(orch, "o")

        orch.handle_key("\x13")

        with open(self.path, encoding="utf-8", newline="") as f:
            self.assertEqual(f.read(), "\na\tb")
        self.assertFalse(session.modified)
        self.assertEqual(orch.status_msg, "Saved sheet.txt")

    def test_save_without_name_opens_prompt(self):
        orch, session = _orchestrator()
        _keys(orch, "x")

        orch.handle_key("\x13")

        self.assertTrue(orch.command.active)
        self.assertEqual(orch.command.buffer, "w ")
        self.assertTrue(session.modified)

    def test_write_command_with_path(self):
        orch, session = _orchestrator()

        _keys(orch, ":w " + self.path + "\n")

        self.assertEqual(orch.file_path, self.path)
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "a\tb")
        self.assertFalse(session.modified)

    def test_failed_write_keeps_modified(self):
        orch, session = _orchestrator(handler=FailingHandler())
        _keys(orch, "x")

        orch.handle_key("\x13")

        self.assertTrue(session.modified)
        self.assertTrue(orch.status_msg.startswith("Save failed:"))

    def test_write_quit(self):
        orch, session = _orchestrator(handler=TextFileHandler(self.path))

        _keys(orch, ":wq\n")

        self.assertTrue(orch.exit_requested)
        self.assertTrue(os.path.exists(self.path))

    def test_failed_write_quit_stays_open(self):
        orch, session = _orchestrator(handler=FailingHandler())

        _keys(orch, ":wq\n")

        self.assertFalse(orch.exit_requested)
        self.assertFalse(session.quit_requested)


class OrchestratorCommandTests(unittest.TestCase):
    def test_quit_command(self):
        orch, session = _orchestrator()

        _keys(orch, ":q\n")

        self.assertTrue(session.quit_requested)
        self.assertFalse(orch.command.active)

    def test_unknown_command_reports(self):
        orch, session = _orchestrator()

        _keys(orch, ":frobnicate\n")

        self.assertEqual(orch.status_msg, "Unknown command: frobnicate")
        self.assertFalse(session.quit_requested)

    def test_escape_closes_prompt(self):
        orch, session = _orchestrator()

        _keys(orch, ":w\x1b")

        self.assertFalse(orch.command.active)
        self.assertFalse(session.quit_requested)


if __name__ == "__main__":
    unittest.main()

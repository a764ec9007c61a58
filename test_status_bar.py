import time

from cell_address import CellAddress, CellRange
from editor_session import MODE_EDITING, MODE_NAVIGATING
from status_bar import render_status


def _context(**overrides):
    ctx = {
        "status_msg": None,
        "status_until": 0,
        "mode": MODE_NAVIGATING,
        "modified": False,
        "file_path": "/tmp/data/sheet.txt",
        "shape": (3, 5),
        "cursor": CellAddress(1, 2),
        "selection": None,
    }
    ctx.update(overrides)
    return ctx


def test_render_status_summary():
    text = render_status(_context(), 60)
    assert text.rstrip() == " NAV | sheet.txt | 3x5 | 1,2"
    assert len(text) == 60


def test_render_status_flags_edits_and_selection():
    ctx = _context(
        mode=MODE_EDITING,
        modified=True,
        file_path=None,
        selection=CellRange.from_corners(0, 0, 1, 2),
    )
    text = render_status(ctx, 80).rstrip()
    assert text == " EDIT | [No Name] [+] | 3x5 | 1,2 | sel 2x3"


def test_render_status_prefers_live_message():
    ctx = _context(status_msg="Saved sheet.txt", status_until=time.time() + 60)
    assert render_status(ctx, 40).rstrip() == " Saved sheet.txt"


def test_render_status_drops_expired_message():
    ctx = _context(status_msg="old", status_until=time.time() - 1)
    assert render_status(ctx, 40).startswith(" NAV")


def test_render_status_truncates_to_width():
    assert len(render_status(_context(), 10)) == 10

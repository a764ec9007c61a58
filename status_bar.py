import os
import time

from editor_session import MODE_EDITING


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, modified, file_path,
                  shape, cursor, selection
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = "EDIT" if context.get("mode") == MODE_EDITING else "NAV"
        fname = context.get("file_path") or "[No Name]"
        fname = os.path.basename(fname)
        if context.get("modified"):
            fname += " [+]"
        rows, cols = context.get("shape", (0, 0))
        cursor = context.get("cursor")
        pos = f"{cursor.row},{cursor.column}" if cursor is not None else ""
        text = f" {mode} | {fname} | {rows}x{cols} | {pos}"
        selection = context.get("selection")
        if selection is not None:
            text += f" | sel {selection.row_span}x{selection.column_span}"

    return text.ljust(width)[:width]

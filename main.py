import curses
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from config_paths import load_config
from editor_session import EditorSession
from grid import Grid
from orchestrator import Orchestrator
from text_file import TextFileHandler

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


USAGE = "tabtxt - terminal editor for tab-separated text\n\nUsage:\n  tabtxt [path]\n  tabtxt -v\n  tabtxt -h\n"


def load_grid(path: str | None) -> tuple[Grid, TextFileHandler | None]:
    if path is None:
        return Grid(), None
    handler = TextFileHandler(path)
    return handler.load_or_create(), handler


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    path = args[0] if args else None
    try:
        grid, handler = load_grid(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Load failed: {e}", file=sys.stderr)
        return 1

    config = load_config()
    session = EditorSession(grid, undo_max_depth=config["UNDO_MAX_DEPTH"])

    def curses_main(stdscr):
        Orchestrator(stdscr, session, handler, config).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())

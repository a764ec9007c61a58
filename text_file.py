import os

from grid import Grid


class TextFileHandler:
    """Reads and writes the tab-delimited document at ``path``.

    A missing or empty file loads as the empty grid; it is created on the
    first save. Read errors (permissions, directories, bad UTF-8) propagate
    to the caller.
    """

    ENCODING = "utf-8"

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def read_text(self) -> str:
        if not self.exists():
            return ""
        # newline="" keeps "\r" as cell content
        with open(self.path, "r", encoding=self.ENCODING, newline="") as f:
            return f.read()

    def load_or_create(self) -> Grid:
        return Grid.parse(self.read_text())

    def save(self, text: str) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        if not os.path.isdir(directory):
            raise FileNotFoundError(f"No such directory: {directory}")
        with open(self.path, "w", encoding=self.ENCODING, newline="") as f:
            f.write(text)

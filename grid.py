import numpy as np
import pandas as pd
from wcwidth import wcswidth

from cell_address import CellAddress, CellRange
from grid_errors import EmptyGridError, InvalidContentError, OutOfRangeError

CELL_DELIMITER = "\t"
ROW_DELIMITER = "\n"


def _coords(address) -> tuple[int, int]:
    if isinstance(address, CellAddress):
        return address.row, address.column
    row, column = address
    return int(row), int(column)


def _text(value) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value)


def validate_content(text: str) -> str:
    text = "" if text is None else str(text)
    if CELL_DELIMITER in text or ROW_DELIMITER in text:
        raise InvalidContentError("Cell content cannot contain a tab or newline")
    return text


class Grid:
    """Rectangular grid of text cells backed by an object-dtype DataFrame.

    Rows shorter than the widest row are padded with ``pd.NA`` so the grid
    stays rectangular while ``to_text`` still writes every row back exactly
    as it was read. Padding reads as an empty string.

    Invariants kept by every mutation:

    * the grid is at least 1x1;
    * in each row the stored cells form a prefix, padding only trails;
    * at least one row stores all ``column_count`` cells, so the width
      survives a ``to_text``/``parse`` round trip.
    """

    def __init__(self, frame: pd.DataFrame | None = None):
        if frame is None:
            frame = pd.DataFrame([[""]], dtype=object)
        self.df = frame
        # display widths per tab size, dropped on every write
        self._widths: dict[int, list[int]] = {}
        self._reset_labels()

    # ---------- construction ----------
    @classmethod
    def parse(cls, text: str) -> "Grid":
        """Build a grid from tab/newline-delimited text. Never fails.

        Empty text gives a 1x1 grid holding one empty cell. A terminating
        newline yields a trailing empty row.
        """
        text = "" if text is None else text
        split_rows = [line.split(CELL_DELIMITER) for line in text.split(ROW_DELIMITER)]
        width = max(len(items) for items in split_rows)

        cells = np.full((len(split_rows), width), pd.NA, dtype=object)
        for r, items in enumerate(split_rows):
            cells[r, : len(items)] = items
        return cls(pd.DataFrame(cells, dtype=object))

    @classmethod
    def with_size(cls, rows: int, columns: int) -> "Grid":
        if rows < 1 or columns < 1:
            raise ValueError("Grid dimensions must be positive")
        cells = np.full((rows, columns), "", dtype=object)
        return cls(pd.DataFrame(cells, dtype=object))

    def copy(self) -> "Grid":
        return Grid(self.df.copy(deep=True))

    # ---------- shape ----------
    @property
    def row_count(self) -> int:
        return len(self.df)

    @property
    def column_count(self) -> int:
        return len(self.df.columns)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.column_count)

    def in_bounds(self, address) -> bool:
        row, column = _coords(address)
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    # ---------- reads ----------
    def content_at(self, address) -> str | None:
        if not self.in_bounds(address):
            return None
        row, column = _coords(address)
        return _text(self.df.iat[row, column])

    def rows(self) -> list[list[str]]:
        return [[_text(v) for v in row] for row in self.df.to_numpy(dtype=object)]

    def to_text(self) -> str:
        lines = []
        lengths = self._stored_lengths()
        for r, n in enumerate(lengths):
            cells = self.df.iloc[r, : int(n)]
            lines.append(CELL_DELIMITER.join(_text(v) for v in cells))
        return ROW_DELIMITER.join(lines)

    def display_widths(self, tab_size: int = 8) -> list[int]:
        """Width of every column in tab stops.

        Cached until the next write, since every redraw asks for it.
        """
        tab_size = max(1, tab_size)
        if tab_size not in self._widths:
            widths = []
            for c in range(self.column_count):
                widest = 0
                for value in self.df.iloc[:, c]:
                    widest = max(widest, wcswidth(_text(value)))
                widths.append(widest // tab_size + 1)
            self._widths[tab_size] = widths
        return list(self._widths[tab_size])

    # ---------- writes ----------
    def set_content(self, address, text: str) -> None:
        self._check_address(address)
        text = validate_content(text)

        r, c = _coords(address)
        stored = int(self._stored_lengths()[r])
        if c > stored:
            self.df.iloc[r, stored:c] = ""
        self.df.iat[r, c] = text
        self._widths.clear()

    def clear_range(self, cell_range: CellRange) -> None:
        if not cell_range.fits(self.row_count, self.column_count):
            raise OutOfRangeError(
                f"Range ends at ({cell_range.end.row}, {cell_range.end.column}) "
                f"outside {self.row_count}x{self.column_count} grid"
            )
        lengths = self._stored_lengths()
        for r in range(cell_range.start.row, cell_range.end.row + 1):
            stop = min(int(lengths[r]), cell_range.end.column + 1)
            if stop > cell_range.start.column:
                self.df.iloc[r, cell_range.start.column : stop] = ""
        self._widths.clear()

    def insert_row(self, index: int) -> None:
        self._check_insert_index(index, self.row_count, "Row")
        blank = pd.DataFrame(
            [[pd.NA] * self.column_count], columns=self.df.columns, dtype=object
        )
        self.df = pd.concat(
            [self.df.iloc[:index], blank, self.df.iloc[index:]],
            ignore_index=True,
        )
        self._widths.clear()

    def delete_row(self, index: int) -> None:
        self._check_delete_index(index, self.row_count, "Row")
        if self.row_count == 1:
            raise EmptyGridError("Cannot delete the only row")
        self.df = self.df.drop(self.df.index[index]).reset_index(drop=True)
        self._anchor_width()
        self._widths.clear()

    def insert_column(self, index: int) -> None:
        self._check_insert_index(index, self.column_count, "Column")
        width = self.column_count
        lengths = self._stored_lengths()
        values = [
            "" if (n > index or n == width) else pd.NA for n in lengths
        ]
        self.df.insert(index, width, pd.Series(values, index=self.df.index, dtype=object))
        self._reset_labels()

    def delete_column(self, index: int) -> None:
        self._check_delete_index(index, self.column_count, "Column")
        if self.column_count == 1:
            raise EmptyGridError("Cannot delete the only column")
        self.df.drop(columns=[self.df.columns[index]], inplace=True)
        self._reset_labels()
        self._anchor_width()

    # ---------- helpers ----------
    def _reset_labels(self):
        self.df.columns = pd.RangeIndex(len(self.df.columns))
        self.df.index = pd.RangeIndex(len(self.df))
        self._widths.clear()

    def _stored_lengths(self) -> np.ndarray:
        # length of the stored prefix of every row
        mask = self.df.notna().to_numpy()
        if mask.shape[1] == 0:
            return np.zeros(mask.shape[0], dtype=int)
        last = mask.shape[1] - np.argmax(mask[:, ::-1], axis=1)
        return np.where(mask.any(axis=1), last, 0)

    def _anchor_width(self):
        lengths = self._stored_lengths()
        if (lengths == self.column_count).any():
            return
        self.df.iloc[0, int(lengths[0]) :] = ""

    def _check_address(self, address):
        if not self.in_bounds(address):
            row, column = _coords(address)
            raise OutOfRangeError(
                f"Cell ({row}, {column}) outside "
                f"{self.row_count}x{self.column_count} grid"
            )

    @staticmethod
    def _check_insert_index(index: int, count: int, what: str):
        if index < 0 or index > count:
            raise OutOfRangeError(f"{what} index {index} outside 0..{count}")

    @staticmethod
    def _check_delete_index(index: int, count: int, what: str):
        if index < 0 or index >= count:
            raise OutOfRangeError(f"{what} index {index} outside 0..{count - 1}")

    # ---------- dunder ----------
    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self.rows() == other.rows()

    __hash__ = None

    def __repr__(self):
        return f"Grid(rows={self.row_count}, columns={self.column_count})"

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class CellAddress:
    row: int
    column: int

    def __post_init__(self):
        if self.row < 0 or self.column < 0:
            raise ValueError(
                f"Cell address must be non-negative, got ({self.row}, {self.column})"
            )

    def moved(self, d_row: int, d_col: int) -> "CellAddress":
        # saturate at zero; upper bounds are the caller's business
        return CellAddress(max(0, self.row + d_row), max(0, self.column + d_col))

    def clamped(self, rows: int, columns: int) -> "CellAddress":
        row = min(self.row, max(0, rows - 1))
        column = min(self.column, max(0, columns - 1))
        return CellAddress(row, column)


@dataclass(frozen=True)
class CellRange:
    """Rectangular block of cells, both corners inclusive.

    Corners are normalized so ``start`` is top-left and ``end`` is
    bottom-right. Bounds against a grid are checked where the range is used.
    """

    start: CellAddress
    end: CellAddress

    def __post_init__(self):
        r0, r1 = sorted((self.start.row, self.end.row))
        c0, c1 = sorted((self.start.column, self.end.column))
        object.__setattr__(self, "start", CellAddress(r0, c0))
        object.__setattr__(self, "end", CellAddress(r1, c1))

    @classmethod
    def from_corners(cls, r0: int, c0: int, r1: int, c1: int) -> "CellRange":
        return cls(CellAddress(r0, c0), CellAddress(r1, c1))

    @classmethod
    def single(cls, address: CellAddress) -> "CellRange":
        return cls(address, address)

    @property
    def row_span(self) -> int:
        return self.end.row - self.start.row + 1

    @property
    def column_span(self) -> int:
        return self.end.column - self.start.column + 1

    def contains(self, address: CellAddress) -> bool:
        return (
            self.start.row <= address.row <= self.end.row
            and self.start.column <= address.column <= self.end.column
        )

    def fits(self, rows: int, columns: int) -> bool:
        return self.end.row < rows and self.end.column < columns

    def addresses(self) -> Iterator[CellAddress]:
        for r in range(self.start.row, self.end.row + 1):
            for c in range(self.start.column, self.end.column + 1):
                yield CellAddress(r, c)

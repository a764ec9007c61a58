"""Edit operations applied to a Grid.

The Grid methods check their arguments against the current shape before
touching any cell, so a raised ``GridError`` means nothing changed. These
functions are the named entry points and the ``Edit`` dispatch over them.
"""

from dataclasses import dataclass, field
from typing import Any

from cell_address import CellRange
from grid import Grid


def set_cell(grid: Grid, address, text: str) -> None:
    grid.set_content(address, text)


def insert_row(grid: Grid, index: int) -> None:
    grid.insert_row(index)


def delete_row(grid: Grid, index: int) -> None:
    grid.delete_row(index)


def insert_column(grid: Grid, index: int) -> None:
    grid.insert_column(index)


def delete_column(grid: Grid, index: int) -> None:
    grid.delete_column(index)


def clear_range(grid: Grid, cell_range: CellRange) -> None:
    grid.clear_range(cell_range)


@dataclass(frozen=True)
class Edit:
    kind: str  # set_cell | insert_row | delete_row | insert_column | delete_column | clear_range
    args: tuple[Any, ...] = field(default_factory=tuple)


_OPERATIONS = {
    "set_cell": set_cell,
    "insert_row": insert_row,
    "delete_row": delete_row,
    "insert_column": insert_column,
    "delete_column": delete_column,
    "clear_range": clear_range,
}


def apply_edit(grid: Grid, edit: Edit) -> None:
    try:
        op = _OPERATIONS[edit.kind]
    except KeyError:
        raise ValueError(f"Unknown edit '{edit.kind}'") from None
    op(grid, *edit.args)

"""Conway's Game of Life on a wrapping (toroidal) rectangular grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fancyweb.size import SizeU32, u32_to_usize, usize_to_u32


class Cell(Enum):
    DEAD = 0
    LIVE = 1


@dataclass(frozen=True)
class Point:
    """Zero-based row and column indexes."""

    i: int
    j: int


def _cell(rows: list[list[Cell]], i: int, j: int) -> Cell:
    if i < 0 or j < 0:
        raise IndexError(f"negative index ({i}, {j})")
    return rows[i][j]


def _count_live_neighbors(rows: list[list[Cell]], height: int, width: int, i: int, j: int) -> int:
    # Offsets of height-1 and width-1 wrap around like unsigned subtraction.
    return sum(
        _cell(rows, (i + di) % height, (j + dj) % width).value
        for di in (height - 1, 0, 1)
        for dj in (width - 1, 0, 1)
        if not (di == 0 and dj == 0)
    )


def _next_state(cell: Cell, neighbors: int) -> Cell:
    if cell is Cell.LIVE:
        return Cell.LIVE if 2 <= neighbors <= 3 else Cell.DEAD
    return Cell.LIVE if neighbors == 3 else cell


class Universe:
    """A rectangular grid of cells that wraps at its edges."""

    def __init__(self) -> None:
        self._rows: list[list[Cell]] = []

    def resize(self, size: SizeU32) -> None:
        """Grow or shrink the grid, keeping existing cells and filling with dead ones."""
        height = u32_to_usize(size.height)
        width = u32_to_usize(size.width)
        del self._rows[height:]
        self._rows.extend([] for _ in range(height - len(self._rows)))
        for row in self._rows:
            del row[width:]
            row.extend([Cell.DEAD] * (width - len(row)))

    def height(self) -> int:
        return usize_to_u32(len(self._rows))

    def width(self) -> int:
        return usize_to_u32(len(self._rows[0])) if self._rows else 0

    def _size(self) -> SizeU32:
        return SizeU32(height=self.height(), width=self.width())

    def at(self, p: Point) -> Cell:
        return _cell(self._rows, p.i, p.j)

    def set(self, i: int, j: int, c: Cell) -> None:
        if i < 0 or j < 0:
            raise IndexError(f"negative index ({i}, {j})")
        self._rows[i][j] = c

    def tick(self) -> None:
        """Advance one generation."""
        size = self._size()
        last = self._rows
        self._rows = [
            [
                _next_state(cell, _count_live_neighbors(last, size.height, size.width, i, j))
                for j, cell in enumerate(row)
            ]
            for i, row in enumerate(last)
        ]

    def speckle(self) -> None:
        """Fill the grid with a fixed starting pattern."""
        width = self.width()
        for i, row in enumerate(self._rows):
            row[:] = [
                Cell.LIVE if (i * width + j) % 2 == 0 or (i * width + j) % 7 == 0 else Cell.DEAD
                for j in range(len(row))
            ]
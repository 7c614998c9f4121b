"""
Run Scanner - Finds straight lines of matching tokens.

Two passes over a grid: rows left to right, then columns top to bottom.
Each pass counts consecutive equal tokens and emits a Run whenever a
streak of at least min_length ends, including at the edge of the grid.

Every token takes part, EMPTY and BOMB included: three cleared cells in
a row count as a run.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .grid import Grid, Position
from .tokens import Token

DEFAULT_MIN_LENGTH = 3


class ShapeKind(Enum):
    """Discriminator shared by Run and CompoundShape."""
    ROW = "row"
    COMPOUND = "compound"


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Run:
    """A maximal straight line of cells sharing one token."""
    color: Token
    cells: tuple[Position, ...]

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.ROW

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def axis(self) -> Axis:
        if len(self.cells) > 1 and self.cells[0].y == self.cells[1].y:
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    def overlap(self, other: Run) -> list[Position]:
        """Positions present in both runs, in this run's order."""
        return [cell for cell in self.cells for theirs in other.cells if cell == theirs]


def scan_runs(grid: Grid, min_length: int = DEFAULT_MIN_LENGTH) -> list[Run]:
    """
    Return all horizontal runs, then all vertical runs, of at least min_length.

    Horizontal runs are ordered top to bottom, left to right; vertical
    runs left to right, top to bottom.
    """
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")

    runs: list[Run] = []

    # Rows
    for y in range(grid.height):
        count = 1
        for x in range(1, grid.width):
            if grid.cells[y][x] == grid.cells[y][x - 1]:
                count += 1
                continue
            if count >= min_length:
                runs.append(_horizontal(grid, y, x - count, x))
            count = 1
        if count >= min_length:
            runs.append(_horizontal(grid, y, grid.width - count, grid.width))

    # Columns
    for x in range(grid.width):
        count = 1
        for y in range(1, grid.height):
            if grid.cells[y][x] == grid.cells[y - 1][x]:
                count += 1
                continue
            if count >= min_length:
                runs.append(_vertical(grid, x, y - count, y))
            count = 1
        if count >= min_length:
            runs.append(_vertical(grid, x, grid.height - count, grid.height))

    return runs


def _horizontal(grid: Grid, y: int, start: int, stop: int) -> Run:
    return Run(
        color=grid.cells[y][start],
        cells=tuple(Position(x, y) for x in range(start, stop)),
    )


def _vertical(grid: Grid, x: int, start: int, stop: int) -> Run:
    return Run(
        color=grid.cells[start][x],
        cells=tuple(Position(x, y) for y in range(start, stop)),
    )

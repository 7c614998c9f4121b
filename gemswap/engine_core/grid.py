"""
Grid Store - The rectangular array of tokens.

Design principles:
- Bounds-safe reads: get() returns None outside the grid, never raises
- Writes are unchecked; callers resolve positions first
- snapshot() is an independent copy for speculative mutation
- Randomness is injected, never taken from the module-level generator
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Sequence
import random

from .tokens import Token, PLAYABLE_TOKENS


@dataclass(frozen=True)
class Position:
    """A cell coordinate: x is the column, y is the row (both 0-indexed)."""
    x: int
    y: int

    def manhattan(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass
class Grid:
    """
    A width x height mapping from Position to Token.

    Cells are stored row-major: cells[y][x]. Dimensions are fixed at
    construction; contents are mutable in place.
    """
    width: int
    height: int
    cells: list[list[Token]] = field(default_factory=list)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if not self.cells:
            self.cells = [[Token.EMPTY] * self.width for _ in range(self.height)]
        elif len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError("cells do not match grid dimensions")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Token]]) -> Grid:
        """Build a grid from nested rows (top row first)."""
        if not rows or not rows[0]:
            raise ValueError("rows must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("rows must all have the same length")
        return cls(width=width, height=len(rows), cells=[list(row) for row in rows])

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Position) -> Token | None:
        """Token at pos, or None when pos lies outside the grid."""
        if not self.in_bounds(pos):
            return None
        return self.cells[pos.y][pos.x]

    def set(self, pos: Position, token: Token) -> None:
        self.cells[pos.y][pos.x] = token

    def swap(self, a: Position, b: Position) -> None:
        """Exchange the tokens at two in-bounds positions."""
        self.cells[a.y][a.x], self.cells[b.y][b.x] = self.cells[b.y][b.x], self.cells[a.y][a.x]

    def snapshot(self) -> Grid:
        return Grid(width=self.width, height=self.height, cells=[row[:] for row in self.cells])

    def randomize(self, rng: random.Random) -> None:
        """Fill every cell with a uniformly drawn playable token."""
        for y in range(self.height):
            for x in range(self.width):
                self.cells[y][x] = rng.choice(PLAYABLE_TOKENS)

    def rows(self) -> tuple[tuple[Token, ...], ...]:
        """Read-only view of the contents, top row first."""
        return tuple(tuple(row) for row in self.cells)

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def count(self, token: Token) -> int:
        return sum(row.count(token) for row in self.cells)

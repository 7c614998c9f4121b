"""
Move System - Proposed swaps and their outcomes.

A Move names two positions whose tokens should be exchanged. The swap is
symmetric; source and destination are only distinguished for messages.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .grid import Position


class MoveError(Enum):
    """Reasons a move is rejected."""
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_ADJACENT = "NOT_ADJACENT"
    NO_RUN = "NO_RUN"


MOVE_ERROR_MESSAGES = {
    MoveError.OUT_OF_BOUNDS: "{pos} is outside the board",
    MoveError.NOT_ADJACENT: "{source} and {destination} are not next to each other",
    MoveError.NO_RUN: "swapping {source} and {destination} does not form a row",
}


@dataclass(frozen=True)
class Move:
    """A proposed exchange of the tokens at two positions."""
    source: Position
    destination: Position

    @classmethod
    def of(cls, x1: int, y1: int, x2: int, y2: int) -> Move:
        """Factory from raw coordinates."""
        return cls(source=Position(x1, y1), destination=Position(x2, y2))

    def reversed(self) -> Move:
        return Move(source=self.destination, destination=self.source)

    def __str__(self) -> str:
        return f"{self.source} {self.destination}"


@dataclass
class MoveResult:
    """
    Result of attempting a move.

    On failure the grid is untouched and error/error_code say why.
    On success shapes holds the matches present after the swap.
    """
    success: bool
    move: Move | None = None
    error: str | None = None
    error_code: MoveError | None = None
    shapes: list[Any] = field(default_factory=list)  # list[Shape]

    @classmethod
    def failure(cls, move: Move, error_code: MoveError, offending: Position | None = None) -> MoveResult:
        """Create a failure result with a formatted message."""
        message = MOVE_ERROR_MESSAGES[error_code].format(
            pos=offending,
            source=move.source,
            destination=move.destination,
        )
        return cls(success=False, move=move, error=message, error_code=error_code)

    @classmethod
    def ok(cls, move: Move, shapes: list[Any] | None = None) -> MoveResult:
        return cls(success=True, move=move, shapes=shapes or [])

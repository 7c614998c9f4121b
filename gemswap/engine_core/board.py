"""
Board - The public face of the engine.

Owns the live Grid and the injected random source. All callers
(CLI, session loop, service) go through this class.

Usage:
    board = Board(10, 10, rng=random.Random(7))

    if board.make_move(Move.of(0, 0, 1, 0)):
        shapes = board.get_shapes()
        board.resolve()
"""

from __future__ import annotations
from typing import Sequence
import logging
import random

from .grid import Grid, Position
from .move import Move, MoveResult
from .merger import Shape, find_shapes
from .resolver import ResolutionReport, resolve
from .scanner import DEFAULT_MIN_LENGTH
from .tokens import Token
from .validator import apply_move, check_move

logger = logging.getLogger(__name__)


class Board:
    """A randomly filled grid with move validation and match detection."""

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random | None = None,
        min_length: int = DEFAULT_MIN_LENGTH,
    ):
        self.grid = Grid(width=width, height=height)
        self.rng = rng if rng is not None else random.Random()
        self.min_length = min_length
        self.fill_randomly()

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Token]],
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> Board:
        """Build a board with fixed contents instead of random ones."""
        grid = Grid.from_rows(rows)
        board = cls(grid.width, grid.height, min_length=min_length)
        board.grid = grid
        return board

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def fill_randomly(self) -> None:
        self.grid.randomize(self.rng)
        logger.debug("Filled %dx%d board", self.width, self.height)

    def get(self, pos: Position) -> Token | None:
        return self.grid.get(pos)

    def view(self) -> tuple[tuple[Token, ...], ...]:
        """Read-only token rows for renderers."""
        return self.grid.rows()

    def snapshot(self) -> Grid:
        return self.grid.snapshot()

    # =========================================================================
    # Moves
    # =========================================================================

    def check_move(self, move: Move) -> MoveResult | None:
        """Failure result for an illegal move, None for a legal one."""
        return check_move(self.grid, move, self.min_length)

    def is_legal_move(self, move: Move) -> bool:
        return self.check_move(move) is None

    def try_move(self, move: Move) -> MoveResult:
        """Apply a move if legal; the result carries the shapes afterwards."""
        result = apply_move(self.grid, move, self.min_length)
        if result.success:
            result.shapes = self.get_shapes()
        return result

    def make_move(self, move: Move) -> bool:
        return apply_move(self.grid, move, self.min_length).success

    def legal_moves(self) -> list[Move]:
        """Every legal swap, each pair listed once (rightward or downward)."""
        moves = []
        for pos in self.grid.positions():
            for other in (Position(pos.x + 1, pos.y), Position(pos.x, pos.y + 1)):
                move = Move(source=pos, destination=other)
                if self.is_legal_move(move):
                    moves.append(move)
        return moves

    # =========================================================================
    # Matches
    # =========================================================================

    def get_shapes(self) -> list[Shape]:
        return find_shapes(self.grid, self.min_length)

    def resolve(self) -> ResolutionReport:
        return resolve(self.grid, self.min_length)

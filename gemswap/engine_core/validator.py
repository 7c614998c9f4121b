"""
Move Validator - Decides whether a swap is legal.

A swap is legal when:
1. Both positions are on the grid
2. The positions are orthogonally adjacent
3. The grid has at least one run after the swap

Validation works on a snapshot and never touches the grid it is given.
"""

from __future__ import annotations
import logging

from .grid import Grid, Position
from .move import Move, MoveError, MoveResult
from .scanner import scan_runs, DEFAULT_MIN_LENGTH

logger = logging.getLogger(__name__)


def are_adjacent(a: Position, b: Position) -> bool:
    return a.manhattan(b) == 1


def check_move(grid: Grid, move: Move, min_length: int = DEFAULT_MIN_LENGTH) -> MoveResult | None:
    """
    Validate a move against the grid.

    Returns a failure MoveResult describing the first broken rule,
    or None if the move is legal.
    """
    for pos in (move.source, move.destination):
        if grid.get(pos) is None:
            return MoveResult.failure(move, MoveError.OUT_OF_BOUNDS, offending=pos)

    if not are_adjacent(move.source, move.destination):
        return MoveResult.failure(move, MoveError.NOT_ADJACENT)

    trial = grid.snapshot()
    trial.swap(move.source, move.destination)
    if not scan_runs(trial, min_length):
        return MoveResult.failure(move, MoveError.NO_RUN)

    return None


def is_legal_move(grid: Grid, move: Move, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    return check_move(grid, move, min_length) is None


def apply_move(grid: Grid, move: Move, min_length: int = DEFAULT_MIN_LENGTH) -> MoveResult:
    """
    Validate and, if legal, perform the swap on the live grid.

    The grid is left unchanged when the move is rejected.
    """
    failure = check_move(grid, move, min_length)
    if failure is not None:
        logger.debug("Rejected move %s: %s", move, failure.error_code.value)
        return failure

    grid.swap(move.source, move.destination)
    logger.debug("Applied move %s", move)
    return MoveResult.ok(move)

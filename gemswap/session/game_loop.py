"""
Game Loop - Processes one move at a time against a live board.

A turn:
1. Validate and apply the swap
2. Collect the shapes the swap produced
3. Optionally resolve them (clear cells, place markers)

A rejected move leaves the board as it was and is not recorded.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..engine_core import Board, CompoundShape, Move, MoveResult, ResolutionReport, Shape

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Result of processing a turn."""
    move_result: MoveResult
    shapes: list[Shape] = field(default_factory=list)
    resolution: ResolutionReport | None = None

    @property
    def success(self) -> bool:
        return self.move_result.success

    @property
    def compounds(self) -> list[CompoundShape]:
        return [shape for shape in self.shapes if isinstance(shape, CompoundShape)]

    @property
    def errors(self) -> list[str]:
        return [self.move_result.error] if self.move_result.error else []


class GameLoop:
    """
    The turn driver.

    Usage:
        loop = GameLoop(board, auto_resolve=True)

        result = loop.play(Move.of(2, 3, 2, 4))
        if not result.success:
            show_error(result.errors)
    """

    def __init__(self, board: Board, auto_resolve: bool = False):
        self.board = board
        self.auto_resolve = auto_resolve
        self.history: list[Move] = []

    @property
    def turn_number(self) -> int:
        return len(self.history)

    def play(self, move: Move) -> TurnResult:
        move_result = self.board.try_move(move)
        if not move_result.success:
            logger.info("Turn %d: rejected %s (%s)", self.turn_number + 1, move, move_result.error)
            return TurnResult(move_result=move_result)

        self.history.append(move)
        result = TurnResult(move_result=move_result, shapes=move_result.shapes)
        logger.info(
            "Turn %d: %s formed %d shapes (%d compound)",
            self.turn_number, move, len(result.shapes), len(result.compounds),
        )

        if self.auto_resolve:
            result.resolution = self.board.resolve()
        return result

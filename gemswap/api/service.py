"""
Game Service - Business logic layer between front ends and the engine.

The service:
1. Creates boards (optionally seeded)
2. Translates move text or MoveRequest into engine moves
3. Runs each accepted move through the session GameLoop
4. Formats results as pydantic responses

This layer has no transport; the CLI calls it directly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union
import logging
import random

from .parsing import MoveParseError, parse_move
from .schemas import (
    BoardResponse,
    ErrorCode,
    ErrorResponse,
    MoveRequest,
    MoveResponse,
    shape_info,
)
from ..engine_core import Board, CompoundShape, Shape
from ..session import GameLoop, TurnResult

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10


@dataclass
class GameService:
    """
    Main service for a single board.

    Usage:
        service = GameService()
        service.new_board(10, 10, seed=42)

        response = service.submit_move("3,4 3,5")
        if not response.success:
            print(response.error.message)
    """
    auto_resolve: bool = False
    loop: GameLoop | None = None
    last_turn: TurnResult | None = None
    _history: list[MoveResponse] = field(default_factory=list)

    def new_board(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        seed: int | None = None,
    ) -> BoardResponse:
        board = Board(width, height, rng=random.Random(seed))
        return self.use_board(board)

    def use_board(self, board: Board) -> BoardResponse:
        self.loop = GameLoop(board, auto_resolve=self.auto_resolve)
        self._history.clear()
        self.last_turn = None
        logger.info("New %dx%d board", board.width, board.height)
        return self.board_state()

    @property
    def board(self) -> Board:
        if self.loop is None:
            raise RuntimeError("No board - call new_board() first")
        return self.loop.board

    @property
    def history(self) -> list[MoveResponse]:
        return list(self._history)

    def board_state(self) -> BoardResponse:
        return self._board_response(self.board.get_shapes())

    def shapes(self):
        return [shape_info(shape) for shape in self.board.get_shapes()]

    def submit_move(self, move: Union[str, MoveRequest]) -> MoveResponse:
        """
        Apply a move given as text ("x1,y1 x2,y2") or as a MoveRequest.

        Malformed text yields a MALFORMED_MOVE error response; illegal moves
        yield the validator's error code. The board only changes on success.
        """
        if self.loop is None:
            raise RuntimeError("No board - call new_board() first")

        if isinstance(move, str):
            try:
                engine_move = parse_move(move)
            except MoveParseError as e:
                return MoveResponse(
                    success=False,
                    error=ErrorResponse(
                        error_code=ErrorCode.MALFORMED_MOVE,
                        message=str(e),
                        details={"input": e.text},
                    ),
                )
        else:
            engine_move = move.to_move()

        turn = self.loop.play(engine_move)
        self.last_turn = turn
        response = MoveResponse.from_result(turn.move_result)
        if turn.success:
            response.matched = [shape_info(shape) for shape in turn.shapes]
            response.board = self.board_state()
            self._history.append(response)
        return response

    def _board_response(self, shapes: list[Shape]) -> BoardResponse:
        return BoardResponse(
            width=self.board.width,
            height=self.board.height,
            rows=[list(row) for row in self.board.view()],
            shapes=[shape_info(shape) for shape in shapes],
            compound_count=sum(1 for shape in shapes if isinstance(shape, CompoundShape)),
        )

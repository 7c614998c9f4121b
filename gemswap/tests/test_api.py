"""
Tests for move parsing, pydantic schemas and the game service.
"""

import pytest
from pydantic import ValidationError

from ..api import (
    BoardResponse,
    CompoundInfo,
    ErrorCode,
    GameService,
    MoveParseError,
    MoveRequest,
    PositionInfo,
    RunInfo,
    parse_move,
    shape_info,
)
from ..engine_core import Move, Token, find_shapes


class TestParseMove:
    """Tests for the text move syntax."""

    def test_valid_move(self):
        assert parse_move("3,4 3,5") == Move.of(3, 4, 3, 5)

    def test_surrounding_whitespace(self):
        assert parse_move("  1,2 2,2\n") == Move.of(1, 2, 2, 2)

    def test_multi_digit(self):
        assert parse_move("10,12 11,12") == Move.of(10, 12, 11, 12)

    @pytest.mark.parametrize("text", ["", "1,2,3,4", "a,b c,d", "-1,0 0,0", "1,2  2,2", "1 2 3 4"])
    def test_malformed(self, text):
        with pytest.raises(MoveParseError) as exc_info:
            parse_move(text)
        assert f'failed to parse move from "{text}"' in str(exc_info.value)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_move("nope")


class TestSchemas:
    """Tests for schema conversion."""

    def test_run_info(self, grid_from):
        info = shape_info(find_shapes(grid_from("RRR"))[0])
        assert isinstance(info, RunInfo)
        data = info.model_dump(mode="json")
        assert data["kind"] == "row"
        assert data["color"] == "red"
        assert data["length"] == 3
        assert data["cells"][2] == {"x": 2, "y": 0}

    def test_compound_info(self, l_shape_grid):
        info = shape_info(find_shapes(l_shape_grid)[0])
        assert isinstance(info, CompoundInfo)
        data = info.model_dump(mode="json")
        assert data["kind"] == "compound"
        assert len(data["rows"]) == 2
        assert data["intersections"] == [{"x": 0, "y": 2}]

    def test_board_response_discriminates_shapes(self):
        data = {
            "width": 3,
            "height": 1,
            "rows": [["red", "red", "red"]],
            "shapes": [{"kind": "row", "color": "red", "length": 3, "cells": [
                {"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 2, "y": 0},
            ]}],
        }
        response = BoardResponse.model_validate(data)
        assert isinstance(response.shapes[0], RunInfo)
        assert response.rows[0][0] == Token.RED

    def test_move_request_to_move(self):
        request = MoveRequest(source=PositionInfo(x=1, y=2), destination=PositionInfo(x=1, y=3))
        assert request.to_move() == Move.of(1, 2, 1, 3)

    def test_move_request_requires_ints(self):
        with pytest.raises(ValidationError):
            MoveRequest(source={"x": "a", "y": 0}, destination={"x": 0, "y": 0})


class TestGameService:
    """Tests for the service layer."""

    def test_new_board_seeded(self):
        a = GameService().new_board(5, 4, seed=9)
        b = GameService().new_board(5, 4, seed=9)
        assert a.width == 5
        assert a.height == 4
        assert len(a.rows) == 4
        assert a.rows == b.rows

    def test_board_state_compound_count(self, board_from):
        service = GameService()
        board = board_from("RBG", "RGB", "RRR")
        state = service.use_board(board)
        assert state.compound_count == 1
        assert state.shapes[0].kind == "compound"

    def test_submit_text_move(self, swap_board):
        service = GameService()
        service.use_board(swap_board)
        response = service.submit_move("0,0 1,0")

        assert response.success
        assert response.error is None
        assert response.move.source == PositionInfo(x=0, y=0)
        assert len(response.matched) == 1
        assert response.board.rows[0] == [Token.BLUE, Token.RED, Token.RED, Token.RED]
        assert len(service.history) == 1

    def test_submit_move_request(self, swap_board):
        service = GameService()
        service.use_board(swap_board)
        request = MoveRequest(source=PositionInfo(x=1, y=0), destination=PositionInfo(x=0, y=0))
        assert service.submit_move(request).success

    def test_submit_malformed(self, swap_board):
        service = GameService()
        service.use_board(swap_board)
        before = swap_board.view()
        response = service.submit_move("zero zero")

        assert not response.success
        assert response.error.error_code == ErrorCode.MALFORMED_MOVE
        assert response.error.details == {"input": "zero zero"}
        assert swap_board.view() == before

    @pytest.mark.parametrize("text,code", [
        ("0,1 1,1", ErrorCode.NO_RUN),
        ("0,0 2,0", ErrorCode.NOT_ADJACENT),
        ("3,1 4,1", ErrorCode.OUT_OF_BOUNDS),
    ])
    def test_submit_illegal(self, swap_board, text, code):
        service = GameService()
        service.use_board(swap_board)
        response = service.submit_move(text)

        assert not response.success
        assert response.error.error_code == code
        assert response.board is None
        assert service.history == []

    def test_auto_resolve(self, swap_board):
        service = GameService(auto_resolve=True)
        service.use_board(swap_board)
        response = service.submit_move("0,0 1,0")

        assert response.matched[0].kind == "row"
        assert response.board.rows[0] == [Token.BLUE, Token.EMPTY, Token.EMPTY, Token.EMPTY]
        assert service.last_turn.resolution is not None

    def test_no_board(self):
        with pytest.raises(RuntimeError):
            GameService().submit_move("0,0 1,0")

    def test_shapes(self, board_from):
        service = GameService()
        service.use_board(board_from("RRR", "BGB"))
        shapes = service.shapes()
        assert len(shapes) == 1
        assert shapes[0].length == 3

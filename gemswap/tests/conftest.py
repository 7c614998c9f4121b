"""
Pytest fixtures for Gemswap tests.

Grids are written as strings, one per row:
R B G Y P are colors, * is the bomb marker, . is an empty cell.
"""

import random

import pytest

from ..engine_core import Board, Grid, Token

LETTERS = {
    "R": Token.RED,
    "B": Token.BLUE,
    "G": Token.GREEN,
    "Y": Token.YELLOW,
    "P": Token.PURPLE,
    "*": Token.BOMB,
    ".": Token.EMPTY,
}


def rows_from(*lines: str) -> list[list[Token]]:
    return [[LETTERS[ch] for ch in line] for line in lines]


@pytest.fixture
def grid_from():
    """Build a Grid from row strings."""
    def build(*lines: str) -> Grid:
        return Grid.from_rows(rows_from(*lines))
    return build


@pytest.fixture
def board_from():
    """Build a Board with fixed contents from row strings."""
    def build(*lines: str, min_length: int = 3) -> Board:
        return Board.from_rows(rows_from(*lines), min_length=min_length)
    return build


@pytest.fixture
def l_shape_grid(grid_from) -> Grid:
    """A vertical and a horizontal red run meeting at (0, 2)."""
    return grid_from(
        "RBG",
        "RGB",
        "RRR",
    )


@pytest.fixture
def swap_board(board_from) -> Board:
    """
    No runs yet. Swapping (0,0) and (1,0) makes BRRR; swapping
    (0,1) and (1,1) makes nothing.
    """
    return board_from(
        "RBRR",
        "GYGY",
    )


@pytest.fixture
def seeded_boards() -> list[Board]:
    return [Board(6, 6, rng=random.Random(seed)) for seed in range(25)]

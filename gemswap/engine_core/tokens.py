"""
Tokens - The values a grid cell can hold.

Playable colors are declared explicitly in PLAYABLE_TOKENS. The BOMB
marker is only ever written by resolution, and EMPTY marks a cleared cell.
Glyphs for display live in the render module, not here.
"""

from __future__ import annotations
from enum import Enum


class Token(Enum):
    """Cell values."""
    # Playable colors
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"

    # Reserved
    BOMB = "bomb"  # Written into compound intersections
    EMPTY = "empty"  # Cleared cell

    @property
    def is_playable(self) -> bool:
        return self in PLAYABLE_TOKENS


PLAYABLE_TOKENS: tuple[Token, ...] = (
    Token.RED,
    Token.BLUE,
    Token.GREEN,
    Token.YELLOW,
    Token.PURPLE,
)

MARKER_TOKEN = Token.BOMB
EMPTY_TOKEN = Token.EMPTY

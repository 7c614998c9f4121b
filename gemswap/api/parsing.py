"""
Move Parsing - Turns "x1,y1 x2,y2" text into a Move.

Parsing only checks syntax. Bounds and adjacency are left to the
engine's validator.
"""

from __future__ import annotations
import re

from ..engine_core import Move

MOVE_PATTERN = re.compile(r"^(\d+),(\d+) (\d+),(\d+)$")
MOVE_FORMAT = "x1,y1 x2,y2"


class MoveParseError(ValueError):
    """Raised when move text does not match the expected format."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'failed to parse move from "{text}"')


def parse_move(text: str) -> Move:
    match = MOVE_PATTERN.match(text.strip())
    if match is None:
        raise MoveParseError(text)
    x1, y1, x2, y2 = (int(group) for group in match.groups())
    return Move.of(x1, y1, x2, y2)

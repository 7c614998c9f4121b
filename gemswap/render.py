"""
Rendering - Text output for boards and shapes.

The glyph tables live here rather than on Token so the engine carries
no presentation concerns.
"""

from __future__ import annotations
from typing import Union

from .engine_core import Board, CompoundShape, Grid, Shape, Token

DEFAULT_GLYPHS: dict[Token, str] = {
    Token.RED: "🛑",
    Token.BLUE: "🔷",
    Token.GREEN: "🟩",
    Token.YELLOW: "🟡",
    Token.PURPLE: "💜",
    Token.BOMB: "💣",
    Token.EMPTY: "  ",
}

ASCII_GLYPHS: dict[Token, str] = {
    Token.RED: "R",
    Token.BLUE: "B",
    Token.GREEN: "G",
    Token.YELLOW: "Y",
    Token.PURPLE: "P",
    Token.BOMB: "*",
    Token.EMPTY: ".",
}


def render_board(source: Union[Board, Grid], glyphs: dict[Token, str] | None = None) -> str:
    """One line per row, one glyph per cell."""
    table = glyphs or DEFAULT_GLYPHS
    rows = source.view() if isinstance(source, Board) else source.rows()
    return "\n".join("".join(table[token] for token in row) for row in rows)


def describe_shape(shape: Shape) -> str:
    if isinstance(shape, CompoundShape):
        cells = ", ".join(f"({pos})" for pos in shape.intersections)
        return f"compound of {len(shape.runs)} rows crossing at {cells}"
    return f"{shape.color.value} row of {shape.length} from ({shape.cells[0]}) to ({shape.cells[-1]})"


def render_shapes(shapes: list[Shape]) -> str:
    if not shapes:
        return "no rows on the board"
    return "\n".join(f"- {describe_shape(shape)}" for shape in shapes)

"""
Engine Core - Grid storage, move validation and match detection.

The engine is the runtime that:
1. Holds the Grid of tokens
2. Validates proposed swaps
3. Scans for runs of matching tokens
4. Merges overlapping runs into compound shapes
5. Resolves matches into empty cells and markers
"""

from .tokens import Token, PLAYABLE_TOKENS, MARKER_TOKEN, EMPTY_TOKEN
from .grid import Grid, Position
from .move import Move, MoveError, MoveResult
from .scanner import Run, scan_runs, DEFAULT_MIN_LENGTH
from .merger import CompoundShape, Shape, ShapeKind, merge_runs, find_shapes
from .validator import check_move, is_legal_move, apply_move, are_adjacent
from .resolver import ResolutionReport, resolve
from .board import Board

__all__ = [
    "Token",
    "PLAYABLE_TOKENS",
    "MARKER_TOKEN",
    "EMPTY_TOKEN",
    "Grid",
    "Position",
    "Move",
    "MoveError",
    "MoveResult",
    "Run",
    "scan_runs",
    "DEFAULT_MIN_LENGTH",
    "CompoundShape",
    "Shape",
    "ShapeKind",
    "merge_runs",
    "find_shapes",
    "check_move",
    "is_legal_move",
    "apply_move",
    "are_adjacent",
    "ResolutionReport",
    "resolve",
    "Board",
]

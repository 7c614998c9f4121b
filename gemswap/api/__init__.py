"""
API - Serializable contract and service layer for front ends.

Components:
- schemas: Pydantic request/response models
- parsing: Text move syntax
- service: Framework-agnostic operations over a Board
"""

from .parsing import MoveParseError, parse_move, MOVE_FORMAT
from .schemas import (
    ErrorCode,
    PositionInfo,
    RunInfo,
    CompoundInfo,
    ShapeInfo,
    MoveRequest,
    BoardResponse,
    ErrorResponse,
    MoveResponse,
    shape_info,
)
from .service import GameService

__all__ = [
    "MoveParseError",
    "parse_move",
    "MOVE_FORMAT",
    "ErrorCode",
    "PositionInfo",
    "RunInfo",
    "CompoundInfo",
    "ShapeInfo",
    "MoveRequest",
    "BoardResponse",
    "ErrorResponse",
    "MoveResponse",
    "shape_info",
    "GameService",
]

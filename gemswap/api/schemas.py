"""
Pydantic Schemas - Serializable views of boards, moves and shapes.

These models define the contract between the engine and any front end
(CLI JSON output, a future UI). Engine values are converted with the
from_* helpers; nothing here mutates engine state.

Error Codes:
- MALFORMED_MOVE: Move text does not match "x1,y1 x2,y2"
- OUT_OF_BOUNDS: A position lies outside the board
- NOT_ADJACENT: The two positions are not orthogonal neighbors
- NO_RUN: The swap does not produce a row of three or more
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from ..engine_core import CompoundShape, Move, MoveResult, Position, Run, Shape, Token


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    MALFORMED_MOVE = "MALFORMED_MOVE"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_ADJACENT = "NOT_ADJACENT"
    NO_RUN = "NO_RUN"


# =============================================================================
# Shared Models
# =============================================================================

class PositionInfo(BaseModel):
    """A cell coordinate."""
    x: int = Field(description="Column")
    y: int = Field(description="Row")

    model_config = {"from_attributes": True}

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class RunInfo(BaseModel):
    """A straight row of matching tokens."""
    kind: Literal["row"] = "row"
    color: Token
    length: int
    cells: list[PositionInfo]

    @classmethod
    def from_run(cls, run: Run) -> "RunInfo":
        return cls(
            color=run.color,
            length=run.length,
            cells=[PositionInfo.model_validate(pos) for pos in run.cells],
        )


class CompoundInfo(BaseModel):
    """Overlapping rows and the cells where they cross."""
    kind: Literal["compound"] = "compound"
    rows: list[RunInfo]
    intersections: list[PositionInfo]

    @classmethod
    def from_compound(cls, compound: CompoundShape) -> "CompoundInfo":
        return cls(
            rows=[RunInfo.from_run(run) for run in compound.runs],
            intersections=[PositionInfo.model_validate(pos) for pos in compound.intersections],
        )


ShapeInfo = Annotated[Union[RunInfo, CompoundInfo], Field(discriminator="kind")]


def shape_info(shape: Shape) -> Union[RunInfo, CompoundInfo]:
    if isinstance(shape, CompoundShape):
        return CompoundInfo.from_compound(shape)
    return RunInfo.from_run(shape)


# =============================================================================
# Requests
# =============================================================================

class MoveRequest(BaseModel):
    """A swap between two cells."""
    source: PositionInfo
    destination: PositionInfo

    def to_move(self) -> Move:
        return Move(source=self.source.to_position(), destination=self.destination.to_position())


# =============================================================================
# Responses
# =============================================================================

class BoardResponse(BaseModel):
    """Board contents and current matches."""
    width: int
    height: int
    rows: list[list[Token]]
    shapes: list[ShapeInfo] = Field(default_factory=list)
    compound_count: int = 0


class ErrorResponse(BaseModel):
    """Standard error response."""
    error_code: ErrorCode
    message: str
    details: Optional[dict[str, str]] = None


class MoveResponse(BaseModel):
    """Outcome of a submitted move."""
    success: bool
    move: Optional[MoveRequest] = None
    error: Optional[ErrorResponse] = None
    matched: list[ShapeInfo] = Field(default_factory=list, description="Shapes present right after the swap")
    board: Optional[BoardResponse] = None

    @classmethod
    def from_result(cls, result: MoveResult, board: Optional[BoardResponse] = None) -> "MoveResponse":
        move = None
        if result.move is not None:
            move = MoveRequest(
                source=PositionInfo.model_validate(result.move.source),
                destination=PositionInfo.model_validate(result.move.destination),
            )
        error = None
        if not result.success:
            error = ErrorResponse(
                error_code=ErrorCode(result.error_code.value),
                message=result.error or "",
            )
        return cls(success=result.success, move=move, error=error, board=board)

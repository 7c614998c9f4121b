"""
Resolution Step - Clears matched cells.

Compound shapes are handled first: every member cell becomes EMPTY and
each intersection then becomes a BOMB marker. Standalone runs are
cleared afterwards. Cleared cells stay empty; nothing falls or refills.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .grid import Grid, Position
from .merger import CompoundShape, Shape, find_shapes
from .scanner import Run, DEFAULT_MIN_LENGTH
from .tokens import EMPTY_TOKEN, MARKER_TOKEN

logger = logging.getLogger(__name__)


@dataclass
class ResolutionReport:
    """What a resolution pass changed."""
    shapes: list[Shape] = field(default_factory=list)
    cleared: list[Position] = field(default_factory=list)
    markers: list[Position] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.cleared or self.markers)


def resolve(grid: Grid, min_length: int = DEFAULT_MIN_LENGTH) -> ResolutionReport:
    """Clear every current match on the grid in place."""
    shapes = find_shapes(grid, min_length)
    report = ResolutionReport(shapes=shapes)

    for compound in (s for s in shapes if isinstance(s, CompoundShape)):
        for run in compound.runs:
            _clear(grid, run, report)
        for pos in compound.intersections:
            grid.set(pos, MARKER_TOKEN)
            report.markers.append(pos)

    for run in (s for s in shapes if isinstance(s, Run)):
        _clear(grid, run, report)

    logger.debug(
        "Resolved %d shapes: %d cells cleared, %d markers",
        len(shapes), len(report.cleared), len(report.markers),
    )
    return report


def _clear(grid: Grid, run: Run, report: ResolutionReport) -> None:
    for pos in run.cells:
        grid.set(pos, EMPTY_TOKEN)
        report.cleared.append(pos)

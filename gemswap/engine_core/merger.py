"""
Shape Merger - Groups runs that share cells into compound shapes.

The merge is a single forward pass in scan order:
- each run not yet absorbed opens a candidate compound
- every later run that shares a cell with it (directly) joins the compound
  and is marked absorbed, its shared cells appended to the intersections
- a candidate with no partners is emitted as the plain run

Runs that touch the compound only through another member are not pulled
in, and an intersection cell is listed once per overlapping pair.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

from .grid import Grid, Position
from .scanner import Run, ShapeKind, scan_runs, DEFAULT_MIN_LENGTH


@dataclass
class CompoundShape:
    """Two or more runs joined by shared cells."""
    runs: list[Run] = field(default_factory=list)
    intersections: list[Position] = field(default_factory=list)

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.COMPOUND

    @property
    def cells(self) -> set[Position]:
        return {cell for run in self.runs for cell in run.cells}


Shape = Union[Run, CompoundShape]


def merge_runs(runs: list[Run]) -> list[Shape]:
    """Partition runs into standalone runs and compound shapes."""
    shapes: list[Shape] = []
    used: set[int] = set()

    for i, run in enumerate(runs):
        if i in used:
            continue
        compound = CompoundShape(runs=[run])

        for j in range(i + 1, len(runs)):
            # A later run already claimed by an earlier compound stays there
            if j in used:
                continue
            shared = run.overlap(runs[j])
            if shared:
                compound.runs.append(runs[j])
                compound.intersections.extend(shared)
                used.add(j)

        used.add(i)
        if len(compound.runs) > 1:
            shapes.append(compound)
        else:
            shapes.append(run)

    return shapes


def find_shapes(grid: Grid, min_length: int = DEFAULT_MIN_LENGTH) -> list[Shape]:
    """Scan a grid and merge the resulting runs."""
    return merge_runs(scan_runs(grid, min_length))

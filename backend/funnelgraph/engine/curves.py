"""Curve Path Builder — one closed outline per pair of adjacent boundaries.

Outlines are built in (main, cross) coordinates and traverse clockwise:

    1---------->2
    ^           |
    |           v
    4<----------3

1→2 follows the current boundary, 2→3 is a straight connector at the last
main-axis point, 3→4 follows the next boundary backwards, then the path
closes. Between plateaus the edges are S-shaped cubics; the edge touching the
last main-axis point is straight in both directions.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from funnelgraph.utils.math_helpers import format_number, round_point

Point = tuple[float, float]

# Control points sit this fraction of the span away from their endpoint.
DEFAULT_CURVE_TENSION = 0.5


def _swap(point: Point) -> Point:
    return (point[1], point[0])


@dataclass(frozen=True)
class MoveTo:
    point: Point

    command = "M"

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.point,)

    def transposed(self) -> MoveTo:
        return MoveTo(_swap(self.point))


@dataclass(frozen=True)
class CurveTo:
    c1: Point
    c2: Point
    end: Point

    command = "C"

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.c1, self.c2, self.end)

    def transposed(self) -> CurveTo:
        return CurveTo(_swap(self.c1), _swap(self.c2), _swap(self.end))


@dataclass(frozen=True)
class LineTo:
    end: Point

    command = "L"

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.end,)

    def transposed(self) -> LineTo:
        return LineTo(_swap(self.end))


@dataclass(frozen=True)
class ClosePath:
    command = "Z"

    @property
    def points(self) -> tuple[Point, ...]:
        return ()

    def transposed(self) -> ClosePath:
        return self


Instruction = MoveTo | CurveTo | LineTo | ClosePath


@dataclass(frozen=True)
class SegmentOutline:
    """Closed outline as an ordered tuple of path instructions."""

    instructions: tuple[Instruction, ...]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    @property
    def start(self) -> Point:
        return self.instructions[0].points[0]

    def segments(self) -> list[tuple[Point, Point, Point, Point]]:
        """Every drawn edge as a cubic (start, c1, c2, end).

        Straight edges report c1 == start and c2 == end. The closing edge is
        included, so a funnel of N segments yields 2N + 2 edges.
        """
        edges: list[tuple[Point, Point, Point, Point]] = []
        current = origin = self.start
        for inst in self.instructions:
            if isinstance(inst, MoveTo):
                current = origin = inst.point
            elif isinstance(inst, CurveTo):
                edges.append((current, inst.c1, inst.c2, inst.end))
                current = inst.end
            elif isinstance(inst, LineTo):
                edges.append((current, current, inst.end, inst.end))
                current = inst.end
            else:
                edges.append((current, current, origin, origin))
                current = origin
        return edges

    def transposed(self) -> SegmentOutline:
        """Swap both coordinates of every point (reverses the winding)."""
        return SegmentOutline(tuple(inst.transposed() for inst in self.instructions))


def build_outline(
    main_axis: Sequence[float],
    boundary: Sequence[float],
    next_boundary: Sequence[float],
    curve_tension: float = DEFAULT_CURVE_TENSION,
) -> SegmentOutline:
    """Closed outline between `boundary` and `next_boundary`, in (main, cross) space.

    Inputs are assumed validated: three sequences of equal length size + 1.
    """
    X, Y, Y_next = main_axis, boundary, next_boundary
    size = len(X) - 1

    instructions: list[Instruction] = [MoveTo((X[0], Y[0]))]

    for i in range(size):
        instructions.append(
            _edge((X[i], Y[i]), (X[i + 1], Y[i + 1]), straight=i == size - 1, tension=curve_tension)
        )

    instructions.append(LineTo((X[size], Y_next[size])))

    for i in range(size, 0, -1):
        instructions.append(
            _edge((X[i], Y_next[i]), (X[i - 1], Y_next[i - 1]), straight=i == size, tension=curve_tension)
        )

    instructions.append(ClosePath())
    return SegmentOutline(tuple(instructions))


def _edge(start: Point, end: Point, *, straight: bool, tension: float) -> Instruction:
    if straight:
        return LineTo(end)
    (x1, y1), (x2, y2) = start, end
    offset = (x2 - x1) * tension
    return CurveTo(
        c1=(round_point(x1 + offset), y1),
        c2=(round_point(x2 - offset), y2),
        end=end,
    )


def path_data(outline: SegmentOutline) -> str:
    """Canonical text form: "M x,y C cx1,cy1 cx2,cy2 x,y L x,y Z"."""
    parts = []
    for inst in outline.instructions:
        coords = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in inst.points)
        parts.append(f"{inst.command}{coords}")
    return " ".join(parts)

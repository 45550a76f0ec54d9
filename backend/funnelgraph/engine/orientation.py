"""Orientation Adapter — axis roles and screen mapping.

Horizontal: main axis = width (x), cross axis = height (y), clockwise.
Vertical:   main axis = height (y), cross axis = width (x), counter-clockwise:

    1<----------4
    |           ^
    v           |
    2---------->3

Vertical screen coordinates are the transpose of (main, cross) coordinates,
which is also what flips the winding.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from funnelgraph.engine.curves import SegmentOutline

if TYPE_CHECKING:
    from funnelgraph.engine.geometry import FunnelGeometry


class Orientation(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: str | Orientation | None) -> Orientation:
        """Anything other than "vertical" means horizontal."""
        if value == cls.VERTICAL or value == cls.VERTICAL.value:
            return cls.VERTICAL
        return cls.HORIZONTAL

    @property
    def flipped(self) -> Orientation:
        return Orientation.HORIZONTAL if self is Orientation.VERTICAL else Orientation.VERTICAL


@dataclass(frozen=True)
class AxisRoles:
    orientation: Orientation
    main_dimension: float
    cross_dimension: float


def axis_roles(width: float, height: float, orientation: Orientation) -> AxisRoles:
    if orientation is Orientation.VERTICAL:
        return AxisRoles(orientation, main_dimension=height, cross_dimension=width)
    return AxisRoles(orientation, main_dimension=width, cross_dimension=height)


def to_screen(outline: SegmentOutline, orientation: Orientation) -> SegmentOutline:
    """Map an outline from (main, cross) space to (x, y)."""
    if orientation is Orientation.VERTICAL:
        return outline.transposed()
    return outline


def toggle(geometry: FunnelGeometry) -> FunnelGeometry:
    """Quarter-turn: transpose every outline and swap the container sides.

    The axis arrays are stored by role, not by screen axis, so they carry over.
    """
    return replace(
        geometry,
        orientation=geometry.orientation.flipped,
        width=geometry.height,
        height=geometry.width,
        outlines=tuple(outline.transposed() for outline in geometry.outlines),
    )


def to_vertical(geometry: FunnelGeometry) -> FunnelGeometry:
    """Rotate a horizontal geometry; a vertical one is returned as is.

    So `to_vertical(to_horizontal(g)) == g` only when `g` is vertical. For a
    horizontal `g` the pair is a single rotation. Use `toggle` to undo a turn
    whatever the starting orientation.
    """
    if geometry.orientation is Orientation.VERTICAL:
        return geometry
    return toggle(geometry)


def to_horizontal(geometry: FunnelGeometry) -> FunnelGeometry:
    """Rotate a vertical geometry; a horizontal one is returned as is."""
    if geometry.orientation is Orientation.HORIZONTAL:
        return geometry
    return toggle(geometry)

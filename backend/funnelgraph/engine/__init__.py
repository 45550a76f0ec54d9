"""Funnel geometry engine."""

from funnelgraph.engine.context import FunnelContext
from funnelgraph.engine.curves import SegmentOutline, build_outline, path_data
from funnelgraph.engine.dataset import OneDimensional, TwoDimensional, parse
from funnelgraph.engine.errors import (
    DimensionMismatchError,
    FunnelError,
    InvalidDataError,
    MissingDataError,
)
from funnelgraph.engine.geometry import FunnelGeometry, compute_geometry
from funnelgraph.engine.orientation import Orientation, to_horizontal, to_vertical

__all__ = [
    "FunnelContext",
    "SegmentOutline",
    "build_outline",
    "path_data",
    "OneDimensional",
    "TwoDimensional",
    "parse",
    "FunnelError",
    "MissingDataError",
    "DimensionMismatchError",
    "InvalidDataError",
    "FunnelGeometry",
    "compute_geometry",
    "Orientation",
    "to_horizontal",
    "to_vertical",
]

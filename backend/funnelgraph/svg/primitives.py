"""Outline primitives — svgpathtools paths and shapely polygons from outlines."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from svgpathtools import CubicBezier, Line, Path

from funnelgraph.engine.curves import SegmentOutline
from funnelgraph.utils.geometry import winding_direction

logger = logging.getLogger(__name__)

# Collinearity tolerance: 1% of segment length.
# Sub-pixel for typical container sizes (100-1000px).
_LINE_COLLINEARITY_TOL = 0.01

# Samples per edge when approximating an outline by a polygon.
_SAMPLES_PER_SEGMENT = 24

# Below this a stack is a sliver left by sampling noise, not a shape.
_MIN_AREA = 1e-6


def is_line_from_cubic(
    p0: tuple[float, float],
    p1: tuple[float, float],
    p2: tuple[float, float],
    p3: tuple[float, float],
    tolerance: float = _LINE_COLLINEARITY_TOL,
) -> bool:
    """Detect if a cubic bezier is actually a straight line (control points collinear)."""
    pts = np.array([p0, p1, p2, p3], dtype=np.float64)

    v1 = pts[3] - pts[0]
    v2 = pts[1] - pts[0]
    v3 = pts[2] - pts[0]

    length = np.linalg.norm(v1)
    if length < 1e-10:
        return True

    cross1 = abs(v1[0] * v2[1] - v1[1] * v2[0]) / length
    cross2 = abs(v1[0] * v3[1] - v1[1] * v3[0]) / length

    return cross1 < tolerance and cross2 < tolerance


def outline_to_path(outline: SegmentOutline) -> Path:
    """Evaluable svgpathtools Path. Flat cubics become Lines; zero-length edges are dropped."""
    segments = []
    for start, c1, c2, end in outline.segments():
        if start == end:
            continue
        if is_line_from_cubic(start, c1, c2, end):
            segments.append(Line(complex(*start), complex(*end)))
        else:
            segments.append(CubicBezier(complex(*start), complex(*c1), complex(*c2), complex(*end)))
    return Path(*segments)


def sample_outline(outline: SegmentOutline, samples_per_segment: int = _SAMPLES_PER_SEGMENT) -> NDArray[np.float64]:
    """Nx2 boundary points, evenly spaced in t along every edge."""
    points: list[tuple[float, float]] = []
    for seg in outline_to_path(outline):
        for t in np.linspace(0, 1, samples_per_segment, endpoint=False):
            pt = seg.point(t)
            points.append((pt.real, pt.imag))
    if not points:
        return np.empty((0, 2))
    return np.array(points)


def outline_polygon(outline: SegmentOutline) -> Polygon | None:
    """Shapely polygon of the filled outline, or None if it encloses nothing."""
    return _polygon(sample_outline(outline))


def _polygon(points: NDArray[np.float64]) -> Polygon | None:
    if len(points) < 3:
        return None
    poly = Polygon(points)
    if not poly.is_valid:
        poly = poly.buffer(0)
    if poly.is_empty or poly.area < _MIN_AREA:
        return None
    return poly


@dataclass
class OutlineMetrics:
    area: float = 0.0
    # (xmin, ymin, xmax, ymax)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    centroid: tuple[float, float] = (0.0, 0.0)
    # 1 = clockwise on screen, -1 = counter-clockwise, 0 = encloses nothing
    winding: int = 0


def outline_metrics(outline: SegmentOutline) -> OutlineMetrics:
    """Area, bounding box, centroid and winding of one outline."""
    points = sample_outline(outline)
    poly = _polygon(points)
    if poly is None:
        pts = np.array([p for inst in outline for p in inst.points], dtype=np.float64)
        xmin, ymin = pts.min(axis=0)
        xmax, ymax = pts.max(axis=0)
        logger.debug("Outline starting at %s encloses no area", outline.start)
        return OutlineMetrics(
            bbox=(float(xmin), float(ymin), float(xmax), float(ymax)),
            centroid=(float(pts[:, 0].mean()), float(pts[:, 1].mean())),
        )
    c = poly.centroid
    xmin, ymin, xmax, ymax = poly.bounds
    return OutlineMetrics(
        area=float(poly.area),
        bbox=(float(xmin), float(ymin), float(xmax), float(ymax)),
        centroid=(float(c.x), float(c.y)),
        winding=winding_direction(points),
    )

"""Tests for outline → svgpathtools / shapely primitives."""

from __future__ import annotations

import pytest
from svgpathtools import CubicBezier, Line

from funnelgraph.engine.context import FunnelContext
from funnelgraph.engine.dataset import parse
from funnelgraph.engine.geometry import compute_geometry
from funnelgraph.svg.primitives import (
    is_line_from_cubic,
    outline_metrics,
    outline_polygon,
    outline_to_path,
    sample_outline,
)
from tests.conftest import EQUAL_STACKS, TAPERING_VALUES


def _rectangle():
    return FunnelContext([100, 100], width=100, height=50).segment_outline(0)


def _tapering(direction="horizontal"):
    return FunnelContext(TAPERING_VALUES, width=100, height=100, direction=direction).segment_outline(0)


def test_is_line_from_cubic():
    assert is_line_from_cubic((0, 0), (1, 0), (2, 0), (3, 0))
    assert is_line_from_cubic((0, 0), (0, 0), (5, 5), (5, 5))
    assert not is_line_from_cubic((0, 0), (25, 0), (25, 25), (50, 25))


def test_flat_edges_become_lines():
    path = outline_to_path(_rectangle())
    assert all(isinstance(seg, Line) for seg in path)
    assert path.isclosed()


def test_s_curves_stay_cubic():
    path = outline_to_path(_tapering())
    assert sum(isinstance(seg, CubicBezier) for seg in path) == 2
    assert path.isclosed()


def test_sample_outline_shape():
    points = sample_outline(_tapering(), samples_per_segment=10)
    assert points.shape[1] == 2
    assert len(points) == 10 * len(outline_to_path(_tapering()))


def test_rectangle_metrics():
    metrics = outline_metrics(_rectangle())
    assert metrics.area == pytest.approx(5000)
    assert metrics.bbox == pytest.approx((0, 0, 100, 50))
    assert metrics.centroid == pytest.approx((50, 25))
    assert metrics.winding == 1


def test_vertical_winds_the_other_way():
    assert outline_metrics(_tapering()).winding == 1
    assert outline_metrics(_tapering("vertical")).winding == -1


def test_tapering_area_is_symmetric():
    horizontal = outline_metrics(_tapering())
    vertical = outline_metrics(_tapering("vertical"))
    assert horizontal.area == pytest.approx(vertical.area)
    assert horizontal.centroid[1] == pytest.approx(50)


def test_stack_areas_add_up_to_the_funnel():
    stacked = compute_geometry(parse(EQUAL_STACKS), 200, 100)
    whole = compute_geometry(parse([10, 20]), 200, 100)
    stack_area = sum(outline_metrics(o).area for o in stacked.outlines)
    assert stack_area == pytest.approx(outline_metrics(whole.outlines[0]).area, rel=1e-3)


def test_empty_stack_has_no_area():
    geometry = compute_geometry(parse([[0, 10], [0, 5]]), 100, 100)
    assert outline_polygon(geometry.outlines[0]) is None
    metrics = outline_metrics(geometry.outlines[0])
    assert metrics.area == 0.0
    assert metrics.winding == 0

"""Geometry pipeline — Dataset + container size + orientation → FunnelGeometry."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from funnelgraph.engine.axis import cross_axis_points, main_axis_points
from funnelgraph.engine.config import EngineConfig
from funnelgraph.engine.curves import SegmentOutline, build_outline
from funnelgraph.engine.dataset import Dataset
from funnelgraph.engine.orientation import Orientation, axis_roles, to_screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunnelGeometry:
    """Everything a renderer needs to draw one funnel. Immutable."""

    orientation: Orientation
    width: float
    height: float
    # N+1 points along the main axis
    main_axis: tuple[float, ...]
    # Boundary curves, outer top first; each has N+1 points
    cross_axis: tuple[tuple[float, ...], ...]
    # One outline per adjacent boundary pair, in screen (x, y) coordinates
    outlines: tuple[SegmentOutline, ...]

    @property
    def path_count(self) -> int:
        return len(self.outlines)


def compute_geometry(
    dataset: Dataset,
    width: float,
    height: float,
    orientation: str | Orientation = Orientation.HORIZONTAL,
    config: EngineConfig | None = None,
) -> FunnelGeometry:
    """Run the full derivation. Same inputs always give an equal result."""
    orientation = Orientation.parse(orientation)
    config = config or EngineConfig()
    start = time.perf_counter()

    roles = axis_roles(width, height, orientation)
    cross = cross_axis_points(dataset, roles.cross_dimension)
    main = main_axis_points(dataset.size, roles.main_dimension)

    outlines = tuple(
        to_screen(build_outline(main, cross[i], cross[i + 1], config.curve_tension), orientation)
        for i in range(len(cross) - 1)
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Geometry: %d segments, %d paths, %s %sx%s in %.2fms",
        dataset.size,
        len(outlines),
        orientation.value,
        width,
        height,
        elapsed,
    )
    return FunnelGeometry(
        orientation=orientation,
        width=width,
        height=height,
        main_axis=tuple(main),
        cross_axis=tuple(tuple(boundary) for boundary in cross),
        outlines=outlines,
    )

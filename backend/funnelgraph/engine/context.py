"""FunnelContext — the single mutable object a caller holds for one funnel.

It keeps the current dataset, container size, orientation, gradient direction,
colours and labels. Every read re-runs the pure pipeline on the current state,
so there is no cached geometry to drift after resize or re-orientation.

One instance is not synchronized; callers serialize their own updates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from funnelgraph.engine.axis import cross_axis_points, main_axis_points
from funnelgraph.engine.config import EngineConfig
from funnelgraph.engine.curves import SegmentOutline, build_outline, path_data
from funnelgraph.engine.dataset import (
    Dataset,
    extract_colors,
    extract_labels,
    extract_sub_labels,
    parse,
)
from funnelgraph.engine.errors import MissingDataError
from funnelgraph.engine.geometry import FunnelGeometry, compute_geometry
from funnelgraph.engine.orientation import Orientation, axis_roles, to_screen
from funnelgraph.engine.percentages import composition_percentages, percentages

logger = logging.getLogger(__name__)

DimensionProvider = Callable[[], tuple[float, float]]


class FunnelContext:
    """Holds funnel state and answers geometry reads for it."""

    def __init__(
        self,
        data: Any,
        width: float | None = None,
        height: float | None = None,
        direction: str | Orientation = Orientation.HORIZONTAL,
        gradient_direction: str | Orientation = Orientation.HORIZONTAL,
        dimension_provider: DimensionProvider | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        if width is None or height is None:
            if dimension_provider is None:
                raise MissingDataError("Container size is missing: pass width/height or a dimension provider")

        self.config = config or EngineConfig()
        self.direction = Orientation.parse(direction)
        self.gradient_direction = Orientation.parse(gradient_direction)
        self.width = width
        self.height = height
        self.dimension_provider = dimension_provider

        self.dataset = _validated(parse(data))
        self.labels = extract_labels(data)
        self.sub_labels = extract_sub_labels(data)
        self.colors = extract_colors(data) or self._default_colors()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_two_dimensional(self) -> bool:
        return self.dataset.is_two_dimensional

    @property
    def is_vertical(self) -> bool:
        return self.direction is Orientation.VERTICAL

    @property
    def segment_count(self) -> int:
        return self.dataset.size

    @property
    def sub_segment_count(self) -> int:
        return self.dataset.sub_size

    def get_width(self) -> float:
        if self.width is not None:
            return self.width
        return self.dimension_provider()[0]

    def get_height(self) -> float:
        if self.height is not None:
            return self.height
        return self.dimension_provider()[1]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def main_axis_points(self) -> list[float]:
        roles = axis_roles(self.get_width(), self.get_height(), self.direction)
        return main_axis_points(self.segment_count, roles.main_dimension)

    def cross_axis_points(self) -> list[list[float]]:
        roles = axis_roles(self.get_width(), self.get_height(), self.direction)
        return cross_axis_points(self.dataset, roles.cross_dimension)

    def percentages(self) -> list[int]:
        return percentages(self.dataset)

    def composition_percentages(self) -> list[list[int]]:
        return composition_percentages(self.dataset)

    def display_values(self) -> list[float]:
        """Per-segment magnitude shown next to a label (row totals in 2d)."""
        return self.dataset.totals()

    def segment_outline(self, index: int) -> SegmentOutline:
        """Outline of path `index` (a segment, or a stack in 2d) in screen space."""
        cross = self.cross_axis_points()
        if not 0 <= index < len(cross) - 1:
            raise IndexError(f"Path index {index} out of range 0..{len(cross) - 2}")
        outline = build_outline(
            self.main_axis_points(), cross[index], cross[index + 1], self.config.curve_tension
        )
        return to_screen(outline, self.direction)

    def path_data(self, index: int) -> str:
        return path_data(self.segment_outline(index))

    def geometry(self) -> FunnelGeometry:
        return compute_geometry(
            self.dataset, self.get_width(), self.get_height(), self.direction, self.config
        )

    def path_color(self, index: int) -> str | list[str]:
        """Colours for path `index`: one entry per stack in 2d, the whole list in 1d."""
        if self.is_two_dimensional:
            if index < len(self.colors):
                return self.colors[index]
            return self.config.colors_for(index + 1)[index]
        if len(self.colors) == 1:
            return self.colors[0]
        return list(self.colors)

    def render_svg(self) -> str:
        from funnelgraph.svg.serializer import render_svg

        geometry = self.geometry()
        colors = [self.path_color(i) for i in range(geometry.path_count)]
        return render_svg(geometry, colors, self.gradient_direction)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def make_vertical(self) -> None:
        self.direction = Orientation.VERTICAL

    def make_horizontal(self) -> None:
        self.direction = Orientation.HORIZONTAL

    def toggle_direction(self) -> None:
        self.direction = self.direction.flipped
        logger.debug("Direction toggled to %s", self.direction.value)

    def gradient_make_vertical(self) -> None:
        self.gradient_direction = Orientation.VERTICAL

    def gradient_make_horizontal(self) -> None:
        self.gradient_direction = Orientation.HORIZONTAL

    def gradient_toggle_direction(self) -> None:
        self.gradient_direction = self.gradient_direction.flipped

    def update_width(self, width: float) -> None:
        self.width = width

    def update_height(self, height: float) -> None:
        self.height = height

    def update_data(self, data: Any) -> None:
        """Replace any of values / labels / subLabels / colors.

        A bare sequence replaces the values only. Validation happens before
        any field is assigned, so a rejected update leaves the state intact.
        """
        if isinstance(data, Mapping):
            dataset = _validated(parse(data)) if "values" in data else self.dataset
            labels = extract_labels(data) if "labels" in data else self.labels
            sub_labels = extract_sub_labels(data) if _has_sub_labels(data) else self.sub_labels
            colors = extract_colors(data) if "colors" in data else None
        else:
            dataset = _validated(parse(data))
            labels = extract_labels(data) or self.labels
            sub_labels = self.sub_labels
            colors = None

        reshaped = (
            dataset.is_two_dimensional != self.dataset.is_two_dimensional
            or dataset.sub_size != self.dataset.sub_size
        )

        self.dataset = dataset
        self.labels = labels
        self.sub_labels = sub_labels
        if colors:
            self.colors = colors
        elif colors is not None or reshaped:
            self.colors = self._default_colors()

        logger.debug("Data updated: %d segments, reshaped=%s", dataset.size, reshaped)

    def _default_colors(self) -> list[str | list[str]]:
        if self.is_two_dimensional:
            return list(self.config.colors_for(self.sub_segment_count))
        return [self.config.colors_for(2)]


def _validated(dataset: Dataset) -> Dataset:
    """Fail now, not on first draw."""
    percentages(dataset)
    if dataset.is_two_dimensional:
        composition_percentages(dataset)
    return dataset


def _has_sub_labels(data: Mapping[str, Any]) -> bool:
    return "subLabels" in data or "sub_labels" in data

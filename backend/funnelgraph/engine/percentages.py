"""Percentage Calculator — relative magnitudes and per-segment composition."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from funnelgraph.engine.dataset import Dataset, TwoDimensional
from funnelgraph.engine.errors import DimensionMismatchError, InvalidDataError
from funnelgraph.utils.math_helpers import round_point

logger = logging.getLogger(__name__)


def validate_magnitudes(values: Sequence[float]) -> float:
    """Return max(values). Raises InvalidDataError when it cannot be divided by."""
    if len(values) == 0:
        raise InvalidDataError("Dataset is empty")
    if any(v < 0 for v in values):
        raise InvalidDataError(f"Magnitudes must be non-negative, got {list(values)}")
    peak = max(values)
    if peak <= 0:
        raise InvalidDataError("Maximum magnitude is zero")
    return peak


def relative_percentages(values: Sequence[float]) -> list[int]:
    """percentage[i] = round(values[i] * 100 / max(values))."""
    peak = validate_magnitudes(values)
    return [round_point(v * 100 / peak) for v in values]


def percentages(dataset: Dataset) -> list[int]:
    """One percentage per segment. Two-dimensional funnels use segment totals."""
    return relative_percentages(dataset.totals())


def composition_percentages(dataset: Dataset) -> list[list[int]]:
    """Share of each sub-magnitude in its own segment total.

    Each entry is rounded on its own, so a row may sum to 99 or 101.
    """
    if not isinstance(dataset, TwoDimensional):
        raise DimensionMismatchError("Composition percentages need a two-dimensional dataset")

    validate_magnitudes(dataset.totals())
    composition: list[list[int]] = []
    for i, row in enumerate(dataset.rows):
        if any(v < 0 for v in row):
            raise InvalidDataError(f"Segment {i} has negative sub-magnitudes: {list(row)}")
        total = sum(row)
        if total == 0:
            raise InvalidDataError(f"Segment {i} totals zero; its composition is undefined")
        composition.append([round_point(v * 100 / total) for v in row])

    logger.debug("Composition for %d segments x %d stacks", dataset.size, dataset.sub_size)
    return composition

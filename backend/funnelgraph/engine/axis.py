"""Axis Point Generator — main-axis and cross-axis coordinates.

A two-dimensional funnel with 3 segments and 3 stacks:

    #0..................
                       ...#1................
                                           ......
    #0********************#1**                    #2.........................#3 (A)
                              *******************
                                                  #2*************************#3 (B)
                                                  #2+++++++++++++++++++++++++#3 (C)
                              +++++++++++++++++++
    #0++++++++++++++++++++#1++                    #2-------------------------#3 (D)
                                           ------
                       ---#1----------------
    #0-----------------

The main axis carries N+1 points (#0..#3). Each boundary curve (A..D) carries
one cross-axis coordinate per main-axis point. #2 and #3 share a cross-axis
value, so every boundary repeats its last entry and the funnel ends in a flat
edge instead of a point.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from funnelgraph.engine.dataset import Dataset, TwoDimensional
from funnelgraph.engine.errors import InvalidDataError
from funnelgraph.engine.percentages import composition_percentages, validate_magnitudes
from funnelgraph.utils.math_helpers import round_points

logger = logging.getLogger(__name__)


def main_axis_points(size: int, full_dimension: float) -> list[int]:
    """N+1 evenly spaced points: round(full_dimension * i / size) for i in 0..size."""
    if size <= 0:
        raise InvalidDataError("Cannot lay out an empty dataset")
    steps = np.arange(size + 1, dtype=np.float64)
    return round_points(full_dimension * steps / size).tolist()


def cross_axis_points(dataset: Dataset, full_dimension: float) -> list[list[float]]:
    """Boundary curves from the outer top edge (A) to the outer bottom edge.

    One-dimensional datasets give [top, bottom]; two-dimensional datasets give
    K+1 curves. The bottom edge is always full_dimension - top, computed
    directly so rounding in the internal stacks never reaches the outer edge.
    """
    full = _as_number(full_dimension)
    top = _top_boundary(dataset.totals(), full)

    if not isinstance(dataset, TwoDimensional):
        return [top.tolist(), (full - top).tolist()]

    composition = np.asarray(composition_percentages(dataset), dtype=np.float64)
    span = full - top[:-1] * 2
    boundaries: list[NDArray] = [top]

    for k in range(1, dataset.sub_size):
        previous = boundaries[-1][:-1]
        stacked = round_points(previous + span * (composition[:, k - 1] / 100))
        boundaries.append(_duplicate_last(stacked))

    boundaries.append(full - top)
    logger.debug("Cross axis: %d boundaries over %d points", len(boundaries), len(top))
    return [b.tolist() for b in boundaries]


def _top_boundary(totals: list[float], full: float) -> NDArray[np.int64]:
    """Path "A": round((max - v) / max * full / 2) with the last value repeated."""
    peak = validate_magnitudes(totals)
    half = full / 2
    values = _duplicate_last(np.asarray(totals, dtype=np.float64))
    return round_points((peak - values) / peak * half)


def _duplicate_last(arr: NDArray) -> NDArray:
    return np.append(arr, arr[-1])


def _as_number(value: float) -> float:
    return int(value) if float(value).is_integer() else float(value)

"""Tests for percentage and composition calculation."""

from __future__ import annotations

import pytest

from funnelgraph.engine.dataset import parse
from funnelgraph.engine.errors import DimensionMismatchError, InvalidDataError
from funnelgraph.engine.percentages import (
    composition_percentages,
    percentages,
    relative_percentages,
)
from funnelgraph.utils.math_helpers import round_point, round_points
from tests.conftest import THIRDS, TWO_DIM_OBJECT


def test_relative_to_maximum():
    assert percentages(parse([10, 50, 100])) == [10, 50, 100]


def test_rounding_per_value():
    assert relative_percentages([1, 2, 3]) == [33, 67, 100]


def test_half_rounds_away_from_zero():
    assert relative_percentages([1, 8]) == [13, 100]
    assert round_point(2.5) == 3
    assert round_point(-2.5) == -3
    assert round_points([0.5, 1.5, -0.5]).tolist() == [1, 2, -1]


def test_two_dimensional_uses_totals():
    assert percentages(parse([[5, 5], [10, 10]])) == [50, 100]
    assert percentages(parse(TWO_DIM_OBJECT)) == [100, 46, 7]


def test_composition():
    assert composition_percentages(parse([[1, 3], [5, 5]])) == [[25, 75], [50, 50]]


def test_composition_rows_need_not_sum_to_100():
    composition = composition_percentages(parse(THIRDS))
    assert composition == [[33, 33, 33], [33, 33, 33]]
    assert sum(composition[0]) == 99


def test_composition_needs_two_dimensions():
    with pytest.raises(DimensionMismatchError):
        composition_percentages(parse([1, 2, 3]))


@pytest.mark.parametrize("values", [[], [0, 0, 0]])
def test_degenerate_datasets(values):
    with pytest.raises(InvalidDataError):
        percentages(parse(values))


def test_negative_magnitudes():
    with pytest.raises(InvalidDataError):
        percentages(parse([5, -1]))
    with pytest.raises(InvalidDataError):
        composition_percentages(parse([[5, -1], [4, 4]]))


def test_zero_total_segment():
    with pytest.raises(InvalidDataError):
        composition_percentages(parse([[5, 5], [0, 0]]))

"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample datasets in every accepted input shape

FLAT_VALUES = [10, 20, 30, 40]

TAPERING_VALUES = [100, 50]

RECORDS = [
    {"label": "Impressions", "value": 12000},
    {"label": "Add To Cart", "value": 5700},
    {"label": "Buy", "value": 360},
]

VALUES_OBJECT = {
    "labels": ["Impressions", "Add To Cart", "Buy"],
    "colors": ["orange", "red"],
    "values": [12000, 5700, 360],
}

TWO_DIM_OBJECT = {
    "labels": ["Impressions", "Add To Cart", "Buy"],
    "subLabels": ["Direct", "Social Media", "Ads"],
    "colors": [["#FFB178", "#FF78B1", "#FF3C8E"], ["#A0BBFF", "#EC77FF"], ["#A0F9FF", "#7795FF"]],
    "values": [
        [3500, 2500, 6500],
        [3300, 1400, 1000],
        [600, 200, 130],
    ],
}

EQUAL_STACKS = [[5, 5], [10, 10]]

THIRDS = [[1, 1, 1], [2, 2, 2]]


@pytest.fixture
def flat_values() -> list[int]:
    return list(FLAT_VALUES)


@pytest.fixture
def records() -> list[dict]:
    return [dict(r) for r in RECORDS]


@pytest.fixture
def values_object() -> dict:
    return dict(VALUES_OBJECT)


@pytest.fixture
def two_dim_object() -> dict:
    return dict(TWO_DIM_OBJECT)

"""Normalizer — raw funnel input → canonical Dataset.

Accepted shapes:
    [10, 20, 30]                                  one-dimensional
    [{"label": "A", "value": 10}, ...]            one-dimensional, labels per record
    {"values": [10, 20, 30], "labels": [...]}     one-dimensional
    {"values": [[5, 5], [10, 10]], ...}           two-dimensional
    [[5, 5], [10, 10]]                            two-dimensional

Dimensionality is decided once, here. Everything downstream switches on the
Dataset type instead of inspecting raw shapes again.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from funnelgraph.engine.errors import DimensionMismatchError, InvalidDataError, MissingDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneDimensional:
    """One scalar magnitude per segment."""

    values: tuple[float, ...]

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def sub_size(self) -> int:
        return 1

    @property
    def is_two_dimensional(self) -> bool:
        return False

    def totals(self) -> list[float]:
        return list(self.values)


@dataclass(frozen=True)
class TwoDimensional:
    """K sub-magnitudes per segment, stacked across the cross axis."""

    rows: tuple[tuple[float, ...], ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def sub_size(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def is_two_dimensional(self) -> bool:
        return True

    def totals(self) -> list[float]:
        return [sum(row) for row in self.rows]


Dataset = OneDimensional | TwoDimensional


def parse(raw: Any) -> Dataset:
    """Normalize any accepted input shape into a Dataset."""
    if raw is None:
        raise MissingDataError("Data is missing")

    if isinstance(raw, Mapping):
        if raw.get("values") is None:
            raise MissingDataError("Data record has no 'values' field")
        dataset = _from_segments(raw["values"])
    elif _is_sequence(raw):
        if raw and isinstance(raw[0], Mapping):
            dataset = _from_segments(_record_values(raw))
        else:
            dataset = _from_segments(raw)
    else:
        raise MissingDataError(f"Unsupported data type: {type(raw).__name__}")

    logger.debug(
        "Normalized %d segments (%s)",
        dataset.size,
        "2d" if dataset.is_two_dimensional else "1d",
    )
    return dataset


def extract_labels(raw: Any) -> list[str]:
    """Segment labels: the record's `labels` list, or each item's `label`."""
    if raw is None:
        raise MissingDataError("Data is missing")
    if isinstance(raw, Mapping):
        return [str(label) for label in raw.get("labels") or []]
    if _is_sequence(raw) and raw and isinstance(raw[0], Mapping):
        return [str(item.get("label", "")) for item in raw if isinstance(item, Mapping)]
    return []


def extract_sub_labels(raw: Any) -> list[str]:
    """Stack labels of a two-dimensional funnel (`subLabels` or `sub_labels`)."""
    if raw is None:
        raise MissingDataError("Data is missing")
    if not isinstance(raw, Mapping):
        return []
    sub_labels = raw.get("subLabels", raw.get("sub_labels"))
    return [str(label) for label in sub_labels or []]


def extract_colors(raw: Any) -> list[str | list[str]]:
    """Colour specs as given: a string is solid, a list of strings is a gradient."""
    if raw is None:
        raise MissingDataError("Data is missing")
    if not isinstance(raw, Mapping):
        return []
    colors = raw.get("colors") or []
    if isinstance(colors, str):
        return [colors]
    if not _is_sequence(colors):
        raise InvalidDataError(f"Colors must be a string or a list, got {colors!r}")
    return [_color(c, i) for i, c in enumerate(colors)]


def _color(entry: Any, index: int) -> str | list[str]:
    if isinstance(entry, str):
        return entry
    if _is_sequence(entry) and entry and all(isinstance(stop, str) for stop in entry):
        return list(entry)
    raise InvalidDataError(f"Color {index} must be a string or a list of strings, got {entry!r}")


def _record_values(records: Sequence[Any]) -> list[Any]:
    values = []
    for i, item in enumerate(records):
        if not isinstance(item, Mapping) or "value" not in item:
            raise MissingDataError(f"Record {i} has no 'value' field")
        values.append(item["value"])
    return values


def _from_segments(segments: Any) -> Dataset:
    if not _is_sequence(segments):
        raise InvalidDataError(f"Expected a sequence of segments, got {type(segments).__name__}")
    if len(segments) == 0:
        return OneDimensional(values=())

    row_flags = [_is_sequence(segment) for segment in segments]

    if all(row_flags):
        rows = tuple(tuple(_magnitude(v) for v in row) for row in segments)
        widths = sorted({len(row) for row in rows})
        if len(widths) != 1:
            raise DimensionMismatchError(
                f"Two-dimensional rows must have equal length, got lengths {widths}"
            )
        if widths[0] == 0:
            raise InvalidDataError("Two-dimensional rows must hold at least one sub-magnitude")
        return TwoDimensional(rows=rows)

    if any(row_flags):
        raise DimensionMismatchError("Data mixes scalar and sequence segments")

    return OneDimensional(values=tuple(_magnitude(v) for v in segments))


def _magnitude(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDataError(f"Magnitude must be a number, got {value!r}")
    try:
        finite = math.isfinite(float(value))
    except OverflowError as exc:
        raise InvalidDataError("Magnitude is too large to draw") from exc
    if not finite:
        raise InvalidDataError(f"Magnitude must be finite, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    return float(value)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))

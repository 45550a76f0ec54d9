"""Typed errors raised at the validation boundaries of the geometry engine."""

from __future__ import annotations


class FunnelError(ValueError):
    """Base class for every error the funnel engine raises on bad input."""


class MissingDataError(FunnelError):
    """No data-bearing field was found while normalizing raw input."""


class DimensionMismatchError(FunnelError):
    """Two-dimensional rows differ in length, or scalar and row segments are mixed."""


class InvalidDataError(FunnelError):
    """Magnitudes cannot be drawn: empty, all zero, negative, or not numbers."""

"""Math helpers — rounding and number formatting. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def round_point(value: float) -> int:
    """Round half away from zero: 2.5 → 3, -2.5 → -3."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_points(values: ArrayLike) -> NDArray[np.int64]:
    """Vectorised round_point. np.round would round half to even."""
    arr = np.asarray(values, dtype=np.float64)
    return (np.sign(arr) * np.floor(np.abs(arr) + 0.5)).astype(np.int64)


def format_number(value: float) -> str:
    """Decimal text for a coordinate. Integral values carry no decimal point."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))

"""Single-precision helpers for comparing benchmark results."""

from __future__ import annotations

import numpy as np

SMALL_FLOAT_VAL = np.float32(0.00000001)


def _abs32(a) -> np.float32:
    value = np.float32(a)
    return -value if value < 0 else value


def abs_val(a: float) -> float:
    """Absolute value computed in single precision."""
    return float(_abs32(a))


def percent_diff(val1: float, val2: float) -> float:
    """Percentage difference of ``val2`` from ``val1``; zero when both are tiny."""
    if _abs32(val1) < 0.01 and _abs32(val2) < 0.01:
        return 0.0
    numerator = _abs32(float(val1) - float(val2))
    denominator = _abs32(float(val1) + float(SMALL_FLOAT_VAL))
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.float32(numerator / denominator)
    return float(np.float32(100.0) * _abs32(ratio))
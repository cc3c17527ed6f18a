from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

MAD_FLOOR = 1e-9


def percentile_sorted(values: Sequence[float] | np.ndarray, p: float) -> float:
    """Linear-interpolated percentile of an already ascending sequence.

    Uses ``a[lo] * (1 - t) + a[hi] * t`` with ``i = (n - 1) * p``. Empty input
    yields 0. Non-finite values must be removed by the caller.
    """
    n = len(values)
    if n == 0:
        return 0.0
    i = (n - 1) * p
    lo = math.floor(i)
    hi = math.ceil(i)
    if lo == hi:
        return float(values[lo])
    t = i - lo
    return float(values[lo]) * (1 - t) + float(values[hi]) * t


def percentile(values: Iterable[float], p: float) -> float:
    arr = np.sort(np.asarray(list(values), dtype=float))
    return percentile_sorted(arr, p)


def median(values: Iterable[float]) -> float:
    return percentile(values, 0.5)


def finite_values(values: Iterable[float]) -> np.ndarray:
    arr = np.asarray(list(values), dtype=float)
    return arr[np.isfinite(arr)]


def robust_center_scale(values: Iterable[float]) -> tuple[float, float]:
    """Return ``(median, MAD)`` over the finite values.

    A zero (or empty-input) MAD is floored at ``MAD_FLOOR`` so callers can
    divide by it.
    """
    arr = np.sort(finite_values(values))
    if arr.size == 0:
        return 0.0, MAD_FLOOR
    center = percentile_sorted(arr, 0.5)
    deviations = np.sort(np.abs(arr - center))
    mad = percentile_sorted(deviations, 0.5)
    if not mad:
        mad = MAD_FLOOR
    return center, mad

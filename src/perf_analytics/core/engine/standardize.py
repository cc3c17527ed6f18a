from __future__ import annotations

from typing import Sequence

import numpy as np

from perf_analytics.core.engine.contract import validate_matrix


def column_scales(matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    n = matrix.shape[0]
    with np.errstate(invalid="ignore", over="ignore"):
        mu = matrix.sum(axis=0) / n
        ss = ((matrix - mu) ** 2).sum(axis=0)
        sd = np.sqrt(ss / max(1, n - 1))
    # Constant or non-finite columns keep their scale and only get centred.
    sd = np.where(np.isfinite(sd) & (sd != 0), sd, 1.0)
    return mu, sd


def standardize_rows(rows: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Scale every column to zero mean and unit sample standard deviation."""
    matrix = validate_matrix(rows)
    mu, sd = column_scales(matrix)
    with np.errstate(invalid="ignore"):
        return (matrix - mu) / sd

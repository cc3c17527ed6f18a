from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np


class EngineContractError(ValueError):
    pass


def validate_matrix(rows: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Return ``rows`` as a 2-D float array, rejecting empty or ragged input.

    Non-finite cells are passed through untouched; callers own cleaning.
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2 or rows.shape[0] == 0 or rows.shape[1] == 0:
            raise EngineContractError(f"Feature matrix must be non-empty 2-D, got shape {rows.shape}")
        return rows.astype(float, copy=True)
    materialized = [list(row) for row in rows]
    if not materialized:
        raise EngineContractError("Feature matrix must contain at least one row")
    width = len(materialized[0])
    if width == 0:
        raise EngineContractError("Feature rows must contain at least one column")
    for idx, row in enumerate(materialized):
        if len(row) != width:
            raise EngineContractError(
                f"Ragged feature matrix: row {idx} has {len(row)} columns, expected {width}"
            )
    return np.asarray(materialized, dtype=float)


def validate_k(k: Any, n_rows: int) -> int:
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise EngineContractError(f"k must be an integer, got {k!r}")
    if k < 1 or k > n_rows:
        raise EngineContractError(f"k must be within [1, {n_rows}], got {k}")
    return int(k)


def validate_seed(seed: Any) -> int:
    if isinstance(seed, bool) or not isinstance(seed, (int, float, np.integer, np.floating)):
        raise EngineContractError(f"seed must be numeric, got {seed!r}")
    if isinstance(seed, (float, np.floating)):
        if not math.isfinite(seed) or not float(seed).is_integer():
            raise EngineContractError(f"seed must be a finite integer, got {seed!r}")
    return int(seed) & 0xFFFFFFFF


def validate_max_iterations(max_iterations: Any) -> int:
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, (int, np.integer)):
        raise EngineContractError(f"max_iterations must be an integer, got {max_iterations!r}")
    if max_iterations < 1:
        raise EngineContractError(f"max_iterations must be >= 1, got {max_iterations}")
    return int(max_iterations)

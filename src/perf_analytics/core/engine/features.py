from __future__ import annotations

import math
from typing import Hashable, Iterable, Sequence

from perf_analytics.core.engine.kmeans import DEFAULT_MAX_ITERATIONS, DEFAULT_SEED, kmeans
from perf_analytics.core.engine.standardize import standardize_rows
from perf_analytics.core.types import CLUSTER_KINDS, FeatureRow, Record


def resolve_size(*candidates: float | None) -> float:
    """First candidate that is not None, else 0.

    Record originators use this to collapse several optional size fields
    (e.g. transfer size, then encoded body size) into ``Record.size``.
    """
    for value in candidates:
        if value is not None:
            return float(value)
    return 0.0


def feature_vector(record: Record) -> tuple[float, float, float]:
    size = resolve_size(record.size)
    return (float(record.start_time), float(record.duration), math.log10(1 + size))


def feature_rows(
    records: Iterable[Record], kinds: Sequence[str] = CLUSTER_KINDS
) -> list[FeatureRow]:
    allowed = set(kinds)
    return [
        FeatureRow(id=record.id, vector=feature_vector(record))
        for record in records
        if record.kind in allowed
    ]


def cluster_feature_rows(
    rows: Sequence[FeatureRow],
    k: int,
    seed: int = DEFAULT_SEED,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> dict[Hashable, int] | None:
    """Map each row id to a cluster index in ``[0, k)``.

    Returns None (no clustering performed) when there are fewer rows than ``k``.
    """
    if not rows or len(rows) < k:
        return None
    X = standardize_rows([row.vector for row in rows])
    result = kmeans(X, k, seed=seed, max_iterations=max_iterations)
    return {row.id: int(cluster) for row, cluster in zip(rows, result.assignment)}


def cluster_records(
    records: Iterable[Record],
    k: int,
    seed: int = DEFAULT_SEED,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    kinds: Sequence[str] = CLUSTER_KINDS,
) -> dict[Hashable, int] | None:
    return cluster_feature_rows(feature_rows(records, kinds), k, seed, max_iterations)

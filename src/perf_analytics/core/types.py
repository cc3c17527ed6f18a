from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable

import numpy as np


RECORD_KINDS = ("navigation", "resource", "paint", "longtask")
CLUSTER_KINDS = ("resource", "navigation")


@dataclass(frozen=True)
class Record:
    id: Hashable
    kind: str
    start_time: float
    duration: float
    size: float | None = None
    name: str = ""


@dataclass(frozen=True)
class FeatureRow:
    id: Hashable
    vector: tuple[float, ...]


@dataclass(frozen=True)
class OutlierRecord:
    record: Record
    score: float


@dataclass(frozen=True)
class StatsSummary:
    min_time: float = 0.0
    max_time: float = 0.0
    p50_duration: float = 0.0
    p95_duration: float = 0.0


@dataclass(frozen=True, eq=False)
class KMeansResult:
    centers: np.ndarray
    assignment: np.ndarray
    # Lloyd rounds actually performed (<= max_iterations).
    iterations: int


@dataclass(frozen=True)
class SessionAnalysis:
    stats: StatsSummary
    outliers: list[OutlierRecord]
    # None when fewer eligible rows than clusters were available.
    clusters: dict[Hashable, int] | None
    metrics: dict[str, Any] = field(default_factory=dict)

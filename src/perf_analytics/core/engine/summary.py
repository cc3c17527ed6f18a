from __future__ import annotations

from typing import Iterable

from perf_analytics.core.engine.stats import finite_values, percentile
from perf_analytics.core.types import Record, StatsSummary


def compute_stats(records: Iterable[Record]) -> StatsSummary:
    """Span of the session and p50/p95 durations; all zero for empty input.

    ``max_time`` is the latest end (``start_time + duration``), not the latest
    start.
    """
    records = list(records)
    starts = finite_values(record.start_time for record in records)
    ends = finite_values(record.start_time + record.duration for record in records)
    durations = finite_values(record.duration for record in records)
    return StatsSummary(
        min_time=float(starts.min()) if starts.size else 0.0,
        max_time=float(ends.max()) if ends.size else 0.0,
        p50_duration=percentile(durations, 0.50),
        p95_duration=percentile(durations, 0.95),
    )

from __future__ import annotations

import math
from typing import Iterable

from perf_analytics.core.engine.stats import finite_values, robust_center_scale
from perf_analytics.core.types import OutlierRecord, Record

MIN_SAMPLES = 8
Z_THRESHOLD = 2.5
# Makes MAD comparable to a standard deviation under normality.
MAD_NORMAL_CONSISTENCY = 0.6745


def robust_z_outliers(records: Iterable[Record], top_n: int = 10) -> list[OutlierRecord]:
    """Rank unusually slow records by their median/MAD robust z-score.

    Returns an empty list when fewer than ``MIN_SAMPLES`` finite durations are
    available. Only records with ``z > Z_THRESHOLD`` are kept, sorted by score
    descending (input order among equal scores) and truncated to ``top_n``.
    """
    records = list(records)
    durations = finite_values(record.duration for record in records)
    if durations.size < MIN_SAMPLES:
        return []

    center, mad = robust_center_scale(durations)
    scale = MAD_NORMAL_CONSISTENCY / mad

    scored: list[OutlierRecord] = []
    for record in records:
        duration = float(record.duration)
        if not math.isfinite(duration):
            continue
        z = (duration - center) * scale
        if z > Z_THRESHOLD:
            scored.append(OutlierRecord(record=record, score=z))
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[: max(0, int(top_n))]

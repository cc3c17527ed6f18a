from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from perf_analytics.core.engine.config import merge_config, validate_config
from perf_analytics.core.engine.features import cluster_feature_rows, feature_rows
from perf_analytics.core.engine.outliers import robust_z_outliers
from perf_analytics.core.engine.summary import compute_stats
from perf_analytics.core.types import RECORD_KINDS, Record, SessionAnalysis


def filter_records(
    records: Iterable[Record],
    kinds: Sequence[str] = RECORD_KINDS,
    query: str = "",
) -> list[Record]:
    """Keep records of an enabled kind whose name contains ``query`` (case-insensitive)."""
    allowed = set(kinds)
    needle = query.strip().lower()
    kept: list[Record] = []
    for record in records:
        if record.kind not in allowed:
            continue
        if needle and needle not in (record.name or "").lower():
            continue
        kept.append(record)
    return kept


def analyze_session(
    records: Iterable[Record],
    config: dict[str, Any] | None = None,
    logger: Callable[[str], None] | None = None,
) -> SessionAnalysis:
    """Summary stats, ranked outliers and cluster assignment for one record set."""
    settings = merge_config(config)
    validate_config(settings)
    log = logger or (lambda msg: None)

    selected = filter_records(records, settings["enabled_kinds"], settings["query"])
    stats = compute_stats(selected)

    k = settings["k"]
    rows = feature_rows(selected, settings["cluster_kinds"])
    eligible = len(rows)
    clusters = cluster_feature_rows(
        rows,
        k,
        seed=settings["seed"],
        max_iterations=settings["max_iterations"],
    )
    if clusters is None:
        log(f"SKIP reason=insufficient_cluster_rows rows={eligible} k={k}")

    outliers = robust_z_outliers(selected, top_n=settings["top_n"])
    metrics = {
        "records": len(selected),
        "cluster_rows": eligible,
        "clustered": clusters is not None,
        "outliers": len(outliers),
    }
    log(
        f"END records={metrics['records']} cluster_rows={eligible} "
        f"clustered={metrics['clustered']} outliers={len(outliers)}"
    )
    return SessionAnalysis(stats=stats, outliers=outliers, clusters=clusters, metrics=metrics)

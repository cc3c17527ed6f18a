from __future__ import annotations

from typing import Iterable

import pandas as pd

from perf_analytics.core.engine.contract import EngineContractError
from perf_analytics.core.ids import IdGenerator
from perf_analytics.core.types import RECORD_KINDS, OutlierRecord, Record

REQUIRED_COLUMNS = ("kind", "start_time", "duration")


def _optional_float(value: object) -> float | None:
    if value is None or pd.isna(value):
        return None
    return float(value)


def records_from_frame(
    df: pd.DataFrame, id_generator: IdGenerator | None = None
) -> list[Record]:
    """Build Records from a frame with ``kind``, ``start_time`` and ``duration``.

    ``size`` and ``name`` are optional. Without an ``id`` column, ids are drawn
    from ``id_generator`` in row order.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise EngineContractError(f"Record frame missing columns: {missing}")
    unknown = sorted(set(df["kind"].astype(str)) - set(RECORD_KINDS))
    if unknown:
        raise EngineContractError(f"Unknown record kinds: {unknown}")
    if "id" not in df.columns and id_generator is None:
        raise EngineContractError("Record frame has no id column and no id generator")

    has_size = "size" in df.columns
    has_name = "name" in df.columns
    records: list[Record] = []
    for row in df.to_dict(orient="records"):
        record_id = row["id"] if "id" in row else id_generator.next_id()
        records.append(
            Record(
                id=record_id,
                kind=str(row["kind"]),
                start_time=float(row["start_time"]),
                duration=float(row["duration"]),
                size=_optional_float(row["size"]) if has_size else None,
                name=str(row["name"]) if has_name and not pd.isna(row["name"]) else "",
            )
        )
    return records


def outliers_to_frame(outliers: Iterable[OutlierRecord]) -> pd.DataFrame:
    rows = [
        {
            "rank": rank,
            "id": item.record.id,
            "kind": item.record.kind,
            "name": item.record.name,
            "start_time": item.record.start_time,
            "duration": item.record.duration,
            "score": item.score,
        }
        for rank, item in enumerate(outliers, start=1)
    ]
    columns = ["rank", "id", "kind", "name", "start_time", "duration", "score"]
    return pd.DataFrame(rows, columns=columns)

from __future__ import annotations

import pytest

from perf_analytics.core.ids import IdGenerator
from perf_analytics.core.types import Record


def make_records(durations, kind="resource", start_step=10.0, size=None, ids=None):
    ids = ids or IdGenerator()
    return [
        Record(
            id=ids.next_id(),
            kind=kind,
            start_time=idx * start_step,
            duration=float(duration),
            size=size,
            name=f"{kind}-{idx}",
        )
        for idx, duration in enumerate(durations)
    ]


@pytest.fixture()
def id_generator() -> IdGenerator:
    return IdGenerator()


@pytest.fixture()
def mixed_session(id_generator: IdGenerator) -> list[Record]:
    records = []
    records += make_records([12, 15, 11, 14, 13, 16], kind="resource", size=2048, ids=id_generator)
    records += make_records([900], kind="resource", size=5_000_000, ids=id_generator)
    records += make_records([250, 240], kind="navigation", size=30_000, ids=id_generator)
    records += make_records([5, 6], kind="paint", ids=id_generator)
    records += make_records([60], kind="longtask", ids=id_generator)
    return records

import math

import pandas as pd
import pytest

from perf_analytics.core.engine.contract import EngineContractError
from perf_analytics.core.engine.frames import outliers_to_frame, records_from_frame
from perf_analytics.core.engine.outliers import robust_z_outliers
from perf_analytics.core.ids import IdGenerator
from tests.conftest import make_records


def test_records_from_frame_with_ids():
    df = pd.DataFrame(
        {
            "id": ["a", "b"],
            "kind": ["resource", "paint"],
            "start_time": [1.0, 2.5],
            "duration": [10, 0.5],
            "size": [2048.0, None],
            "name": ["app.js", None],
        }
    )
    records = records_from_frame(df)
    assert [r.id for r in records] == ["a", "b"]
    assert records[0].size == 2048.0
    assert records[0].name == "app.js"
    assert records[1].size is None
    assert records[1].name == ""
    assert records[0].duration == 10.0


def test_records_from_frame_draws_ids_from_generator():
    df = pd.DataFrame({"kind": ["longtask"] * 3, "start_time": [0, 1, 2], "duration": [50, 60, 70]})
    ids = IdGenerator(prefix="e", start=7)
    records = records_from_frame(df, id_generator=ids)
    assert [r.id for r in records] == ["e7", "e8", "e9"]
    assert ids.peek() == "e10"


def test_records_from_frame_contract_violations():
    with pytest.raises(EngineContractError):
        records_from_frame(pd.DataFrame({"kind": ["resource"], "start_time": [0.0]}))
    with pytest.raises(EngineContractError):
        records_from_frame(
            pd.DataFrame({"id": [1], "kind": ["mark"], "start_time": [0.0], "duration": [1.0]})
        )
    with pytest.raises(EngineContractError):
        records_from_frame(pd.DataFrame({"kind": ["paint"], "start_time": [0.0], "duration": [1.0]}))


def test_outliers_to_frame_ranks_rows():
    outliers = robust_z_outliers(make_records([10] * 8 + [400, 800]))
    frame = outliers_to_frame(outliers)
    assert frame["rank"].tolist() == [1, 2]
    assert frame["duration"].tolist() == [800.0, 400.0]
    assert frame["score"].is_monotonic_decreasing
    assert all(math.isfinite(score) for score in frame["score"])


def test_outliers_to_frame_empty_keeps_columns():
    frame = outliers_to_frame([])
    assert frame.empty
    assert list(frame.columns) == ["rank", "id", "kind", "name", "start_time", "duration", "score"]

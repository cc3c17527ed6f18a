import pytest

from perf_analytics.core.engine.stats import (
    MAD_FLOOR,
    median,
    percentile,
    percentile_sorted,
    robust_center_scale,
)


def test_percentile_interpolates_linearly():
    assert percentile([1, 2, 3, 4], 0.5) == 2.5
    assert percentile([4, 1, 3, 2], 0.95) == pytest.approx(3.85)


def test_percentile_single_value():
    assert percentile([10], 0.9) == 10


@pytest.mark.parametrize("p", [0.0, 0.5, 0.95, 1.0])
def test_percentile_empty_is_zero(p):
    assert percentile([], p) == 0


def test_percentile_bounds_hit_extremes():
    values = [5.0, 1.0, 9.0, 3.0]
    assert percentile(values, 0.0) == 1.0
    assert percentile(values, 1.0) == 9.0


def test_percentile_sorted_uses_weighted_endpoints():
    # i = 0.3 -> 10 * 0.7 + 20 * 0.3
    assert percentile_sorted([10.0, 20.0, 30.0, 40.0], 0.1) == pytest.approx(13.0)


def test_median_odd_and_even():
    assert median([3, 1, 2]) == 2
    assert median([1, 2, 3, 4]) == 2.5


def test_robust_center_scale_basic():
    center, mad = robust_center_scale([1, 2, 3, 4, 100])
    assert center == 3
    assert mad == 1


def test_robust_center_scale_floors_zero_mad():
    center, mad = robust_center_scale([7, 7, 7, 7, 50])
    assert center == 7
    assert mad == MAD_FLOOR


def test_robust_center_scale_ignores_non_finite():
    center, mad = robust_center_scale([1, 2, 3, float("nan"), float("inf")])
    assert center == 2
    assert mad == 1

from datetime import date

import pandas as pd
import pytest

from vertical_dashboards.data.generators import (
    READING_COLUMNS,
    generate_distribution,
    generate_hourly_profile,
    generate_metric_readings,
    generate_time_series,
    healthy_baseline,
)
from vertical_dashboards import models
from vertical_dashboards.models import Polarity, Severity, Threshold, Trend
from vertical_dashboards.thresholds import classify

END = date(2024, 3, 31)


def test_time_series_is_reproducible_with_seed():
    first = generate_time_series(30, 100, 10, seed=7, end=END)
    second = generate_time_series(30, 100, 10, seed=7, end=END)
    assert first == second
    assert generate_time_series(30, 100, 10, seed=8, end=END) != first


def test_time_series_shape():
    series = generate_time_series(7, 50, 5, trend=Trend.UP, seed=1, end=END)
    assert len(series) == 7
    assert series[0]["date"] == "Mar 25"
    assert series[-1]["date"] == "Mar 31"
    assert all(record["value"] >= 0 for record in series)


def test_time_series_empty_for_non_positive_days():
    assert generate_time_series(0, 10, 1) == []


def test_hourly_profile():
    profile = generate_hourly_profile(2000, 1000, 200, seed=3)
    assert len(profile) == 24
    assert profile[0]["hour"] == "0:00"
    for record in profile:
        assert record["lower"] <= record["forecast"] <= record["upper"]


def test_distribution_bounds_and_seed():
    records = generate_distribution(["a", "b", "c"], 10, 20, seed=5)
    assert [r["name"] for r in records] == ["a", "b", "c"]
    assert all(10 <= r["value"] <= 20 for r in records)
    assert records == generate_distribution(["a", "b", "c"], 10, 20, seed=5)


def test_distribution_rejects_inverted_range():
    with pytest.raises(ValueError):
        generate_distribution(["a"], 5, 1)


def test_healthy_baseline_is_healthy():
    higher = healthy_baseline(95, 90, Polarity.HIGHER_IS_BETTER)
    lower = healthy_baseline(20, 30, Polarity.LOWER_IS_BETTER)
    assert classify(higher, Threshold(95, 90), Polarity.HIGHER_IS_BETTER) is Severity.HEALTHY
    assert classify(lower, Threshold(20, 30), Polarity.LOWER_IS_BETTER) is Severity.HEALTHY


def test_metric_readings(sample_vertical):
    readings = generate_metric_readings(sample_vertical, days=10, seed=11, end=END)
    assert list(readings.columns) == READING_COLUMNS
    assert len(readings) == 10 * len(sample_vertical.metrics)
    assert set(readings["metric_id"]) == {"uptime", "latency"}
    uptime = readings[readings["metric_id"] == "uptime"]["value"]
    assert uptime.between(0, 100).all()
    assert readings["timestamp"].max() == pd.Timestamp("2024-03-31", tz="UTC")
    pd.testing.assert_frame_equal(
        readings,
        generate_metric_readings(sample_vertical, days=10, seed=11, end=END),
    )


def test_metric_readings_empty(sample_vertical):
    readings = generate_metric_readings(sample_vertical, days=0)
    assert readings.empty
    assert list(readings.columns) == READING_COLUMNS


def test_readings_travel_as_frames(sample_vertical):
    readings = generate_metric_readings(sample_vertical, days=2, seed=3, end=END)
    assert isinstance(readings, pd.DataFrame)
    assert readings["vertical_id"].unique().tolist() == [sample_vertical.id]
    assert not hasattr(models, "MetricReading")

import pandas as pd
import pytest

from vertical_dashboards.data.filters import (
    DashboardFilters,
    apply_catalog_filters,
    apply_time_window,
    filter_use_cases,
    serialize_filters,
)
from vertical_dashboards.models import Complexity


def test_unknown_time_window_rejected():
    with pytest.raises(ValueError):
        DashboardFilters(time_window="2W")


def test_days_per_window():
    assert DashboardFilters(time_window="7D").days == 7
    assert DashboardFilters(time_window="1Y").days == 365


def test_no_filters_keep_whole_catalog(registry):
    assert apply_catalog_filters(registry, DashboardFilters()) == registry.list_all()


def test_feature_and_regulation_queries_combine(registry):
    filters = DashboardFilters(feature_query=" GRID ", regulation_query="nerc")
    assert [v.id for v in apply_catalog_filters(registry, filters)] == ["energy"]


def test_regulation_without_match(registry):
    filters = DashboardFilters(regulation_query="no-such-rule")
    assert apply_catalog_filters(registry, filters) == []


def test_filter_use_cases_by_complexity(registry):
    energy = registry.lookup("energy")
    filters = DashboardFilters(complexity=[Complexity.MEDIUM])
    use_cases = filter_use_cases(energy, filters)
    assert use_cases
    assert all(uc.complexity is Complexity.MEDIUM for uc in use_cases)
    assert filter_use_cases(energy, DashboardFilters()) == list(energy.use_cases)


def test_time_window_counts_back_from_newest_reading():
    df = pd.DataFrame(
        {
            "timestamp": pd.date_range("2024-01-01", periods=10, freq="D", tz="UTC"),
            "value": range(10),
        }
    )
    windowed = apply_time_window(df, 3)
    assert list(windowed["value"]) == [7, 8, 9]


def test_time_window_on_empty_frame():
    df = pd.DataFrame(columns=["timestamp", "value"])
    assert apply_time_window(df, 7).empty


def test_serialize_filters():
    filters = DashboardFilters(time_window="90D", feature_query="grid", complexity=[Complexity.HIGH])
    assert serialize_filters(filters) == {
        "time_window": "90D",
        "days": 90,
        "feature_query": "grid",
        "regulation_query": None,
        "complexity": ["high"],
    }

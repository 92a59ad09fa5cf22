"""
Filter utilities that apply the sidebar selections to the vertical catalog and
to metric readings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

from vertical_dashboards.data.verticals import VerticalRegistry
from vertical_dashboards.models import Complexity, UseCase, VerticalModule

TIME_WINDOWS: Dict[str, int] = {
    "7D": 7,
    "30D": 30,
    "90D": 90,
    "1Y": 365,
}
DEFAULT_TIME_WINDOW = "30D"


@dataclass
class DashboardFilters:
    time_window: str = DEFAULT_TIME_WINDOW
    feature_query: str = ""
    regulation_query: str = ""
    complexity: List[Complexity] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.time_window not in TIME_WINDOWS:
            raise ValueError(f"Unknown time window {self.time_window!r}; expected one of {list(TIME_WINDOWS)}")

    @property
    def days(self) -> int:
        return TIME_WINDOWS[self.time_window]


DEFAULT_FILTERS = DashboardFilters()


def apply_catalog_filters(registry: VerticalRegistry, filters: DashboardFilters) -> List[VerticalModule]:
    """Verticals matching both the feature and the regulation query, in catalog order."""
    verticals = registry.list_all()
    feature_query = filters.feature_query.strip()
    regulation_query = filters.regulation_query.strip()
    if feature_query:
        matching = {v.id for v in registry.filter_by_feature(feature_query)}
        verticals = [v for v in verticals if v.id in matching]
    if regulation_query:
        matching = {v.id for v in registry.filter_by_regulation(regulation_query)}
        verticals = [v for v in verticals if v.id in matching]
    return verticals


def filter_use_cases(vertical: VerticalModule, filters: DashboardFilters) -> List[UseCase]:
    if not filters.complexity:
        return list(vertical.use_cases)
    wanted = set(filters.complexity)
    return [uc for uc in vertical.use_cases if uc.complexity in wanted]


def apply_time_window(df: pd.DataFrame, days: int, column: str = "timestamp") -> pd.DataFrame:
    """Keep the last ``days`` days of readings, counted back from the newest reading."""
    if df.empty or column not in df.columns:
        return df
    timestamps = pd.to_datetime(df[column], errors="coerce", utc=True)
    latest = timestamps.max()
    if pd.isna(latest):
        return df.iloc[0:0]
    cutoff = latest.normalize() - pd.Timedelta(days=days - 1)
    return df[timestamps >= cutoff]


def serialize_filters(filters: DashboardFilters) -> Dict[str, Any]:
    """
    Convert the DashboardFilters dataclass to a JSON-serialisable dictionary to
    be stored in session_state or used for logging/debugging.
    """
    return {
        "time_window": filters.time_window,
        "days": filters.days,
        "feature_query": filters.feature_query or None,
        "regulation_query": filters.regulation_query or None,
        "complexity": [c.value for c in filters.complexity] or None,
    }

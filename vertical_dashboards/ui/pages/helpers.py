from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, List, Optional, Tuple

import pandas as pd

from vertical_dashboards.models import MetricConfig, Polarity, Severity, UseCase, VerticalModule
from vertical_dashboards.thresholds import classify_metric


def latest_and_previous(df: pd.DataFrame, value_col: str = "value", date_col: str = "timestamp") -> Tuple[Optional[float], Optional[float]]:
    if df.empty or value_col not in df.columns:
        return None, None
    ordered = df.dropna(subset=[value_col])
    if date_col in ordered.columns:
        ordered = ordered.sort_values(date_col)
    values = ordered[value_col].astype(float).tolist()
    if not values:
        return None, None
    return values[-1], (values[-2] if len(values) > 1 else None)


def pct_change(current: Optional[float], previous: Optional[float]) -> Optional[float]:
    if current is None or previous in (None, 0):
        return None
    return ((current - previous) / previous) * 100


@dataclass(frozen=True)
class MetricStatus:
    metric: MetricConfig
    latest: Optional[float]
    previous: Optional[float]
    severity: Optional[Severity]

    @property
    def change(self) -> Optional[float]:
        return pct_change(self.latest, self.previous)


def metric_statuses(vertical: VerticalModule, readings: pd.DataFrame) -> List[MetricStatus]:
    """Latest value and severity of every metric of ``vertical``, in catalog order."""
    statuses = []
    for metric in vertical.metrics:
        rows = readings[readings["metric_id"] == metric.id] if not readings.empty else readings
        latest, previous = latest_and_previous(rows)
        severity = classify_metric(metric, latest) if latest is not None else None
        statuses.append(MetricStatus(metric, latest, previous, severity))
    return statuses


def metrics_frame(verticals: List[VerticalModule]) -> pd.DataFrame:
    rows = [
        {
            "Vertical": vertical.name,
            "Metric": metric.name,
            "Unit": metric.unit,
            "Warning": metric.threshold.warning,
            "Critical": metric.threshold.critical,
            "Polarity": "Higher is better" if metric.polarity is Polarity.HIGHER_IS_BETTER else "Lower is better",
            "Visualization": metric.visualization.value,
        }
        for vertical in verticals
        for metric in vertical.metrics
    ]
    return pd.DataFrame(rows)


def use_cases_frame(use_cases: List[UseCase], dedicated: Collection[str] = ()) -> pd.DataFrame:
    """One row per use case; ``dedicated`` holds the ids that have their own dashboard layout."""
    rows = [
        {
            "Use Case": uc.name,
            "Dashboard": "Dedicated" if uc.id in dedicated else "Standard",
            "Complexity": uc.complexity.value.title(),
            "Estimated Time": uc.estimated_time,
            "Security": uc.sia_scores.security,
            "Integrity": uc.sia_scores.integrity,
            "Accuracy": uc.sia_scores.accuracy,
            "Overall": uc.sia_scores.overall,
        }
        for uc in use_cases
    ]
    return pd.DataFrame(rows)

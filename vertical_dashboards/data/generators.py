"""
Seeded mock data for dashboards and metric health when no live source is configured.

Every generator takes a ``seed`` (or a ready ``numpy.random.Generator``) so a
fixed seed reproduces the same records.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from vertical_dashboards.models import Polarity, Trend, VerticalModule

SeedLike = Union[int, np.random.Generator, None]

READING_COLUMNS = ["vertical_id", "metric_id", "timestamp", "value"]


def _rng(seed: SeedLike) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def _end_day(end: Optional[date]) -> pd.Timestamp:
    stamp = pd.Timestamp(end) if end is not None else pd.Timestamp.now(tz="UTC")
    if stamp.tzinfo is None:
        stamp = stamp.tz_localize("UTC")
    return stamp.normalize()


def _random_walk(
    rng: np.random.Generator,
    periods: int,
    base: float,
    variance: float,
    trend: Union[Trend, str] = Trend.STABLE,
) -> np.ndarray:
    trend = Trend(trend)
    noise = (rng.random(periods) - 0.5) * variance
    drift = {Trend.UP: base * 0.01, Trend.DOWN: -base * 0.01, Trend.STABLE: 0.0}[trend]
    values = base + np.cumsum(noise + drift)
    return np.round(np.clip(values, 0, None), 2)


def generate_time_series(
    days: int,
    base: float,
    variance: float,
    trend: Union[Trend, str] = Trend.STABLE,
    seed: SeedLike = None,
    end: Optional[date] = None,
) -> List[Dict[str, object]]:
    """Daily ``{"date": "Mon DD", "value": ...}`` records ending at ``end`` (today by default)."""
    if days <= 0:
        return []
    rng = _rng(seed)
    dates = pd.date_range(end=_end_day(end), periods=days, freq="D")
    values = _random_walk(rng, days, base, variance, trend)
    return [
        {"date": stamp.strftime("%b %d"), "value": float(value)}
        for stamp, value in zip(dates, values)
    ]


def generate_hourly_profile(
    base: float,
    peak: float,
    jitter: float,
    seed: SeedLike = None,
    peak_hours: Sequence[int] = range(8, 21),
) -> List[Dict[str, object]]:
    """24 hourly records shaped by a daytime sine peak, used for load style charts."""
    rng = _rng(seed)
    peak_hours = list(peak_hours)
    start, span = peak_hours[0], max(len(peak_hours) - 1, 1)
    records: List[Dict[str, object]] = []
    for hour in range(24):
        shape = np.sin((hour - start) / span * np.pi) * peak if hour in peak_hours else 0.0
        expected = base + shape
        records.append(
            {
                "hour": f"{hour}:00",
                "actual": round(float(expected + rng.random() * jitter), 1),
                "forecast": round(float(expected), 1),
                "upper": round(float(expected + jitter / 2), 1),
                "lower": round(float(expected - jitter / 2), 1),
            }
        )
    return records


def generate_distribution(
    categories: Sequence[str],
    low: int,
    high: int,
    seed: SeedLike = None,
) -> List[Dict[str, object]]:
    """One ``{"name", "value", "percentage"}`` record per category with integer values in ``[low, high]``."""
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    rng = _rng(seed)
    return [
        {
            "name": category,
            "value": int(rng.integers(low, high + 1)),
            "percentage": int(rng.integers(0, 100)),
        }
        for category in categories
    ]


def healthy_baseline(warning: float, critical: float, polarity: Polarity) -> float:
    gap = abs(warning - critical) or max(abs(warning) * 0.1, 1.0)
    if polarity is Polarity.HIGHER_IS_BETTER:
        return warning + gap * 0.25
    return max(warning - gap * 0.25, 0.0)


def generate_metric_readings(
    vertical: VerticalModule,
    days: int = 30,
    seed: SeedLike = None,
    end: Optional[date] = None,
) -> pd.DataFrame:
    """Daily readings for each metric of ``vertical``, hovering around its warning threshold."""
    if days <= 0 or not vertical.metrics:
        return pd.DataFrame(columns=READING_COLUMNS)

    rng = _rng(seed)
    timestamps = pd.date_range(end=_end_day(end), periods=days, freq="D")
    frames: List[pd.DataFrame] = []
    for metric in vertical.metrics:
        threshold = metric.threshold
        base = healthy_baseline(threshold.warning, threshold.critical, metric.polarity)
        variance = abs(threshold.warning - threshold.critical) or base * 0.05
        values = _random_walk(rng, days, base, variance * 0.5)
        if metric.unit == "%":
            values = np.clip(values, 0, 100)
        frames.append(
            pd.DataFrame(
                {
                    "vertical_id": vertical.id,
                    "metric_id": metric.id,
                    "timestamp": timestamps,
                    "value": values,
                }
            )
        )
    return pd.concat(frames, ignore_index=True)

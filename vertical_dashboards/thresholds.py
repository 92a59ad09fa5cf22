"""
Severity classification for metric values.

``classify`` is the only place that turns a value into a status tier. Badges,
gauge bands, table highlights and KPI trend colors all go through it.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from vertical_dashboards.models import MetricConfig, Polarity, Severity, Threshold, Trend


SEVERITY_COLORS = {
    Severity.HEALTHY: "#00FF88",
    Severity.WARNING: "#FFD700",
    Severity.CRITICAL: "#FF4444",
}

SEVERITY_GLYPHS = {
    Severity.HEALTHY: "✅",
    Severity.WARNING: "⚠️",
    Severity.CRITICAL: "🛑",
}

# up -> 1, stable -> 0, down -> -1 against this threshold gives
# healthy / warning / critical.
_TREND_SCORES = {Trend.UP: 1, Trend.STABLE: 0, Trend.DOWN: -1}
TREND_THRESHOLD = Threshold(warning=0, critical=-1)


def classify(value: float, threshold: Threshold, polarity: Polarity) -> Severity:
    """Status tier of ``value`` against ``threshold``.

    For higher-is-better metrics a value at or below ``critical`` is critical
    and one at or below ``warning`` is a warning. Lower-is-better flips both
    comparisons to ``>=``. A value exactly on a boundary lands in the stricter
    tier.

    The threshold pair is read as given and never reordered to fit the
    polarity. Under lower-is-better, ``Threshold(warning=30, critical=20)`` marks
    everything from 20 up as critical and the warning tier can never be
    reached. Such pairs are refused when a vertical is registered (see
    ``thresholds_consistent``).
    """
    if polarity is Polarity.HIGHER_IS_BETTER:
        if value <= threshold.critical:
            return Severity.CRITICAL
        if value <= threshold.warning:
            return Severity.WARNING
        return Severity.HEALTHY
    if value >= threshold.critical:
        return Severity.CRITICAL
    if value >= threshold.warning:
        return Severity.WARNING
    return Severity.HEALTHY


def classify_metric(metric: MetricConfig, value: float) -> Severity:
    return classify(value, metric.threshold, metric.polarity)


def trend_severity(trend: Trend) -> Severity:
    """Severity of a KPI trend arrow.

    Up always reads as healthy and down as critical, whatever the polarity of
    the underlying metric.
    """
    return classify(_TREND_SCORES[trend], TREND_THRESHOLD, Polarity.HIGHER_IS_BETTER)


def severity_color(severity: Severity) -> str:
    return SEVERITY_COLORS[severity]


def worst(severities: Iterable[Severity]) -> Severity:
    result = Severity.HEALTHY
    for severity in severities:
        if severity.rank > result.rank:
            result = severity
    return result


def thresholds_consistent(threshold: Threshold, polarity: Polarity) -> bool:
    if polarity is Polarity.HIGHER_IS_BETTER:
        return threshold.critical <= threshold.warning
    return threshold.critical >= threshold.warning


def threshold_bands(
    metric: MetricConfig,
    lower: float,
    upper: float,
) -> List[Tuple[float, float, Severity]]:
    """Split ``[lower, upper]`` into contiguous severity bands for ``metric``.

    Bands outside the range are clipped away; empty bands are dropped.
    """
    warning = metric.threshold.warning
    critical = metric.threshold.critical
    if metric.polarity is Polarity.HIGHER_IS_BETTER:
        raw = [
            (lower, critical, Severity.CRITICAL),
            (critical, warning, Severity.WARNING),
            (warning, upper, Severity.HEALTHY),
        ]
    else:
        raw = [
            (lower, warning, Severity.HEALTHY),
            (warning, critical, Severity.WARNING),
            (critical, upper, Severity.CRITICAL),
        ]

    bands: List[Tuple[float, float, Severity]] = []
    for start, end, severity in raw:
        start = max(start, lower)
        end = min(end, upper)
        if end > start:
            bands.append((start, end, severity))
    return bands

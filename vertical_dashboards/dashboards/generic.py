"""
Metric-driven dashboard used for every use case without a dedicated layout.

KPIs come from the vertical's metric configs; tabs show the metric trends, the
use case's security/integrity/accuracy profile and a capability distribution.
"""

from __future__ import annotations

from typing import List

import numpy as np

from vertical_dashboards.data.generators import (
    SeedLike,
    generate_distribution,
    generate_time_series,
    healthy_baseline,
)
from vertical_dashboards.models import (
    ChartConfig,
    ChartType,
    DashboardConfig,
    Kpi,
    MetricConfig,
    TabConfig,
    Trend,
    UseCase,
    VerticalModule,
)
from vertical_dashboards.thresholds import classify_metric, severity_color
from vertical_dashboards.ui.components.formatting import format_metric_value


def sia_radar_chart(use_case: UseCase, title: str = "Security / Integrity / Accuracy") -> ChartConfig:
    return ChartConfig(
        type=ChartType.RADAR,
        title=title,
        data=use_case.sia_scores.as_records(),
        data_keys=["axis", "score"],
        colors=["#00D4FF"],
        height=350,
    )


def _metric_series(metric: MetricConfig, days: int, seed: SeedLike) -> List[dict]:
    threshold = metric.threshold
    gap = abs(threshold.warning - threshold.critical) or 1.0
    base = healthy_baseline(threshold.warning, threshold.critical, metric.polarity)
    series = generate_time_series(days, base, gap * 0.4, seed=seed)
    if metric.unit == "%":
        for record in series:
            record["value"] = min(record["value"], 100.0)
    return series


def _metric_kpi(metric: MetricConfig, series: List[dict]) -> Kpi:
    latest = series[-1]["value"]
    first = series[0]["value"]
    change = ((latest - first) / first * 100) if first else 0.0
    if abs(change) < 0.5:
        trend = Trend.STABLE
    else:
        trend = Trend.UP if change > 0 else Trend.DOWN
    return Kpi(
        title=metric.name,
        value=format_metric_value(latest, metric.unit),
        change=round(change, 1),
        trend=trend,
        icon="activity",
        color="blue",
    )


def build_generic_dashboard(vertical: VerticalModule, use_case: UseCase, seed: SeedLike = None) -> DashboardConfig:
    rng = np.random.default_rng(seed)
    metric_seeds = {metric.id: int(rng.integers(0, 2**31)) for metric in vertical.metrics}
    distribution_seed = int(rng.integers(0, 2**31))
    days = 30

    kpis = [
        _metric_kpi(metric, _metric_series(metric, days, metric_seeds[metric.id]))
        for metric in vertical.metrics
    ]
    kpis.append(
        Kpi(
            title="SIA Score",
            value=use_case.sia_scores.overall,
            change=0.0,
            trend=Trend.STABLE,
            icon="shield",
            color="purple",
        )
    )

    def metric_trends() -> List[ChartConfig]:
        charts = []
        for metric in vertical.metrics:
            series = _metric_series(metric, days, metric_seeds[metric.id])
            severity = classify_metric(metric, series[-1]["value"])
            chart_type = ChartType.BAR if metric.visualization.value == "bar" else ChartType.AREA
            charts.append(
                ChartConfig(
                    type=chart_type,
                    title=f"{metric.name} ({metric.unit})",
                    data=series,
                    data_keys=["date", "value"],
                    colors=[severity_color(severity)],
                )
            )
        return charts

    def sia_profile() -> List[ChartConfig]:
        return [sia_radar_chart(use_case)]

    def capabilities() -> List[ChartConfig]:
        features = list(vertical.features)
        return [
            ChartConfig(
                type=ChartType.PIE,
                title="Feature Coverage",
                data=generate_distribution(features, 10, 100, seed=distribution_seed),
                data_keys=["value"],
                show_legend=True,
            ),
            ChartConfig(
                type=ChartType.BAR,
                title="AI Agent Activity",
                data=generate_distribution(list(vertical.ai_agents), 50, 500, seed=distribution_seed + 1),
                data_keys=["name", "value"],
            ),
        ]

    return DashboardConfig(
        title=use_case.name,
        description=use_case.description,
        kpis=kpis,
        tabs=[
            TabConfig("metrics", "Metric Trends", "trending-up", metric_trends),
            TabConfig("sia", "SIA Profile", "shield", sia_profile, columns=1),
            TabConfig("capabilities", "Capabilities", "chart-bar", capabilities),
        ],
    )

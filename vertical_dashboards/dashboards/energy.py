"""Energy & Utilities dashboards: grid anomaly detection and load forecasting."""

from __future__ import annotations

from typing import List

import numpy as np

from vertical_dashboards.dashboards.generic import sia_radar_chart
from vertical_dashboards.data.generators import SeedLike, generate_hourly_profile, generate_time_series
from vertical_dashboards.models import (
    ChartConfig,
    ChartType,
    DashboardConfig,
    Kpi,
    TabConfig,
    Trend,
    UseCase,
    VerticalModule,
)

ANOMALY_TYPES = [
    {"type": "Voltage Fluctuation", "count": 45},
    {"type": "Frequency Deviation", "count": 32},
    {"type": "Phase Imbalance", "count": 28},
    {"type": "Harmonic Distortion", "count": 19},
    {"type": "Equipment Overload", "count": 15},
]

REGIONAL_ANOMALIES = [
    {"region": "Northeast", "anomalies": 12, "risk": 72, "response": 3.2},
    {"region": "Southeast", "anomalies": 8, "risk": 45, "response": 2.8},
    {"region": "Midwest", "anomalies": 15, "risk": 68, "response": 4.1},
    {"region": "Southwest", "anomalies": 6, "risk": 38, "response": 2.5},
    {"region": "West", "anomalies": 9, "risk": 52, "response": 3.0},
]

DEMAND_FACTORS = [
    {"factor": "Temperature", "impact": 35, "correlation": 0.87},
    {"factor": "Time of Day", "impact": 28, "correlation": 0.92},
    {"factor": "Day of Week", "impact": 18, "correlation": 0.78},
    {"factor": "Economic Activity", "impact": 12, "correlation": 0.65},
    {"factor": "Special Events", "impact": 7, "correlation": 0.45},
]

GENERATION_MIX = [
    {"name": "Natural Gas", "value": 42},
    {"name": "Coal", "value": 28},
    {"name": "Nuclear", "value": 23},
    {"name": "Renewables", "value": 7},
]


def _seeds(seed: SeedLike, count: int) -> List[int]:
    rng = np.random.default_rng(seed)
    return [int(value) for value in rng.integers(0, 2**31, size=count)]


def build_grid_anomaly_dashboard(vertical: VerticalModule, use_case: UseCase, seed: SeedLike = None) -> DashboardConfig:
    trend_seed, health_seed, outage_seed = _seeds(seed, 3)

    def overview() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.BAR,
                title="Anomaly Types",
                data=ANOMALY_TYPES,
                data_keys=["type", "count"],
                colors=["#EF4444"],
            ),
            ChartConfig(
                type=ChartType.LINE,
                title="Daily Anomalies (30 days)",
                data=generate_time_series(30, 20, 5, seed=trend_seed),
                data_keys=["date", "value"],
                colors=["#F59E0B"],
            ),
            ChartConfig(
                type=ChartType.AREA,
                title="Grid Health %",
                data=generate_time_series(24, 95, 3, seed=health_seed),
                data_keys=["date", "value"],
                colors=["#10B981"],
                height=250,
            ),
        ]

    def regional() -> List[ChartConfig]:
        # Radar series share a 0-100 scale, so anomaly counts are shown as a share of the peak region.
        peak = max(r["anomalies"] for r in REGIONAL_ANOMALIES)
        normalized = [
            {"region": r["region"], "anomaly share": round(r["anomalies"] / peak * 100), "risk": r["risk"]}
            for r in REGIONAL_ANOMALIES
        ]
        return [
            ChartConfig(
                type=ChartType.RADAR,
                title="Regional Metrics",
                data=normalized,
                data_keys=["region", "anomaly share", "risk"],
                colors=["#3B82F6", "#EF4444"],
                height=400,
                show_legend=True,
            ),
            ChartConfig(
                type=ChartType.COMPOSED,
                title="Anomalies vs Response Time",
                data=REGIONAL_ANOMALIES,
                data_keys=["region", "anomalies", "response"],
                series_kinds={"anomalies": "bar", "response": "line"},
                secondary_axis=["response"],
                show_legend=True,
            ),
        ]

    def response() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.AREA,
                title="Outages Prevented (90 days)",
                data=generate_time_series(90, 15, 5, trend=Trend.DOWN, seed=outage_seed),
                data_keys=["date", "value"],
                colors=["#8B5CF6"],
            ),
            sia_radar_chart(use_case),
        ]

    return DashboardConfig(
        title="Grid Anomaly Detection System",
        description="Real-time monitoring and prevention of grid failures using AI-powered anomaly detection",
        kpis=[
            Kpi("Anomalies Detected", 23, -15.2, Trend.DOWN, "alert-triangle", "yellow"),
            Kpi("Failures Prevented", 19, 23.5, Trend.UP, "shield", "green"),
            Kpi("Detection Accuracy", "92%", 2.1, Trend.UP, "activity", "blue"),
            Kpi("Avg Detection Time", "4.2 hrs", -18.7, Trend.DOWN, "calendar", "purple"),
        ],
        tabs=[
            TabConfig("overview", "Overview", "chart-bar", overview),
            TabConfig("regional", "Regional Analysis", "map", regional),
            TabConfig("response", "Response & Mitigation", "shield", response),
        ],
    )


def build_load_forecasting_dashboard(vertical: VerticalModule, use_case: UseCase, seed: SeedLike = None) -> DashboardConfig:
    hourly_seed, daily_seed = _seeds(seed, 2)

    def forecast() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.COMPOSED,
                title="Hourly Load: Actual vs Forecast (MW)",
                data=generate_hourly_profile(2200, 1200, 300, seed=hourly_seed),
                data_keys=["hour", "actual", "forecast", "upper", "lower"],
                series_kinds={"actual": "bar", "forecast": "line", "upper": "line", "lower": "line"},
                colors=["#00D4FF", "#FFD700", "#6B7280", "#6B7280"],
                height=350,
                show_legend=True,
            ),
            ChartConfig(
                type=ChartType.LINE,
                title="Daily Average Load (MW)",
                data=generate_time_series(7, 3200, 400, seed=daily_seed),
                data_keys=["date", "value"],
            ),
        ]

    def drivers() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.BAR,
                title="Demand Factor Impact (%)",
                data=DEMAND_FACTORS,
                data_keys=["factor", "impact"],
                colors=["#8B5CF6"],
            ),
            ChartConfig(
                type=ChartType.SCATTER,
                title="Factor Correlation",
                data=DEMAND_FACTORS,
                data_keys=["impact", "correlation"],
                colors=["#14B8A6"],
            ),
        ]

    def generation() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.PIE,
                title="Generation Mix (%)",
                data=GENERATION_MIX,
                data_keys=["value"],
                show_legend=True,
            ),
            sia_radar_chart(use_case),
        ]

    return DashboardConfig(
        title="Load Forecasting",
        description="AI-powered electricity demand forecasting across hourly, daily and weekly horizons",
        kpis=[
            Kpi("Current Load", "3,450 MW", 4.2, Trend.UP, "zap", "blue"),
            Kpi("Forecast Accuracy", "96.5%", 1.3, Trend.UP, "target", "green"),
            Kpi("MAPE", "3.5%", -0.8, Trend.DOWN, "activity", "yellow"),
            Kpi("Reserve Margin", "18%", 0.0, Trend.STABLE, "shield", "purple"),
        ],
        tabs=[
            TabConfig("forecast", "Load Forecast", "trending-up", forecast),
            TabConfig("drivers", "Demand Drivers", "activity", drivers),
            TabConfig("generation", "Generation Mix", "zap", generation),
        ],
        default_tab="forecast",
        refresh_interval=300,
    )

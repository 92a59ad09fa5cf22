"""Manufacturing dashboards: predictive maintenance."""

from __future__ import annotations

from typing import List

import numpy as np

from vertical_dashboards.dashboards.generic import sia_radar_chart
from vertical_dashboards.data.generators import SeedLike, generate_time_series
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

EQUIPMENT_HEALTH = [
    {"equipment": "CNC Machine 1", "health": 92, "days to service": 5},
    {"equipment": "Assembly Line A", "health": 78, "days to service": 2},
    {"equipment": "Packaging Unit", "health": 85, "days to service": 8},
    {"equipment": "Conveyor System", "health": 65, "days to service": 0},
    {"equipment": "Quality Scanner", "health": 94, "days to service": 12},
]

DOWNTIME = [
    {"name": "Planned", "value": 234},
    {"name": "Unplanned", "value": 45},
    {"name": "Prevented", "value": 127},
]


def build_predictive_maintenance_dashboard(
    vertical: VerticalModule,
    use_case: UseCase,
    seed: SeedLike = None,
) -> DashboardConfig:
    rng = np.random.default_rng(seed)
    failure_seed, cost_seed = (int(v) for v in rng.integers(0, 2**31, size=2))

    def equipment() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.BAR,
                title="Equipment Health Score",
                data=EQUIPMENT_HEALTH,
                data_keys=["equipment", "health"],
                colors=["#00FF88"],
            ),
            ChartConfig(
                type=ChartType.SCATTER,
                title="Health vs Days to Service",
                data=EQUIPMENT_HEALTH,
                data_keys=["health", "days to service"],
                colors=["#FFD700"],
            ),
        ]

    def predictions() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.LINE,
                title="Predicted Failures (30 days)",
                data=generate_time_series(30, 20, 5, trend=Trend.DOWN, seed=failure_seed),
                data_keys=["date", "value"],
                colors=["#FF4444"],
            ),
            ChartConfig(
                type=ChartType.AREA,
                title="Maintenance Cost ($, 180 days)",
                data=generate_time_series(180, 45000, 10000, trend=Trend.DOWN, seed=cost_seed),
                data_keys=["date", "value"],
                colors=["#00D4FF"],
            ),
        ]

    def downtime() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.PIE,
                title="Downtime Hours",
                data=DOWNTIME,
                data_keys=["value"],
                colors=["#00D4FF", "#FF4444", "#00FF88"],
                show_legend=True,
            ),
            sia_radar_chart(use_case),
        ]

    return DashboardConfig(
        title="Predictive Maintenance",
        description="Sensor-driven failure prediction and maintenance scheduling for production equipment",
        kpis=[
            Kpi("Equipment Monitored", 847, 2.4, Trend.UP, "activity", "blue"),
            Kpi("Predicted Failures", 23, -12.5, Trend.DOWN, "alert-triangle", "yellow"),
            Kpi("Prediction Accuracy", "94%", 1.8, Trend.UP, "target", "green"),
            Kpi("MTBF", "1,247 hrs", 6.3, Trend.UP, "calendar", "purple"),
        ],
        tabs=[
            TabConfig("equipment", "Equipment Health", "activity", equipment),
            TabConfig("predictions", "Failure Predictions", "trending-up", predictions),
            TabConfig("downtime", "Downtime & Governance", "calendar", downtime),
        ],
    )

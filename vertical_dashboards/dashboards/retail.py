"""Retail dashboards: demand forecasting."""

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

CATEGORY_PERFORMANCE = [
    {"category": "Electronics", "accuracy": 87, "volume": 4567},
    {"category": "Apparel", "accuracy": 82, "volume": 8901},
    {"category": "Home & Garden", "accuracy": 89, "volume": 3456},
    {"category": "Sports", "accuracy": 84, "volume": 2345},
    {"category": "Beauty", "accuracy": 86, "volume": 5678},
]

SEASONAL_INDEX = [
    {"month": "Jan", "index": 0.8},
    {"month": "Feb", "index": 0.9},
    {"month": "Mar", "index": 1.0},
    {"month": "Apr", "index": 1.1},
    {"month": "May", "index": 1.0},
    {"month": "Jun", "index": 0.9},
]

INVENTORY_POSITION = [
    {"name": "Optimal Stock", "value": 3.8},
    {"name": "Excess Inventory", "value": 0.4},
]


def _forecast_vs_actual(seed: SeedLike) -> List[dict]:
    rng = np.random.default_rng(seed)
    series = generate_time_series(90, 100, 15, seed=rng)
    return [
        {
            "date": record["date"],
            "actual": record["value"],
            "forecast": round(record["value"] * float(rng.uniform(0.92, 1.08)), 2),
        }
        for record in series
    ]


def build_demand_forecast_dashboard(vertical: VerticalModule, use_case: UseCase, seed: SeedLike = None) -> DashboardConfig:
    def accuracy() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.LINE,
                title="Forecast vs Actual Sales (90 days)",
                data=_forecast_vs_actual(seed),
                data_keys=["date", "actual", "forecast"],
                colors=["#00D4FF", "#FFD700"],
                show_legend=True,
            ),
            ChartConfig(
                type=ChartType.COMPOSED,
                title="Category Accuracy vs Volume",
                data=CATEGORY_PERFORMANCE,
                data_keys=["category", "volume", "accuracy"],
                series_kinds={"volume": "bar", "accuracy": "line"},
                secondary_axis=["accuracy"],
                show_legend=True,
            ),
        ]

    def seasonality() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.AREA,
                title="Seasonal Demand Index",
                data=SEASONAL_INDEX,
                data_keys=["month", "index"],
                colors=["#8B5CF6"],
            ),
            ChartConfig(
                type=ChartType.PIE,
                title="Inventory Position (weeks of supply)",
                data=INVENTORY_POSITION,
                data_keys=["value"],
                colors=["#00FF88", "#FF4444"],
                show_legend=True,
            ),
        ]

    def governance() -> List[ChartConfig]:
        return [sia_radar_chart(use_case)]

    return DashboardConfig(
        title="Demand Forecasting Dashboard",
        description="AI-powered demand prediction and inventory optimization for retail operations",
        kpis=[
            Kpi("Forecast Accuracy", "85%", 2.3, Trend.UP, "target", "blue"),
            Kpi("SKUs Covered", 23456, 3.5, Trend.UP, "package", "green"),
            Kpi("MAPE", "15%", -1.2, Trend.DOWN, "chart-bar", "yellow"),
            Kpi("Confidence Level", "92%", 3.5, Trend.UP, "activity", "purple"),
        ],
        tabs=[
            TabConfig("forecast-accuracy", "Forecast Accuracy", "trending-up", accuracy),
            TabConfig("seasonality", "Seasonality & Inventory", "calendar", seasonality),
            TabConfig("governance", "Governance", "shield", governance, columns=1),
        ],
    )

"""Financial services dashboards: real-time fraud detection."""

from __future__ import annotations

from typing import List

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

FRAUD_TYPES = [
    {"type": "Card Not Present", "count": 45, "amount": 0.8},
    {"type": "Account Takeover", "count": 32, "amount": 1.2},
    {"type": "Synthetic Identity", "count": 28, "amount": 0.5},
    {"type": "First Party", "count": 19, "amount": 0.3},
    {"type": "Merchant Fraud", "count": 3, "amount": 0.1},
]

RISK_SCORE_DISTRIBUTION = [
    {"name": "Very Low (0-20)", "value": 234567},
    {"name": "Low (21-40)", "value": 123456},
    {"name": "Medium (41-60)", "value": 45678},
    {"name": "High (61-80)", "value": 12345},
    {"name": "Critical (81-100)", "value": 1234},
]

GEOGRAPHIC_HOTSPOTS = [
    {"location": "New York", "incidents": 234},
    {"location": "Los Angeles", "incidents": 189},
    {"location": "Chicago", "incidents": 156},
    {"location": "Houston", "incidents": 134},
    {"location": "Phoenix", "incidents": 98},
]


def build_fraud_detection_dashboard(vertical: VerticalModule, use_case: UseCase, seed: SeedLike = None) -> DashboardConfig:
    def detection() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.AREA,
                title="Fraud Cases Detected (30 days)",
                data=generate_time_series(30, 120, 20, seed=seed),
                data_keys=["date", "value"],
                colors=["#FF4444"],
            ),
            ChartConfig(
                type=ChartType.COMPOSED,
                title="Fraud Types: Cases vs Loss ($M)",
                data=FRAUD_TYPES,
                data_keys=["type", "count", "amount"],
                series_kinds={"count": "bar", "amount": "line"},
                secondary_axis=["amount"],
                show_legend=True,
            ),
        ]

    def risk() -> List[ChartConfig]:
        return [
            ChartConfig(
                type=ChartType.PIE,
                title="Risk Score Distribution",
                data=RISK_SCORE_DISTRIBUTION,
                data_keys=["value"],
                colors=["#00FF88", "#14B8A6", "#FFD700", "#F97316", "#FF4444"],
                show_legend=True,
            ),
            ChartConfig(
                type=ChartType.BAR,
                title="Geographic Hotspots",
                data=GEOGRAPHIC_HOTSPOTS,
                data_keys=["location", "incidents"],
                colors=["#F97316"],
            ),
        ]

    def governance() -> List[ChartConfig]:
        return [sia_radar_chart(use_case)]

    return DashboardConfig(
        title="Real-time Fraud Detection",
        description="Transaction monitoring with ML fraud scoring and explainable alerts",
        kpis=[
            Kpi("Fraud Detected Today", 127, 8.4, Trend.UP, "alert-triangle", "red"),
            Kpi("Loss Prevented", "$2.3M", 12.1, Trend.UP, "shield", "green"),
            Kpi("Detection Accuracy", "96%", 1.2, Trend.UP, "target", "blue"),
            Kpi("Avg Detection Time", "87ms", -5.6, Trend.DOWN, "zap", "purple"),
        ],
        tabs=[
            TabConfig("detection", "Detection", "activity", detection),
            TabConfig("risk", "Risk Analysis", "alert-triangle", risk),
            TabConfig("governance", "Model Governance", "shield", governance, columns=1),
        ],
        refresh_interval=60,
    )

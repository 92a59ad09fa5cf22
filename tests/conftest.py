"""Test configuration and shared fixtures."""

from collections import Counter

import pytest

from vertical_dashboards.data.verticals import VerticalRegistry, default_registry
from vertical_dashboards.models import (
    ChartConfig,
    ChartType,
    Complexity,
    DashboardConfig,
    Kpi,
    MetricConfig,
    Polarity,
    SiaScores,
    TabConfig,
    Threshold,
    Trend,
    UseCase,
    VerticalModule,
    Visualization,
)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def uptime_metric():
    return MetricConfig(
        id="uptime",
        name="Uptime",
        unit="%",
        threshold=Threshold(warning=95, critical=90),
        visualization=Visualization.GAUGE,
        polarity=Polarity.HIGHER_IS_BETTER,
    )


@pytest.fixture
def latency_metric():
    return MetricConfig(
        id="latency",
        name="Latency",
        unit="ms",
        threshold=Threshold(warning=20, critical=30),
        visualization=Visualization.LINE,
        polarity=Polarity.LOWER_IS_BETTER,
    )


@pytest.fixture
def sample_use_case():
    return UseCase(
        id="sample-use-case",
        name="Sample Use Case",
        description="Use case used by tests",
        complexity=Complexity.MEDIUM,
        estimated_time="2 weeks",
        sia_scores=SiaScores(security=90, integrity=80, accuracy=70),
    )


@pytest.fixture
def sample_vertical(sample_use_case, uptime_metric, latency_metric):
    return VerticalModule(
        id="sample",
        name="Sample Vertical",
        description="Vertical used by tests",
        features=("Grid Optimization", "Demand Forecasting"),
        regulations=("NERC CIP", "GDPR"),
        ai_agents=("Grid Agent",),
        use_cases=(sample_use_case,),
        metrics=(uptime_metric, latency_metric),
        dashboard_widgets=("grid-status",),
    )


@pytest.fixture
def empty_registry():
    return VerticalRegistry()


@pytest.fixture
def invocations():
    return Counter()


@pytest.fixture
def two_tab_config(invocations):
    def producer(tab_id):
        def content():
            invocations[tab_id] += 1
            return [
                ChartConfig(
                    type=ChartType.BAR,
                    title=f"{tab_id} chart",
                    data=[{"name": "a", "value": 1}, {"name": "b", "value": 2}],
                    data_keys=["name", "value"],
                )
            ]

        return content

    return DashboardConfig(
        title="Two tabs",
        description="Dashboard used by tests",
        kpis=[
            Kpi("Up", 10, 2.5, Trend.UP),
            Kpi("Down", "5%", -1.0, Trend.DOWN),
            Kpi("Flat", 3, 0.0, Trend.STABLE),
        ],
        tabs=[
            TabConfig("a", "Tab A", "chart-bar", producer("a")),
            TabConfig("b", "Tab B", "trending-up", producer("b")),
        ],
    )

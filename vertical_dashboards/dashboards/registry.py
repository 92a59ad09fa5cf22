"""
Maps use-case ids to the functions that build their dashboards.

Use cases without a dedicated layout get the generic, metric-driven builder.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from vertical_dashboards.dashboards.energy import build_grid_anomaly_dashboard, build_load_forecasting_dashboard
from vertical_dashboards.dashboards.finance import build_fraud_detection_dashboard
from vertical_dashboards.dashboards.generic import build_generic_dashboard
from vertical_dashboards.dashboards.manufacturing import build_predictive_maintenance_dashboard
from vertical_dashboards.dashboards.retail import build_demand_forecast_dashboard
from vertical_dashboards.data.generators import SeedLike
from vertical_dashboards.data.verticals import VerticalRegistry, default_registry
from vertical_dashboards.models import DashboardConfig, UseCase, VerticalModule

DashboardBuilder = Callable[[VerticalModule, UseCase, SeedLike], DashboardConfig]

DASHBOARD_BUILDERS: Dict[str, DashboardBuilder] = {
    "grid-anomaly": build_grid_anomaly_dashboard,
    "load-forecasting": build_load_forecasting_dashboard,
    "demand-forecast": build_demand_forecast_dashboard,
    "fraud-detection": build_fraud_detection_dashboard,
    "predictive-maintenance": build_predictive_maintenance_dashboard,
}


def dashboard_exists(use_case_id: str) -> bool:
    """True when ``use_case_id`` has a dedicated dashboard layout."""
    return use_case_id in DASHBOARD_BUILDERS


def get_builder(use_case_id: str) -> DashboardBuilder:
    return DASHBOARD_BUILDERS.get(use_case_id, build_generic_dashboard)


def build_dashboard(vertical: VerticalModule, use_case: UseCase, seed: SeedLike = None) -> DashboardConfig:
    return get_builder(use_case.id)(vertical, use_case, seed)


def dashboards_by_vertical(registry: VerticalRegistry = None) -> Dict[str, List[str]]:
    """Dedicated dashboard ids grouped by vertical display name, in catalog order."""
    registry = registry or default_registry()
    grouped: Dict[str, List[str]] = {}
    for vertical in registry.list_all():
        ids = [uc.id for uc in vertical.use_cases if dashboard_exists(uc.id)]
        if ids:
            grouped[vertical.name] = ids
    return grouped

"""Quick validation script for the vertical catalog and dashboard builders.

Run with `python scripts/validate_catalog.py` to make sure every vertical
registers cleanly and every use case builds a dashboard whose tabs render.
"""

from __future__ import annotations

from vertical_dashboards.dashboards.registry import build_dashboard, dashboard_exists
from vertical_dashboards.data.verticals import default_registry
from vertical_dashboards.models import ThemeMode
from vertical_dashboards.ui.dashboard import compose


def main() -> None:
    registry = default_registry()
    if len(registry) == 0:
        raise SystemExit("Catalog is empty")

    dashboards = 0
    dedicated = 0
    for vertical in registry.list_all():
        if not vertical.metrics:
            raise SystemExit(f"Vertical '{vertical.id}' has no metrics")
        for use_case in vertical.use_cases:
            config = build_dashboard(vertical, use_case, seed=42)
            for tab in config.tabs:
                composed = compose(config, ThemeMode.DARK, tab.id)
                assert composed.active_tab == tab.id, f"{use_case.id}: tab {tab.id} did not activate"
            dashboards += 1
            dedicated += dashboard_exists(use_case.id)

    print(
        f"Catalog validation passed. Verticals: {len(registry)}, "
        f"dashboards: {dashboards} ({dedicated} dedicated)"
    )


if __name__ == "__main__":
    main()

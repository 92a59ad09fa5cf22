from vertical_dashboards.bootstrap_env import ensure_env

ensure_env()  # must run before settings are read

import streamlit as st  # noqa: E402

from vertical_dashboards.config import SECTIONS, load_settings  # noqa: E402
from vertical_dashboards.data.filters import apply_catalog_filters, serialize_filters  # noqa: E402
from vertical_dashboards.data.loader import clear_cache, load_metric_readings  # noqa: E402
from vertical_dashboards.data.verticals import default_registry  # noqa: E402
from vertical_dashboards.ui.layout import (  # noqa: E402
    setup_page,
    sidebar_filters_ui,
    sidebar_selection_ui,
    theme_toggle_ui,
)
from vertical_dashboards.ui.pages import catalog, governance, metric_health, use_case_dashboard  # noqa: E402
from vertical_dashboards.ui.pages.context import PageContext  # noqa: E402
from vertical_dashboards.utils.logging import get_logger, setup_logging  # noqa: E402


PAGE_RENDERERS = {
    "catalog": catalog.render,
    "metric_health": metric_health.render,
    "use_case_dashboard": use_case_dashboard.render,
    "governance": governance.render,
}

logger = get_logger(__name__)


def _active_filter_summary(context: PageContext) -> None:
    filters = context.filters
    badges = [f"Window: {filters.time_window}"]
    if filters.feature_query:
        badges.append(f"Feature: {filters.feature_query}")
    if filters.regulation_query:
        badges.append(f"Regulation: {filters.regulation_query}")
    if filters.complexity:
        badges.append("Complexity: " + ", ".join(c.value.title() for c in filters.complexity))
    st.markdown("**Active Filters:** " + " | ".join(badges))


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    setup_page()
    st.title("Vertical Dashboards")

    if st.sidebar.button("🔄 Refresh Data"):
        clear_cache()

    theme = theme_toggle_ui(settings.default_theme)
    registry = default_registry()
    filters = sidebar_filters_ui()
    st.session_state["vd_active_filters"] = serialize_filters(filters)

    visible = apply_catalog_filters(registry, filters)
    vertical, use_case = sidebar_selection_ui(visible, filters)

    readings = load_metric_readings(settings)
    if not readings.is_ok:
        logger.info("Live readings disabled: %s", readings.reason)

    context = PageContext(
        registry=registry,
        settings=settings,
        theme=theme,
        filters=filters,
        readings=readings,
        visible_verticals=visible,
        vertical=vertical,
        use_case=use_case,
    )
    _active_filter_summary(context)

    streamlit_tabs = st.tabs([section.label for section in SECTIONS])
    for streamlit_tab, section in zip(streamlit_tabs, SECTIONS):
        renderer = PAGE_RENDERERS.get(section.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()

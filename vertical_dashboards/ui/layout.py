"""
Layout helpers for the Streamlit application (page setup, theme switch, sidebar).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import streamlit as st

from vertical_dashboards.data.filters import DEFAULT_FILTERS, TIME_WINDOWS, DashboardFilters, filter_use_cases
from vertical_dashboards.data.verticals import VerticalRegistry
from vertical_dashboards.models import Complexity, ThemeMode, UseCase, VerticalModule
from vertical_dashboards.ui.components.theme import opposite_label, parse_theme, toggle

THEME_STATE_KEY = "vd_theme"
COMPLEXITY_LABELS = {
    Complexity.LOW: "Low",
    Complexity.MEDIUM: "Medium",
    Complexity.HIGH: "High",
}


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Vertical Dashboards",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _flip_theme(default: ThemeMode) -> None:
    current = parse_theme(st.session_state.get(THEME_STATE_KEY), default=default)
    st.session_state[THEME_STATE_KEY] = toggle(current).value


def theme_toggle_ui(default: ThemeMode) -> ThemeMode:
    """Sidebar button that flips the persisted theme; returns the theme for this run."""
    theme = parse_theme(st.session_state.get(THEME_STATE_KEY), default=default)
    st.session_state[THEME_STATE_KEY] = theme.value
    st.sidebar.button(
        f"Switch to {opposite_label(theme)}",
        key="vd_theme_toggle",
        on_click=_flip_theme,
        args=(default,),
    )
    return theme


def sidebar_filters_ui(defaults: DashboardFilters = DEFAULT_FILTERS) -> DashboardFilters:
    """
    Render the sidebar filter controls and return the selected values.
    """
    st.sidebar.header("Filters")
    windows = list(TIME_WINDOWS)
    time_window = st.sidebar.radio(
        "Time Window",
        options=windows,
        index=windows.index(defaults.time_window),
        horizontal=True,
        key="vd_time_window",
    )
    feature_query = st.sidebar.text_input(
        "Feature contains",
        value=defaults.feature_query,
        key="vd_feature_query",
        help="Case-insensitive match against vertical features, e.g. 'grid'.",
    )
    regulation_query = st.sidebar.text_input(
        "Regulation contains",
        value=defaults.regulation_query,
        key="vd_regulation_query",
        help="Case-insensitive match against regulations, e.g. 'hipaa'.",
    )
    complexity = st.sidebar.multiselect(
        "Use-case complexity",
        options=list(Complexity),
        default=list(defaults.complexity),
        format_func=lambda c: COMPLEXITY_LABELS[c],
        key="vd_complexity",
    )
    return DashboardFilters(
        time_window=time_window,
        feature_query=feature_query,
        regulation_query=regulation_query,
        complexity=list(complexity),
    )


def sidebar_selection_ui(
    verticals: List[VerticalModule],
    filters: DashboardFilters,
) -> Tuple[Optional[VerticalModule], Optional[UseCase]]:
    """Vertical and use-case pickers limited to what the filters leave visible."""
    st.sidebar.header("Selection")
    if not verticals:
        st.sidebar.info("No vertical matches the current filters.")
        return None, None

    names = {v.id: v.name for v in verticals}
    vertical_id = st.sidebar.selectbox(
        "Vertical",
        options=list(names),
        format_func=lambda vid: names[vid],
        key="vd_vertical",
    )
    vertical = next(v for v in verticals if v.id == vertical_id)

    use_cases = filter_use_cases(vertical, filters)
    if not use_cases:
        st.sidebar.info("No use case matches the selected complexity.")
        return vertical, None
    labels = {uc.id: uc.name for uc in use_cases}
    use_case_id = st.sidebar.selectbox(
        "Use case",
        options=list(labels),
        format_func=lambda uid: labels[uid],
        key=f"vd_use_case_{vertical.id}",
    )
    return vertical, next(uc for uc in use_cases if uc.id == use_case_id)


def catalog_summary(registry: VerticalRegistry, visible: List[VerticalModule]) -> None:
    total_use_cases = sum(len(v.use_cases) for v in visible)
    st.caption(
        f"Showing {len(visible)} of {len(registry)} verticals "
        f"with {total_use_cases} use cases."
    )

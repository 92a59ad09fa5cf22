"""
Dashboard composition: KPI cards, a tab strip, and the active tab's charts.

Tab content producers are lazy. ``compose`` runs only the active tab's producer
and runs it again on every pass, so panels always reflect current filters and
theme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import plotly.graph_objects as go
import streamlit as st

from vertical_dashboards.models import DashboardConfig, TabConfig, ThemeMode, UseCase
from vertical_dashboards.ui.components.charts import render_chart, render_plotly
from vertical_dashboards.ui.components.kpi import KpiCardView, build_kpi_card, render_kpi_cards

logger = logging.getLogger(__name__)

TAB_ICONS = {
    "chart-bar": "📊",
    "trending-up": "📈",
    "activity": "🩺",
    "alert-triangle": "⚠️",
    "calendar": "📅",
    "package": "📦",
    "shield": "🛡️",
    "map": "🗺️",
    "target": "🎯",
    "zap": "⚡",
    "users": "👥",
}


class UnknownTab(KeyError):
    pass


@dataclass
class ComposedDashboard:
    title: str
    description: str
    kpi_cards: List[KpiCardView]
    tabs: List[TabConfig]
    active_tab: Optional[str]
    figures: List[go.Figure]
    refresh_interval: Optional[int] = None

    @property
    def active(self) -> Optional[TabConfig]:
        return next((tab for tab in self.tabs if tab.id == self.active_tab), None)


def initial_tab(config: DashboardConfig) -> Optional[str]:
    if config.default_tab and config.get_tab(config.default_tab) is not None:
        return config.default_tab
    return config.tabs[0].id if config.tabs else None


def switch_tab(config: DashboardConfig, current: Optional[str], new_id: str) -> str:
    if config.get_tab(new_id) is None:
        raise UnknownTab(new_id)
    if new_id != current:
        logger.debug("Switching tab %s -> %s on '%s'", current, new_id, config.title)
    return new_id


def compose(
    config: DashboardConfig,
    theme: ThemeMode,
    active_tab: Optional[str] = None,
) -> ComposedDashboard:
    """Build the page model; only the active tab's content producer is invoked."""
    tab_id = active_tab if active_tab and config.get_tab(active_tab) else initial_tab(config)
    figures: List[go.Figure] = []
    if tab_id is not None:
        tab = config.get_tab(tab_id)
        figures = [render_chart(chart, theme) for chart in tab.content()]
    return ComposedDashboard(
        title=config.title,
        description=config.description,
        kpi_cards=[build_kpi_card(kpi) for kpi in config.kpis],
        tabs=list(config.tabs),
        active_tab=tab_id,
        figures=figures,
        refresh_interval=config.refresh_interval,
    )


def _tab_label(tab: TabConfig) -> str:
    glyph = TAB_ICONS.get(tab.icon)
    return f"{glyph} {tab.label}" if glyph else tab.label


def _render_sia_scores(use_case: UseCase) -> None:
    scores = use_case.sia_scores
    cols = st.columns(4)
    cols[0].metric("Security", scores.security)
    cols[1].metric("Integrity", scores.integrity)
    cols[2].metric("Accuracy", scores.accuracy)
    cols[3].metric("Overall", scores.overall)


def _render_figures(figures: List[go.Figure], columns: int) -> None:
    if not figures:
        st.info("No charts configured for this tab.")
        return
    columns = max(columns, 1)
    for idx in range(0, len(figures), columns):
        row = figures[idx: idx + columns]
        cols = st.columns(len(row))
        for col, fig in zip(cols, row):
            with col:
                render_plotly(fig)


def render_dashboard(
    config: DashboardConfig,
    theme: ThemeMode,
    use_case: Optional[UseCase] = None,
    key: str = "dashboard",
) -> ComposedDashboard:
    """Render ``config`` into the current Streamlit container."""
    state_key = f"vd_tab_{key}"
    current = st.session_state.get(state_key)
    if current is None or config.get_tab(current) is None:
        current = initial_tab(config)

    header_col, score_col = st.columns([3, 2])
    with header_col:
        st.markdown(f"## {config.title}")
        st.caption(config.description)
    if use_case is not None:
        with score_col:
            _render_sia_scores(use_case)

    kpi_area = st.container()

    if config.tabs:
        tab_ids = config.tab_ids()
        labels = {tab.id: _tab_label(tab) for tab in config.tabs}
        selected = st.radio(
            "Section",
            options=tab_ids,
            index=tab_ids.index(current),
            format_func=lambda tab_id: labels[tab_id],
            horizontal=True,
            label_visibility="collapsed",
            key=f"{state_key}_radio",
        )
        current = switch_tab(config, current, selected)
        st.session_state[state_key] = current

    composed = compose(config, theme, current)
    with kpi_area:
        render_kpi_cards(composed.kpi_cards, columns=4)

    active = composed.active
    if active is None:
        st.info("This dashboard has no tabs configured.")
    else:
        _render_figures(composed.figures, active.columns)
    if composed.refresh_interval:
        st.caption(f"Data refreshes every {composed.refresh_interval} seconds.")
    return composed

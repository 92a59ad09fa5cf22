from __future__ import annotations

import streamlit as st

from vertical_dashboards.dashboards.registry import build_dashboard, dashboard_exists
from vertical_dashboards.ui.dashboard import render_dashboard
from vertical_dashboards.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    if context.vertical is None or context.use_case is None:
        st.info("Select a vertical and a use case in the sidebar to open its dashboard.")
        return

    if not dashboard_exists(context.use_case.id):
        st.caption("Standard metric dashboard for this use case.")

    config = build_dashboard(context.vertical, context.use_case, seed=context.settings.mock_seed)
    render_dashboard(config, context.theme, use_case=context.use_case, key=context.use_case.id)

from __future__ import annotations

import pandas as pd
import streamlit as st

from vertical_dashboards.data.filters import apply_time_window
from vertical_dashboards.data.loader import readings_for_vertical
from vertical_dashboards.data.results import unwrap_or_fallback
from vertical_dashboards.thresholds import SEVERITY_GLYPHS, worst
from vertical_dashboards.ui.components.charts import metric_figure, render_plotly
from vertical_dashboards.ui.components.formatting import MISSING, format_metric_value, format_percent
from vertical_dashboards.ui.components.tables import render_table
from vertical_dashboards.ui.pages.context import PageContext
from vertical_dashboards.ui.pages.helpers import metric_statuses


def render(context: PageContext) -> None:
    vertical = context.vertical
    if vertical is None:
        st.info("Select a vertical in the sidebar to see its metric health.")
        return

    st.subheader(f"Metric Health: {vertical.name}")
    result = readings_for_vertical(
        context.readings,
        vertical,
        days=context.filters.days,
        seed=context.settings.mock_seed,
    )
    if not result.is_ok:
        st.warning(f"Live readings unavailable ({result.reason}). Showing generated sample data.")

    readings = apply_time_window(unwrap_or_fallback(result), context.filters.days)
    statuses = metric_statuses(vertical, readings)
    known = [s.severity for s in statuses if s.severity is not None]
    if known:
        overall = worst(known)
        st.markdown(f"**Overall status:** {SEVERITY_GLYPHS[overall]} {overall.value.title()}")

    rows = []
    for status in statuses:
        metric = status.metric
        rows.append(
            {
                "Metric": metric.name,
                "Latest": format_metric_value(status.latest, metric.unit),
                "Change": format_percent(status.change) if status.change is not None else MISSING,
                "Status": status.severity.value if status.severity else MISSING,
            }
        )
    render_table(pd.DataFrame(rows), severity_cols=["Status"])

    cols = st.columns(2)
    for idx, status in enumerate(statuses):
        metric_rows = readings[readings["metric_id"] == status.metric.id] if not readings.empty else readings
        with cols[idx % 2]:
            render_plotly(metric_figure(status.metric, metric_rows, context.theme))

from __future__ import annotations

import streamlit as st

from vertical_dashboards.dashboards.registry import dashboards_by_vertical
from vertical_dashboards.data.filters import filter_use_cases
from vertical_dashboards.ui.components.tables import render_table
from vertical_dashboards.ui.layout import catalog_summary
from vertical_dashboards.ui.pages.context import PageContext
from vertical_dashboards.ui.pages.helpers import metrics_frame, use_cases_frame


def render(context: PageContext) -> None:
    st.subheader("Vertical Catalog")
    catalog_summary(context.registry, context.visible_verticals)
    if not context.visible_verticals:
        st.info("No vertical matches the feature and regulation filters.")
        return

    dedicated = dashboards_by_vertical(context.registry)
    for vertical in context.visible_verticals:
        with st.expander(f"{vertical.name} ({len(vertical.use_cases)} use cases)", expanded=vertical is context.vertical):
            st.caption(vertical.description)
            features_col, regulations_col, agents_col = st.columns(3)
            features_col.markdown("**Features**\n\n" + "\n".join(f"- {f}" for f in vertical.features))
            regulations_col.markdown("**Regulations**\n\n" + "\n".join(f"- {r}" for r in vertical.regulations))
            agents_col.markdown("**AI Agents**\n\n" + "\n".join(f"- {a}" for a in vertical.ai_agents))

            use_cases = filter_use_cases(vertical, context.filters)
            render_table(use_cases_frame(use_cases, dedicated.get(vertical.name, ())))

    st.markdown("#### Metric Thresholds")
    render_table(
        metrics_frame(context.visible_verticals),
        column_config={"Warning": {"type": "number", "decimals": 1}, "Critical": {"type": "number", "decimals": 1}},
        export_file_name="vertical_metrics.csv",
    )

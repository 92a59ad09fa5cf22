"""
Compliance analytics and audit log panel backed by the dashboard API.

Both panels are fetched on the session's ``LiveFeed``. Each render shows the
response to its own request; one still in flight, or one that failed, renders
the empty fallback with a warning.
"""

from __future__ import annotations

from concurrent.futures import wait
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
import streamlit as st

from vertical_dashboards.data.api_client import EXPORT_FORMATS, ApiClient, fetch_or_fallback
from vertical_dashboards.data.live import LiveFeed, session_feed
from vertical_dashboards.data.results import Result, unwrap_or_fallback
from vertical_dashboards.models import ChartConfig, ChartType, Page, Polarity, Severity, Threshold
from vertical_dashboards.thresholds import SEVERITY_GLYPHS, classify
from vertical_dashboards.ui.components.charts import show_chart
from vertical_dashboards.ui.components.formatting import MISSING, format_number, format_percent
from vertical_dashboards.ui.components.tables import render_table
from vertical_dashboards.ui.pages.context import PageContext

COMPLIANCE_CHANNEL = "compliance"
AUDIT_CHANNEL = "audit-logs"
AUDIT_PAGE_SIZE = 25
COMPLIANCE_THRESHOLD = Threshold(warning=90, critical=70)
AUDIT_COLUMNS = ["timestamp", "userEmail", "action", "resource", "status"]
WAIT_PADDING = 2.0

EMPTY_COMPLIANCE: Dict[str, Any] = {
    "overview": {},
    "complianceTimeline": [],
    "regulatoryFrameworks": [],
    "complianceByCategory": [],
}


def empty_audit_page(page: int = 1) -> Page[Dict[str, Any]]:
    return Page(items=[], total=0, page=page, page_size=AUDIT_PAGE_SIZE)


def api_time_range(time_window: str) -> str:
    """Sidebar window preset (``30D``) to the API's ``timeRange`` value (``30d``)."""
    return time_window.lower()


def compliance_severity(score: Optional[float]) -> Optional[Severity]:
    if score is None:
        return None
    return classify(float(score), COMPLIANCE_THRESHOLD, Polarity.HIGHER_IS_BETTER)


def compliance_charts(payload: Mapping[str, Any]) -> List[ChartConfig]:
    charts: List[ChartConfig] = []
    timeline = payload.get("complianceTimeline") or []
    if timeline:
        charts.append(
            ChartConfig(
                type=ChartType.COMPOSED,
                title="Compliance Score vs Violations",
                data=timeline,
                data_keys=["date", "violations", "score"],
                series_kinds={"violations": "bar", "score": "line"},
                secondary_axis=["score"],
                colors=["#FF4444", "#00FF88"],
                show_legend=True,
            )
        )
    frameworks = payload.get("regulatoryFrameworks") or []
    if frameworks:
        charts.append(
            ChartConfig(
                type=ChartType.BAR,
                title="Compliance by Framework (%)",
                data=frameworks,
                data_keys=["framework", "compliance"],
                colors=["#00D4FF"],
            )
        )
    categories = payload.get("complianceByCategory") or []
    if categories:
        charts.append(
            ChartConfig(
                type=ChartType.RADAR,
                title="Compliance by Category",
                data=categories,
                data_keys=["category", "score"],
                colors=["#8B5CF6"],
            )
        )
    return charts


def audit_frame(page: Page[Dict[str, Any]]) -> pd.DataFrame:
    frame = pd.DataFrame(page.items)
    if frame.empty:
        return pd.DataFrame(columns=AUDIT_COLUMNS)
    return frame.reindex(columns=AUDIT_COLUMNS)


@st.cache_resource(show_spinner=False)
def _api_client(base_url: str, timeout: float) -> ApiClient:
    return ApiClient(base_url, timeout=timeout)



def _show_degraded(result: Result[Any], label: str) -> None:
    if not result.is_ok:
        st.warning(f"{label} unavailable ({result.reason}). Showing empty data.")


def _render_overview(overview: Mapping[str, Any]) -> None:
    score = overview.get("complianceScore")
    severity = compliance_severity(score)
    glyph = SEVERITY_GLYPHS[severity] if severity else ""
    cols = st.columns(4)
    cols[0].metric("Compliance Score", f"{glyph} {format_percent(score, decimals=0)}".strip() if score is not None else MISSING)
    cols[1].metric("Total Checks", format_number(overview.get("totalChecks")))
    cols[2].metric("Passed", format_number(overview.get("passedChecks")))
    cols[3].metric("Failed", format_number(overview.get("failedChecks")))


def _render_export(client: ApiClient, filters: Mapping[str, Any]) -> None:
    fmt = st.radio("Export format", options=list(EXPORT_FORMATS), horizontal=True, key="vd_audit_export_format")
    if not st.button("Prepare export", key="vd_audit_export"):
        return
    result = fetch_or_fallback(lambda: client.export_audit_logs(fmt, **filters), b"", label="audit export")
    if not result.is_ok:
        st.warning(f"Export failed ({result.reason}).")
        return
    st.download_button(
        f"Download {fmt.upper()}",
        data=result.value,
        file_name=f"audit-logs.{fmt}",
        mime="text/csv" if fmt == "csv" else "application/pdf",
    )


def render(context: PageContext) -> None:
    st.subheader("Compliance & Audit")
    settings = context.settings
    if not settings.api_enabled:
        st.info("Set VD_API_BASE_URL to load compliance analytics and audit logs.")
        return

    client = _api_client(settings.api_base_url, settings.api_timeout)
    feed: LiveFeed = session_feed(st.session_state)

    frameworks = ["All"] + list(context.vertical.regulations if context.vertical else [])
    framework_col, action_col, page_col = st.columns([2, 2, 1])
    framework = framework_col.selectbox("Framework", options=frameworks, key="vd_framework")
    action = action_col.text_input("Action", key="vd_audit_action")
    page = int(page_col.number_input("Page", min_value=1, value=1, step=1, key="vd_audit_page"))

    time_range = api_time_range(context.filters.time_window)
    framework_param = None if framework == "All" else framework
    audit_filters = {"action": action.strip() or None, "framework": framework_param}

    audit_fallback = empty_audit_page(page)
    compliance_future = feed.submit(
        COMPLIANCE_CHANNEL,
        lambda: client.get_compliance_analytics(time_range, framework_param),
        EMPTY_COMPLIANCE,
    )
    audit_future = feed.submit(
        AUDIT_CHANNEL,
        lambda: client.get_audit_logs(page=page, page_size=AUDIT_PAGE_SIZE, **audit_filters),
        audit_fallback,
    )
    wait([compliance_future, audit_future], timeout=settings.api_timeout + WAIT_PADDING)

    compliance = feed.resolve(compliance_future, EMPTY_COMPLIANCE)
    _show_degraded(compliance, "Compliance analytics")
    payload = unwrap_or_fallback(compliance)
    _render_overview(payload.get("overview") or {})
    for chart in compliance_charts(payload):
        show_chart(chart, context.theme)

    st.markdown("#### Audit Log")
    audit = feed.resolve(audit_future, audit_fallback)
    _show_degraded(audit, "Audit logs")
    audit_page = unwrap_or_fallback(audit)
    st.caption(f"Page {audit_page.page} of {max(audit_page.page_count, 1)} ({audit_page.total} entries)")
    render_table(audit_frame(audit_page))
    _render_export(client, audit_filters)

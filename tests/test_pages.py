import pandas as pd

from vertical_dashboards.dashboards.registry import dashboards_by_vertical
from vertical_dashboards.models import Page, Severity
from vertical_dashboards.ui.pages.governance import (
    AUDIT_COLUMNS,
    api_time_range,
    audit_frame,
    compliance_charts,
    compliance_severity,
    empty_audit_page,
)
from vertical_dashboards.ui.pages.helpers import (
    latest_and_previous,
    metric_statuses,
    metrics_frame,
    pct_change,
    use_cases_frame,
)


def _readings():
    return pd.DataFrame(
        {
            "metric_id": ["uptime", "uptime", "latency", "latency"],
            "timestamp": pd.to_datetime(
                ["2024-03-02", "2024-03-01", "2024-03-01", "2024-03-02"], utc=True
            ),
            "value": [92.0, 96.0, 15.0, 45.0],
        }
    )


def test_latest_and_previous_sorts_by_time():
    uptime = _readings()[lambda df: df["metric_id"] == "uptime"]
    assert latest_and_previous(uptime) == (92.0, 96.0)
    assert latest_and_previous(pd.DataFrame()) == (None, None)


def test_pct_change():
    assert pct_change(110, 100) == 10
    assert pct_change(5, 0) is None
    assert pct_change(None, 3) is None


def test_metric_statuses(sample_vertical):
    statuses = metric_statuses(sample_vertical, _readings())
    assert [s.metric.id for s in statuses] == ["uptime", "latency"]
    assert [s.severity for s in statuses] == [Severity.WARNING, Severity.CRITICAL]
    assert statuses[1].change == 200


def test_metric_statuses_without_readings(sample_vertical):
    statuses = metric_statuses(sample_vertical, pd.DataFrame(columns=["metric_id", "timestamp", "value"]))
    assert all(s.severity is None and s.latest is None for s in statuses)


def test_catalog_frames(sample_vertical):
    metrics = metrics_frame([sample_vertical])
    assert metrics["Polarity"].tolist() == ["Higher is better", "Lower is better"]
    use_cases = use_cases_frame(list(sample_vertical.use_cases))
    assert use_cases.loc[0, "Overall"] == 80
    assert use_cases.loc[0, "Complexity"] == "Medium"


def test_compliance_severity_goes_through_classifier():
    assert compliance_severity(96) is Severity.HEALTHY
    assert compliance_severity(85) is Severity.WARNING
    assert compliance_severity(70) is Severity.CRITICAL
    assert compliance_severity(None) is None


def test_compliance_charts_skip_missing_sections():
    assert compliance_charts({}) == []
    payload = {
        "complianceTimeline": [{"date": "Mar 01", "score": 91, "violations": 2}],
        "regulatoryFrameworks": [{"framework": "GDPR", "compliance": 88}],
    }
    charts = compliance_charts(payload)
    assert [c.title for c in charts] == ["Compliance Score vs Violations", "Compliance by Framework (%)"]
    assert charts[0].secondary_axis == ["score"]


def test_audit_frame_keeps_known_columns():
    page = Page(
        items=[{"timestamp": "2024-03-01T10:00:00Z", "action": "login", "status": "success", "ipAddress": "1.2.3.4"}],
        total=1,
        page=1,
        page_size=25,
    )
    frame = audit_frame(page)
    assert list(frame.columns) == AUDIT_COLUMNS
    assert frame.loc[0, "action"] == "login"
    assert audit_frame(empty_audit_page()).empty


def test_api_time_range():
    assert api_time_range("30D") == "30d"
    assert api_time_range("1Y") == "1y"


def test_use_cases_frame_marks_dedicated_dashboards(sample_vertical):
    use_cases = list(sample_vertical.use_cases)
    assert use_cases_frame(use_cases).loc[0, "Dashboard"] == "Standard"
    assert use_cases_frame(use_cases, ["sample-use-case"]).loc[0, "Dashboard"] == "Dedicated"


def test_catalog_marks_registered_dashboards(registry):
    dedicated = dashboards_by_vertical(registry)
    energy = registry.lookup("energy")
    frame = use_cases_frame(list(energy.use_cases), dedicated.get(energy.name, ()))
    marked = set(frame.loc[frame["Dashboard"] == "Dedicated", "Use Case"])
    assert marked == {uc.name for uc in energy.use_cases if uc.id in {"grid-anomaly", "load-forecasting"}}
    assert marked

from vertical_dashboards.dashboards.generic import build_generic_dashboard
from vertical_dashboards.dashboards.registry import (
    DASHBOARD_BUILDERS,
    build_dashboard,
    dashboard_exists,
    dashboards_by_vertical,
    get_builder,
)
from vertical_dashboards.models import ThemeMode, Trend
from vertical_dashboards.ui.dashboard import compose


def test_dedicated_dashboards_belong_to_catalog_use_cases(registry):
    for use_case_id in DASHBOARD_BUILDERS:
        assert registry.find_use_case(use_case_id) is not None


def test_unknown_use_case_gets_generic_builder():
    assert not dashboard_exists("not-a-use-case")
    assert get_builder("not-a-use-case") is build_generic_dashboard
    assert dashboard_exists("grid-anomaly")


def test_dashboards_by_vertical(registry):
    grouped = dashboards_by_vertical(registry)
    assert grouped["Energy & Utilities"] == ["grid-anomaly", "load-forecasting"]
    assert sum(len(ids) for ids in grouped.values()) == len(DASHBOARD_BUILDERS)


def test_every_use_case_renders_every_tab(registry):
    for vertical in registry.list_all():
        for use_case in vertical.use_cases:
            config = build_dashboard(vertical, use_case, seed=42)
            assert config.kpis
            assert config.tabs
            for tab in config.tabs:
                composed = compose(config, ThemeMode.DARK, tab.id)
                assert composed.active_tab == tab.id
                assert composed.figures


def test_load_forecasting_defaults(registry):
    vertical, use_case = registry.find_use_case("load-forecasting")
    config = build_dashboard(vertical, use_case, seed=1)
    assert config.default_tab == "forecast"
    assert config.refresh_interval == 300


def test_generic_dashboard_is_reproducible(sample_vertical, sample_use_case):
    first = build_generic_dashboard(sample_vertical, sample_use_case, seed=3)
    second = build_generic_dashboard(sample_vertical, sample_use_case, seed=3)
    assert [k.value for k in first.kpis] == [k.value for k in second.kpis]
    assert first.tabs[0].content()[0].data == second.tabs[0].content()[0].data


def test_generic_dashboard_kpis(sample_vertical, sample_use_case):
    config = build_generic_dashboard(sample_vertical, sample_use_case, seed=3)
    titles = [k.title for k in config.kpis]
    assert titles == ["Uptime", "Latency", "SIA Score"]
    sia = config.kpis[-1]
    assert sia.value == 80
    assert sia.trend is Trend.STABLE
    assert config.tab_ids() == ["metrics", "sia", "capabilities"]

import pytest

from vertical_dashboards.models import DashboardConfig, Severity, ThemeMode
from vertical_dashboards.ui.components.kpi import build_kpi_card
from vertical_dashboards.ui.dashboard import UnknownTab, compose, initial_tab, switch_tab


def test_initial_tab_is_first_without_default(two_tab_config):
    assert initial_tab(two_tab_config) == "a"


def test_initial_tab_honours_default(two_tab_config):
    two_tab_config.default_tab = "b"
    assert initial_tab(two_tab_config) == "b"


def test_initial_tab_ignores_unknown_default(two_tab_config):
    two_tab_config.default_tab = "missing"
    assert initial_tab(two_tab_config) == "a"


def test_initial_tab_without_tabs():
    config = DashboardConfig(title="Empty", description="", kpis=[], tabs=[])
    assert initial_tab(config) is None
    composed = compose(config, ThemeMode.DARK)
    assert composed.active_tab is None
    assert composed.active is None
    assert composed.figures == []


def test_compose_only_runs_active_producer(two_tab_config, invocations):
    composed = compose(two_tab_config, ThemeMode.DARK)
    assert composed.active_tab == "a"
    assert len(composed.figures) == 1
    assert invocations == {"a": 1}


def test_switching_tabs_runs_new_producer_once(two_tab_config, invocations):
    current = initial_tab(two_tab_config)
    compose(two_tab_config, ThemeMode.DARK, current)

    current = switch_tab(two_tab_config, current, "b")
    composed = compose(two_tab_config, ThemeMode.DARK, current)

    assert composed.active_tab == "b"
    assert composed.active.label == "Tab B"
    assert invocations["b"] == 1
    assert invocations["a"] == 1


def test_switch_to_unknown_tab_raises(two_tab_config):
    with pytest.raises(UnknownTab):
        switch_tab(two_tab_config, "a", "zzz")


def test_compose_falls_back_for_stale_tab_id(two_tab_config, invocations):
    composed = compose(two_tab_config, ThemeMode.LIGHT, "gone")
    assert composed.active_tab == "a"
    assert invocations == {"a": 1}


def test_kpi_cards_are_colored_by_trend(two_tab_config):
    composed = compose(two_tab_config, ThemeMode.DARK)
    severities = [card.severity for card in composed.kpi_cards]
    assert severities == [Severity.HEALTHY, Severity.CRITICAL, Severity.WARNING]
    assert [card.arrow for card in composed.kpi_cards] == ["↑", "↓", "→"]


def test_kpi_card_displays(two_tab_config):
    up, down, flat = (build_kpi_card(kpi) for kpi in two_tab_config.kpis)
    assert up.value_display == "10"
    assert down.value_display == "5%"
    assert up.change_display == "↑ 2.5%"
    assert down.change_display == "↓ 1.0%"
    assert flat.change_display == "→ 0.0%"


def test_large_kpi_values_are_compacted(two_tab_config):
    kpi = two_tab_config.kpis[0]
    kpi.value = 2_450_000
    assert build_kpi_card(kpi).value_display == "2.5M"

from vertical_dashboards.ui.components.formatting import (
    MISSING,
    format_compact,
    format_metric_value,
    format_number,
    format_percent,
)


def test_format_number():
    assert format_number(1234567) == "1,234,567"
    assert format_number(3.14159, decimals=2) == "3.14"
    assert format_number(None) == MISSING
    assert format_number("n/a") == MISSING


def test_format_compact():
    assert format_compact(950) == "950"
    assert format_compact(12_300) == "12.3K"
    assert format_compact(4_000_000_000) == "4.0B"
    assert format_compact(None) == MISSING


def test_format_percent():
    assert format_percent(12.345) == "12.3%"
    assert format_percent(None) == MISSING


def test_format_metric_value():
    assert format_metric_value(97.25, "%") == "97.2%"
    assert format_metric_value(120, "ms") == "120.0 ms"
    assert format_metric_value(5, "") == "5.0"
    assert format_metric_value(None, "ms") == MISSING

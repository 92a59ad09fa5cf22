import pandas as pd
import pytest

from vertical_dashboards.models import ChartConfig, ChartType, ThemeMode, Visualization
from vertical_dashboards.ui.components.charts import (
    CHART_BUILDERS,
    UnsupportedChartType,
    metric_figure,
    render_chart,
)
from vertical_dashboards.ui.components.palette import CHART_COLORS

REGIONS = [
    {"region": "North", "anomalies": 12, "response": 3.2},
    {"region": "South", "anomalies": 8, "response": 2.8},
]


def _config(chart_type, **overrides):
    values = dict(
        type=chart_type,
        title="Regions",
        data=REGIONS,
        data_keys=["region", "anomalies", "response"],
    )
    values.update(overrides)
    return ChartConfig(**values)


def test_every_chart_type_has_a_builder():
    assert set(CHART_BUILDERS) == set(ChartType)


def test_unknown_chart_type_raises():
    with pytest.raises(UnsupportedChartType) as excinfo:
        render_chart(_config("heatmap"), ThemeMode.DARK)
    assert excinfo.value.chart_type == "heatmap"


def test_string_tags_are_accepted():
    fig = render_chart(_config("bar"), ThemeMode.LIGHT)
    assert [trace.type for trace in fig.data] == ["bar", "bar"]


def test_one_trace_per_series_with_palette_colors():
    fig = render_chart(_config(ChartType.LINE), ThemeMode.DARK)
    assert [trace.name for trace in fig.data] == ["anomalies", "response"]
    assert fig.data[0].line.color == CHART_COLORS[0]
    assert fig.data[1].line.color == CHART_COLORS[1]


def test_configured_colors_win():
    fig = render_chart(_config(ChartType.BAR, colors=["#123456"]), ThemeMode.DARK)
    assert fig.data[0].marker.color == "#123456"
    assert fig.data[1].marker.color == CHART_COLORS[1]


def test_layout_follows_config_and_theme():
    fig = render_chart(_config(ChartType.AREA, height=420, show_legend=True), ThemeMode.DARK)
    assert fig.layout.height == 420
    assert fig.layout.showlegend is True
    assert fig.layout.title.text == "Regions"
    assert fig.data[0].fill == "tozeroy"


def test_pie_uses_name_labels():
    config = ChartConfig(
        type=ChartType.PIE,
        title="Mix",
        data=[{"name": "Gas", "value": 42}, {"name": "Coal", "value": 28}],
        data_keys=["value"],
    )
    fig = render_chart(config, ThemeMode.DARK)
    assert len(fig.data) == 1
    assert list(fig.data[0].labels) == ["Gas", "Coal"]
    assert list(fig.data[0].values) == [42, 28]


def test_radar_uses_fixed_scale():
    config = ChartConfig(
        type=ChartType.RADAR,
        title="Scores",
        data=[{"axis": "Security", "score": 90}, {"axis": "Accuracy", "score": 80}],
        data_keys=["axis", "score"],
    )
    fig = render_chart(config, ThemeMode.DARK)
    assert fig.data[0].type == "scatterpolar"
    assert tuple(fig.layout.polar.radialaxis.range) == (0, 100)


def test_composed_secondary_axis():
    config = _config(
        ChartType.COMPOSED,
        series_kinds={"anomalies": "bar", "response": "line"},
        secondary_axis=["response"],
    )
    fig = render_chart(config, ThemeMode.DARK)
    assert [trace.type for trace in fig.data] == ["bar", "scatter"]
    assert fig.data[0].yaxis == "y"
    assert fig.data[1].yaxis == "y2"


def test_composed_rejects_unknown_series_kind():
    config = _config(ChartType.COMPOSED, series_kinds={"anomalies": "candle"})
    with pytest.raises(UnsupportedChartType):
        render_chart(config, ThemeMode.DARK)


def test_missing_data_keys_default_to_name_field():
    config = ChartConfig(
        type=ChartType.BAR,
        title="Defaults",
        data=[{"name": "a", "value": 1, "other": 2}],
    )
    fig = render_chart(config, ThemeMode.DARK)
    assert [trace.name for trace in fig.data] == ["value", "other"]


def _readings(values):
    return pd.DataFrame(
        {
            "metric_id": "uptime",
            "timestamp": pd.date_range("2024-01-01", periods=len(values), freq="D", tz="UTC"),
            "value": values,
        }
    )


def test_metric_figure_gauge(uptime_metric):
    fig = metric_figure(uptime_metric, _readings([97.0, 91.5]), ThemeMode.DARK)
    assert fig.data[0].type == "indicator"
    assert fig.data[0].value == 91.5
    assert len(fig.data[0].gauge.steps) == 3


def test_metric_figure_line(latency_metric):
    assert latency_metric.visualization is Visualization.LINE
    fig = metric_figure(latency_metric, _readings([10.0, 12.0, 14.0]), ThemeMode.LIGHT)
    assert fig.data[0].type == "scatter"
    assert list(fig.data[0].y) == [10.0, 12.0, 14.0]


def test_metric_figure_without_readings(uptime_metric):
    fig = metric_figure(uptime_metric, pd.DataFrame(), ThemeMode.DARK)
    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == "No data available"

"""
Plotly chart dispatcher with consistent, theme-aware styling for every dashboard.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
import plotly.graph_objects as go
import streamlit as st
from plotly.subplots import make_subplots

from vertical_dashboards.models import ChartConfig, ChartType, MetricConfig, Severity, ThemeMode, Visualization
from vertical_dashboards.thresholds import classify_metric, severity_color, threshold_bands
from vertical_dashboards.ui.components.palette import series_colors
from vertical_dashboards.ui.components.theme import ThemeStyle, style_for


DEFAULT_HEIGHT = 300
DEFAULT_CATEGORY_KEY = "name"
DEFAULT_VALUE_KEY = "value"
PIE_REMAINDER_COLOR = "#374151"
COMPOSED_SERIES_KINDS = ("bar", "line", "area")


class UnsupportedChartType(ValueError):
    def __init__(self, chart_type: object) -> None:
        self.chart_type = chart_type
        super().__init__(f"Unsupported chart type: {chart_type!r}")


def _resolve_type(value: object) -> ChartType:
    if isinstance(value, ChartType):
        return value
    try:
        return ChartType(str(value))
    except ValueError:
        raise UnsupportedChartType(value) from None


def _category_and_series(config: ChartConfig) -> Tuple[str, List[str]]:
    if config.data_keys:
        return config.data_keys[0], list(config.data_keys[1:])
    first = config.data[0] if config.data else {}
    return DEFAULT_CATEGORY_KEY, [key for key in first if key != DEFAULT_CATEGORY_KEY]


def _frame(config: ChartConfig, columns: Sequence[str]) -> pd.DataFrame:
    frame = pd.DataFrame(list(config.data))
    return frame.reindex(columns=list(columns))


def _hex_to_rgba(color: str, alpha: float) -> str:
    value = color.lstrip("#")
    if len(value) != 6:
        return color
    red, green, blue = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"


def _bar(config: ChartConfig) -> go.Figure:
    x_key, series = _category_and_series(config)
    frame = _frame(config, [x_key, *series])
    colors = series_colors(config.colors, len(series))
    fig = go.Figure()
    for key, color in zip(series, colors):
        fig.add_trace(go.Bar(x=frame[x_key], y=frame[key], name=key, marker_color=color))
    fig.update_layout(barmode="group")
    return fig


def _line(config: ChartConfig) -> go.Figure:
    x_key, series = _category_and_series(config)
    frame = _frame(config, [x_key, *series])
    colors = series_colors(config.colors, len(series))
    fig = go.Figure()
    for key, color in zip(series, colors):
        fig.add_trace(
            go.Scatter(
                x=frame[x_key],
                y=frame[key],
                name=key,
                mode="lines+markers",
                line=dict(color=color, width=2, shape="spline"),
                marker=dict(size=6),
            )
        )
    return fig


def _area(config: ChartConfig) -> go.Figure:
    x_key, series = _category_and_series(config)
    frame = _frame(config, [x_key, *series])
    colors = series_colors(config.colors, len(series))
    fig = go.Figure()
    for key, color in zip(series, colors):
        fig.add_trace(
            go.Scatter(
                x=frame[x_key],
                y=frame[key],
                name=key,
                mode="lines",
                fill="tozeroy",
                line=dict(color=color, shape="spline"),
                fillcolor=_hex_to_rgba(color, 0.6),
            )
        )
    return fig


def _pie(config: ChartConfig) -> go.Figure:
    value_key = config.data_keys[0] if config.data_keys else DEFAULT_VALUE_KEY
    first = config.data[0] if config.data else {}
    if DEFAULT_CATEGORY_KEY in first:
        label_key = DEFAULT_CATEGORY_KEY
    else:
        label_key = next((key for key in first if key != value_key), DEFAULT_CATEGORY_KEY)
    frame = _frame(config, [label_key, value_key])
    colors = series_colors(config.colors, len(frame))
    fig = go.Figure(
        go.Pie(
            labels=frame[label_key],
            values=frame[value_key],
            marker=dict(colors=colors),
            textinfo="label+value",
            sort=False,
        )
    )
    return fig


def _radar(config: ChartConfig) -> go.Figure:
    # Series are expected on a common 0-100 scale; values are not rescaled.
    axis_key, series = _category_and_series(config)
    frame = _frame(config, [axis_key, *series])
    colors = series_colors(config.colors, len(series))
    fig = go.Figure()
    for key, color in zip(series, colors):
        fig.add_trace(
            go.Scatterpolar(
                r=frame[key],
                theta=frame[axis_key],
                name=key,
                fill="toself",
                line=dict(color=color),
                fillcolor=_hex_to_rgba(color, 0.6),
            )
        )
    fig.update_layout(polar=dict(radialaxis=dict(range=[0, 100])))
    return fig


def _scatter(config: ChartConfig) -> go.Figure:
    x_key, series = _category_and_series(config)
    frame = _frame(config, [x_key, *series])
    colors = series_colors(config.colors, len(series))
    fig = go.Figure()
    for key, color in zip(series, colors):
        fig.add_trace(
            go.Scatter(
                x=frame[x_key],
                y=frame[key],
                name=key,
                mode="markers",
                marker=dict(color=color, size=9, opacity=0.8),
            )
        )
    return fig


def _composed_kind(config: ChartConfig, key: str, position: int) -> str:
    kind = config.series_kinds.get(key) or ("bar" if position == 0 else "line")
    if kind not in COMPOSED_SERIES_KINDS:
        raise UnsupportedChartType(kind)
    return kind


def _composed(config: ChartConfig) -> go.Figure:
    x_key, series = _category_and_series(config)
    frame = _frame(config, [x_key, *series])
    colors = series_colors(config.colors, len(series))
    secondary = set(config.secondary_axis)
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    for position, (key, color) in enumerate(zip(series, colors)):
        kind = _composed_kind(config, key, position)
        if kind == "bar":
            trace = go.Bar(x=frame[x_key], y=frame[key], name=key, marker_color=color)
        elif kind == "area":
            trace = go.Scatter(
                x=frame[x_key],
                y=frame[key],
                name=key,
                mode="lines",
                fill="tozeroy",
                line=dict(color=color),
                fillcolor=_hex_to_rgba(color, 0.4),
            )
        else:
            trace = go.Scatter(
                x=frame[x_key],
                y=frame[key],
                name=key,
                mode="lines+markers",
                line=dict(color=color, width=2),
            )
        fig.add_trace(trace, row=1, col=1, secondary_y=key in secondary)
    return fig


ChartBuilder = Callable[[ChartConfig], go.Figure]

CHART_BUILDERS: Dict[ChartType, ChartBuilder] = {
    ChartType.BAR: _bar,
    ChartType.LINE: _line,
    ChartType.AREA: _area,
    ChartType.PIE: _pie,
    ChartType.RADAR: _radar,
    ChartType.SCATTER: _scatter,
    ChartType.COMPOSED: _composed,
}

_missing_builders = set(ChartType) - set(CHART_BUILDERS)
if _missing_builders:
    raise RuntimeError(f"No chart builder registered for: {sorted(t.value for t in _missing_builders)}")


def _configure_layout(
    fig: go.Figure,
    style: ThemeStyle,
    title: Optional[str] = None,
    height: int = DEFAULT_HEIGHT,
    show_legend: bool = False,
) -> go.Figure:
    fig.update_layout(
        template=style.template,
        title=title or None,
        height=height,
        autosize=True,
        showlegend=show_legend,
        hovermode="x unified",
        margin=dict(l=40, r=20, t=60 if title else 30, b=40),
        paper_bgcolor=style.paper_color,
        plot_bgcolor=style.plot_color,
        font=dict(color=style.font_color),
    )
    fig.update_xaxes(showgrid=False, linecolor=style.axis_color, tickfont=dict(color=style.axis_color))
    fig.update_yaxes(
        showgrid=True,
        gridcolor=style.grid_color,
        linecolor=style.axis_color,
        tickfont=dict(color=style.axis_color),
    )
    fig.update_polars(
        radialaxis=dict(gridcolor=style.grid_color, linecolor=style.axis_color),
        angularaxis=dict(gridcolor=style.grid_color, linecolor=style.axis_color),
    )
    return fig


def render_chart(config: ChartConfig, theme: ThemeMode) -> go.Figure:
    """Build the figure for ``config``; raises ``UnsupportedChartType`` for unknown tags."""
    chart_type = _resolve_type(config.type)
    fig = CHART_BUILDERS[chart_type](config)
    return _configure_layout(
        fig,
        style_for(theme),
        title=config.title,
        height=config.height or DEFAULT_HEIGHT,
        show_legend=config.show_legend,
    )


def empty_figure(title: str, theme: ThemeMode, message: str = "No data available") -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper")
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    return _configure_layout(fig, style_for(theme), title=title)


def _gauge_range(metric: MetricConfig, value: float) -> Tuple[float, float]:
    if metric.unit == "%":
        return 0.0, 100.0
    upper = max(value, metric.threshold.warning, metric.threshold.critical) * 1.25
    return 0.0, upper or 1.0


def metric_gauge(metric: MetricConfig, value: float, theme: ThemeMode) -> go.Figure:
    severity = classify_metric(metric, value)
    lower, upper = _gauge_range(metric, value)
    steps = [
        dict(range=[start, end], color=_hex_to_rgba(severity_color(band), 0.25))
        for start, end, band in threshold_bands(metric, lower, upper)
    ]
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=value,
            number=dict(suffix=metric.unit if metric.unit == "%" else f" {metric.unit}"),
            gauge=dict(
                axis=dict(range=[lower, upper]),
                bar=dict(color=severity_color(severity)),
                steps=steps,
                threshold=dict(
                    line=dict(color=severity_color(Severity.CRITICAL), width=3),
                    value=metric.threshold.critical,
                ),
            ),
        )
    )
    return _configure_layout(fig, style_for(theme), title=metric.name)


def metric_figure(metric: MetricConfig, readings: pd.DataFrame, theme: ThemeMode) -> go.Figure:
    """Visualize one metric's readings according to its visualization tag."""
    if readings.empty or "value" not in readings:
        return empty_figure(metric.name, theme)

    ordered = readings.sort_values("timestamp") if "timestamp" in readings else readings
    latest = float(ordered["value"].iloc[-1])
    color = severity_color(classify_metric(metric, latest))

    if metric.visualization is Visualization.GAUGE:
        return metric_gauge(metric, latest, theme)

    if metric.visualization is Visualization.PIE:
        config = ChartConfig(
            type=ChartType.PIE,
            title=metric.name,
            data=[
                {"name": metric.name, "value": latest},
                {"name": "Remainder", "value": max(100.0 - latest, 0.0)},
            ],
            data_keys=["value"],
            colors=[color, PIE_REMAINDER_COLOR],
            show_legend=True,
        )
        return render_chart(config, theme)

    records: List[Mapping[str, object]] = [
        {"date": pd.Timestamp(ts).strftime("%b %d"), metric.name: float(val)}
        for ts, val in zip(ordered.get("timestamp", ordered.index), ordered["value"])
    ]
    config = ChartConfig(
        type=ChartType(metric.visualization.value),
        title=metric.name,
        data=records,
        data_keys=["date", metric.name],
        colors=[color],
    )
    return render_chart(config, theme)


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def show_chart(config: ChartConfig, theme: ThemeMode) -> None:
    render_plotly(render_chart(config, theme))

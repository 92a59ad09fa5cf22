from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from vertical_dashboards.models import Kpi, Severity, Trend
from vertical_dashboards.thresholds import severity_color, trend_severity
from vertical_dashboards.ui.components.formatting import format_compact, format_number

COMPACT_FROM = 100_000

TREND_ARROWS = {
    Trend.UP: "↑",
    Trend.DOWN: "↓",
    Trend.STABLE: "→",
}

# st.metric draws its own arrow and colors the delta by sign when delta_color="normal".
_DELTA_SIGN = {
    Severity.HEALTHY: "",
    Severity.CRITICAL: "-",
}


@dataclass(frozen=True)
class KpiCardView:
    kpi: Kpi
    severity: Severity
    color: str
    arrow: str

    @property
    def value_display(self) -> str:
        if isinstance(self.kpi.value, str):
            return self.kpi.value
        value = float(self.kpi.value)
        if abs(value) >= COMPACT_FROM:
            return format_compact(value)
        return format_number(value, decimals=0 if value.is_integer() else 1)

    @property
    def change_display(self) -> str:
        return f"{self.arrow} {abs(self.kpi.change):.1f}%"


def build_kpi_card(kpi: Kpi) -> KpiCardView:
    severity = trend_severity(kpi.trend)
    return KpiCardView(
        kpi=kpi,
        severity=severity,
        color=severity_color(severity),
        arrow=TREND_ARROWS[kpi.trend],
    )


def _metric_delta(card: KpiCardView) -> tuple[str, str]:
    sign = _DELTA_SIGN.get(card.severity)
    if sign is None:
        return card.change_display, "off"
    return f"{sign}{abs(card.kpi.change):.1f}%", "normal"


def render_kpi_cards(cards: Sequence[KpiCardView], columns: int = 4, help_text: Optional[str] = None) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No KPIs available for the current selection.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                delta, delta_color = _metric_delta(card)
                st.metric(
                    label=card.kpi.title,
                    value=card.value_display,
                    delta=delta,
                    delta_color=delta_color,
                    help=help_text,
                )

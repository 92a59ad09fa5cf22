"""
Theme-dependent styling shared by every chart variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from vertical_dashboards.models import ThemeMode


@dataclass(frozen=True)
class ThemeStyle:
    template: str
    axis_color: str
    grid_color: str
    font_color: str
    paper_color: str
    plot_color: str


THEME_STYLES = {
    ThemeMode.LIGHT: ThemeStyle(
        template="plotly_white",
        axis_color="#4B5563",
        grid_color="rgba(0, 0, 0, 0.08)",
        font_color="#111827",
        paper_color="rgba(0, 0, 0, 0)",
        plot_color="rgba(0, 0, 0, 0)",
    ),
    ThemeMode.DARK: ThemeStyle(
        template="plotly_dark",
        axis_color="#9CA3AF",
        grid_color="rgba(255, 215, 0, 0.1)",
        font_color="#F9FAFB",
        paper_color="rgba(0, 0, 0, 0)",
        plot_color="rgba(0, 0, 0, 0)",
    ),
}


def style_for(theme: ThemeMode) -> ThemeStyle:
    return THEME_STYLES[theme]


def parse_theme(value: Union[str, ThemeMode, None], default: ThemeMode = ThemeMode.DARK) -> ThemeMode:
    """Parse a persisted ``"dark"``/``"light"`` preference, falling back to ``default``."""
    if isinstance(value, ThemeMode):
        return value
    if value is None:
        return default
    try:
        return ThemeMode(str(value).strip().lower())
    except ValueError:
        return default


def toggle(theme: ThemeMode) -> ThemeMode:
    return ThemeMode.LIGHT if theme is ThemeMode.DARK else ThemeMode.DARK


def opposite_label(theme: Optional[ThemeMode]) -> str:
    return "Light mode" if theme is ThemeMode.DARK else "Dark mode"

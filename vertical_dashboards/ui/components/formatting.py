"""
Utility helpers for formatting numeric values, metric units, and percentages.
"""

from __future__ import annotations

from typing import Optional

SCALE_FACTORS = [
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]

MISSING = "–"


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return MISSING
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return MISSING


def _scale_value(value: float):
    for factor, suffix in SCALE_FACTORS:
        if abs(value) >= factor:
            return value / factor, suffix
    return value, ""


def format_compact(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return MISSING
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return MISSING
    display_value, suffix = _scale_value(numeric)
    if not suffix:
        decimals = 0 if numeric.is_integer() else decimals
    return f"{display_value:,.{decimals}f}{suffix}"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return MISSING
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return MISSING


def format_metric_value(value: Optional[float], unit: str, decimals: int = 1) -> str:
    if unit == "%":
        return format_percent(value, decimals)
    formatted = format_number(value, decimals)
    if formatted == MISSING or not unit:
        return formatted
    return f"{formatted} {unit}"

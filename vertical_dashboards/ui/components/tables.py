"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from vertical_dashboards.models import Severity
from vertical_dashboards.thresholds import severity_color
from vertical_dashboards.ui.components.formatting import format_number, format_percent


def _severity_style(val: object) -> str:
    try:
        severity = Severity(str(val).lower())
    except ValueError:
        return ""
    return f"color: {severity_color(severity)}; font-weight: 600;"


def format_columns(df: pd.DataFrame, column_config: Optional[Dict[str, Dict[str, str]]] = None) -> pd.DataFrame:
    formatted_df = df.copy()
    for column, config in (column_config or {}).items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        decimals = int(config.get("decimals", 1 if fmt_type == "percent" else 0))
        if fmt_type == "percent":
            formatted_df[column] = formatted_df[column].apply(lambda v: format_percent(v, decimals=decimals))
        elif fmt_type == "number":
            formatted_df[column] = formatted_df[column].apply(lambda v: format_number(v, decimals=decimals))
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
    export_file_name: Optional[str] = None,
    severity_cols: Optional[List[str]] = None,
) -> None:
    """Render ``df`` with formatted columns; severity columns are colored by tier."""
    if df.empty:
        st.info("No rows to display.")
        return

    formatted_df = format_columns(df, column_config)
    dataframe_obj = formatted_df
    severity_cols = [col for col in (severity_cols or []) if col in formatted_df.columns]
    if severity_cols:
        dataframe_obj = formatted_df.style.map(_severity_style, subset=severity_cols)

    kwargs = {"height": height} if height else {}
    st.dataframe(
        dataframe_obj,
        use_container_width=True,
        hide_index=not show_index,
        **kwargs,
    )

    if export_file_name:
        csv_bytes = df.to_csv(index=show_index).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
        )

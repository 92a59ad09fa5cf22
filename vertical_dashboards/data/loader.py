"""
Live metric readings from a Google Sheet, with seeded mock readings as fallback.

The sheet holds one row per reading with the columns ``vertical_id``,
``metric_id``, ``timestamp`` and ``value``. Several worksheet tabs may be
listed; their rows are concatenated.
"""

from __future__ import annotations

import logging
import os
from typing import List, Set, Tuple

import gspread
import pandas as pd
import streamlit as st
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials

from vertical_dashboards.config import Settings
from vertical_dashboards.data.generators import READING_COLUMNS, SeedLike, generate_metric_readings
from vertical_dashboards.data.results import Err, Ok, Result
from vertical_dashboards.models import VerticalModule

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
]

SENTINELS: Set[str] = {"", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-"}


def empty_readings() -> pd.DataFrame:
    return pd.DataFrame(columns=READING_COLUMNS)


def _normalize_readings(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce sheet rows into the reading schema and drop rows that cannot be used.

    Adds ``df.attrs['dropped_rows']`` with the number of discarded rows.
    """
    if df.empty:
        return empty_readings()

    df = df.rename(columns=lambda c: str(c).strip().lower())
    missing = [col for col in READING_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Readings sheet is missing columns: {missing}")

    df = df[READING_COLUMNS].copy()
    for col in ("vertical_id", "metric_id"):
        df[col] = df[col].astype(str).str.strip()
        df.loc[df[col].isin(SENTINELS), col] = None
    df["timestamp"] = pd.to_datetime(df["timestamp"], errors="coerce", utc=True)
    df["value"] = pd.to_numeric(df["value"], errors="coerce")

    before = len(df)
    df = df.dropna(subset=READING_COLUMNS).reset_index(drop=True)
    df.attrs["dropped_rows"] = before - len(df)
    if df.attrs["dropped_rows"]:
        logger.warning("Dropped %d unusable reading rows", df.attrs["dropped_rows"])
    return df


@st.cache_data(show_spinner=False, ttl=600)
def _load_readings_impl(spreadsheet_id: str, sheet_names: Tuple[str, ...], service_account_file: str) -> pd.DataFrame:
    """Load readings from one or more sheet tabs.
    Cached by spreadsheet_id, sheet_names, and service_account_file.
    """
    credentials = Credentials.from_service_account_file(service_account_file, scopes=SCOPES)
    client = gspread.authorize(credentials)
    ss = client.open_by_key(spreadsheet_id)

    frames: List[pd.DataFrame] = []
    for name in sheet_names:
        rows = ss.worksheet(name).get_all_records()
        frame = pd.DataFrame(rows)
        if frame.empty:
            continue
        frames.append(frame)

    if not frames:
        return empty_readings()
    return _normalize_readings(pd.concat(frames, ignore_index=True, sort=False))


def load_metric_readings(settings: Settings) -> Result[pd.DataFrame]:
    """Read live readings; ``Err`` (with an empty frame) when unconfigured or failing."""
    if not settings.sheet_enabled:
        return Err("SPREADSHEET_ID is not configured", empty_readings())

    if not os.path.exists(settings.credentials):
        reason = f"Service account file not found: {settings.credentials}"
        logger.error(reason)
        return Err(reason, empty_readings())

    try:
        df = _load_readings_impl(settings.spreadsheet_id, tuple(settings.sheet_names), settings.credentials)
    except (gspread.exceptions.GSpreadException, GoogleAuthError, OSError, ValueError) as exc:
        logger.error("Loading metric readings failed: %s", exc)
        return Err(str(exc), empty_readings())

    logger.info("Loaded %d metric readings from %d sheet(s)", len(df), len(settings.sheet_names))
    return Ok(df)


def clear_cache() -> None:
    _load_readings_impl.clear()  # type: ignore[attr-defined]


def readings_for_vertical(
    result: Result[pd.DataFrame],
    vertical: VerticalModule,
    days: int = 30,
    seed: SeedLike = None,
) -> Result[pd.DataFrame]:
    """Live readings of ``vertical`` when available, otherwise ``Err`` carrying generated readings."""
    if isinstance(result, Ok):
        live = result.value
        live = live[live["vertical_id"].str.lower() == vertical.id.lower()] if not live.empty else live
        if not live.empty:
            return Ok(live.reset_index(drop=True))
        reason = f"No live readings for vertical '{vertical.id}'"
    else:
        reason = result.reason

    logger.warning("Using generated readings for %s: %s", vertical.id, reason)
    return Err(reason, generate_metric_readings(vertical, days=days, seed=seed))

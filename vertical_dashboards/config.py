"""
Application-wide configuration: runtime settings and the ordered page sections.

Settings are resolved from environment variables first, then ``st.secrets``,
then defaults. Call ``bootstrap_env.ensure_env()`` beforehand so a local
``.env`` file is visible too.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from vertical_dashboards.bootstrap_env import read_secrets
from vertical_dashboards.models import ThemeMode

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAMES: Tuple[str, ...] = ("Metric_Readings",)
DEFAULT_CREDENTIALS = "google-credentials.json"
DEFAULT_TIMEOUT = 10.0
DEFAULT_SEED = 42
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SectionConfig:
    key: str
    label: str


# Ordered top-level pages of the application
SECTIONS: List[SectionConfig] = [
    SectionConfig("catalog", "Vertical Catalog"),
    SectionConfig("metric_health", "Metric Health"),
    SectionConfig("use_case_dashboard", "Use-Case Dashboard"),
    SectionConfig("governance", "Compliance & Audit"),
]


@dataclass(frozen=True)
class Settings:
    api_base_url: Optional[str] = None
    api_timeout: float = DEFAULT_TIMEOUT
    spreadsheet_id: Optional[str] = None
    sheet_names: Tuple[str, ...] = DEFAULT_SHEET_NAMES
    credentials: str = DEFAULT_CREDENTIALS
    default_theme: ThemeMode = ThemeMode.DARK
    log_level: str = "INFO"
    mock_seed: int = DEFAULT_SEED

    @property
    def api_enabled(self) -> bool:
        return bool(self.api_base_url)

    @property
    def sheet_enabled(self) -> bool:
        return bool(self.spreadsheet_id)


def _get_secret(
    name: str,
    default: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    secrets: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    """Try env first, then st.secrets."""
    environ = os.environ if environ is None else environ
    val = environ.get(name)
    if val:
        return val
    if secrets:
        raw = secrets.get(name)
        if raw is not None and str(raw).strip():
            return str(raw)
    return default


def _parse_list(raw: Any) -> Optional[List[str]]:
    """Accepts a TOML array, a JSON array string, or a comma-separated string."""
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        items = [str(x).strip() for x in raw]
        return [x for x in items if x] or None
    text = str(raw).strip()
    if not text:
        return None
    if text.startswith("[") and text.endswith("]"):
        try:
            items = [str(x).strip() for x in json.loads(text)]
            return [x for x in items if x] or None
        except ValueError:
            logger.warning("Could not parse list value %r as JSON; treating it as text", text)
    if "," in text:
        return [item.strip() for item in text.split(",") if item.strip()] or None
    return [text]


def _get_list_secret(
    name: str,
    fallback_name: Optional[str] = None,
    default: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    secrets: Optional[Mapping[str, Any]] = None,
) -> Optional[List[str]]:
    """Get a list-like setting from env or st.secrets, checking ``fallback_name`` next."""
    environ = os.environ if environ is None else environ
    for key in filter(None, (name, fallback_name)):
        values = _parse_list(environ.get(key))
        if values:
            return values
        if secrets:
            values = _parse_list(secrets.get(key))
            if values:
                return values
    return default


def _parse_float(name: str, raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using default %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s must be positive, got %r; using default %s", name, raw, default)
        return default
    return value


def _parse_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using default %s", name, raw, default)
        return default


def _parse_theme(raw: Optional[str]) -> ThemeMode:
    if raw is None:
        return ThemeMode.DARK
    try:
        return ThemeMode(raw.strip().lower())
    except ValueError:
        logger.warning("Unknown VD_DEFAULT_THEME=%r; using dark", raw)
        return ThemeMode.DARK


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None:
        return "INFO"
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown VD_LOG_LEVEL=%r; using INFO", raw)
        return "INFO"
    return level


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    secrets: Optional[Mapping[str, Any]] = None,
) -> Settings:
    """Resolve the application settings.

    ``environ`` defaults to ``os.environ`` and ``secrets`` to ``st.secrets``
    when they are not passed explicitly.
    """
    if secrets is None:
        secrets = read_secrets() or {}

    def get(name: str, default: Optional[str] = None) -> Optional[str]:
        return _get_secret(name, default, environ=environ, secrets=secrets)

    base_url = get("VD_API_BASE_URL")
    sheet_names = _get_list_secret(
        "SHEET_NAMES",
        fallback_name="SHEET_NAME",
        default=list(DEFAULT_SHEET_NAMES),
        environ=environ,
        secrets=secrets,
    )
    return Settings(
        api_base_url=base_url.rstrip("/") if base_url else None,
        api_timeout=_parse_float("VD_API_TIMEOUT", get("VD_API_TIMEOUT"), DEFAULT_TIMEOUT),
        spreadsheet_id=get("SPREADSHEET_ID"),
        sheet_names=tuple(sheet_names or DEFAULT_SHEET_NAMES),
        credentials=get("GOOGLE_APPLICATION_CREDENTIALS", DEFAULT_CREDENTIALS) or DEFAULT_CREDENTIALS,
        default_theme=_parse_theme(get("VD_DEFAULT_THEME")),
        log_level=_parse_log_level(get("VD_LOG_LEVEL")),
        mock_seed=_parse_int("VD_MOCK_SEED", get("VD_MOCK_SEED"), DEFAULT_SEED),
    )

"""
Environment bootstrap for local runs and Streamlit Cloud.

Secrets are copied into ``os.environ`` (nested tables become ``TABLE_KEY``),
inline service account JSON is written to a temp file that
``GOOGLE_APPLICATION_CREDENTIALS`` then points at, and a local ``.env`` is
loaded last without overriding anything already set.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from typing import Any, Iterator, Mapping, Optional, Tuple

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CREDENTIALS_FILENAME = "vd-google-credentials.json"


def _sanitize_key(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(val, Mapping):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def read_secrets() -> Optional[Mapping[str, Any]]:
    # st.secrets raises when no secrets.toml exists outside Streamlit Cloud.
    try:
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return None
        return secrets.to_dict()
    except (FileNotFoundError, AttributeError, KeyError):
        return None
    except Exception as exc:
        logger.debug("st.secrets unavailable: %s", exc)
        return None


def _bridge_secrets_to_env(secrets: Optional[Mapping[str, Any]]) -> None:
    if not secrets:
        return
    for key, value in secrets.items():
        if isinstance(value, Mapping):
            for flat_k, flat_v in _flatten_secrets(key, value):
                os.environ.setdefault(flat_k, flat_v)
        else:
            os.environ.setdefault(_sanitize_key(key), str(value))


def _credentials_json(secrets: Optional[Mapping[str, Any]], existing: Optional[str]) -> Optional[str]:
    if existing:
        try:
            json.loads(existing)
            return existing
        except ValueError:
            pass
    if not secrets:
        return None
    creds = secrets.get("GOOGLE_CREDENTIALS_JSON")
    if not creds:
        return None
    if isinstance(creds, Mapping):
        return json.dumps(dict(creds))
    try:
        json.loads(str(creds))
    except ValueError:
        logger.warning("GOOGLE_CREDENTIALS_JSON is not valid JSON; ignoring it")
        return None
    return str(creds)


def _materialize_google_credentials(secrets: Optional[Mapping[str, Any]]) -> None:
    """Write inline service account JSON to a temp file when no credentials file exists."""
    existing = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if existing and os.path.exists(existing):
        return

    json_text = _credentials_json(secrets, existing)
    if not json_text:
        return
    path = os.path.join(tempfile.gettempdir(), CREDENTIALS_FILENAME)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json_text)
    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = path


def ensure_env() -> None:
    """Populate env vars and service account credentials; repeated calls are no-ops."""
    secrets = read_secrets()
    _bridge_secrets_to_env(secrets)
    _materialize_google_credentials(secrets)
    # load_dotenv does not override existing env vars by default
    load_dotenv()

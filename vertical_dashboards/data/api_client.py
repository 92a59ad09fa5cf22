"""
HTTP client for the read endpoints behind the agent, action-queue, compliance
and audit-log panels.

Requests are issued once: there is no retry and no backoff. Failures are
classified (network vs validation vs server vs rate limit) and raised as
``ApiClientError``; ``fetch_or_fallback`` turns them into ``Err`` results.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

import requests

from vertical_dashboards.data.results import Err, Ok, Result
from vertical_dashboards.models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXPORT_FORMATS = ("csv", "pdf")


class ApiClientError(Exception):
    """Raised for any failed request against the dashboard API."""

    def __init__(self, status_code: Optional[int] = None, message: str = "", error_type: str = "unknown"):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type  # "network", "validation", "server", "rate_limit", "unknown"
        super().__init__(f"ApiClientError[{error_type}]: {status_code} - {message}")


def _classify_error(status_code: Optional[int]) -> str:
    if status_code is None:
        return "network"
    if status_code == 429:
        return "rate_limit"
    if 400 <= status_code < 500:
        return "validation"
    if 500 <= status_code < 600:
        return "server"
    return "unknown"


def _extract_error_message(response: Optional[requests.Response], default: str) -> str:
    if response is None:
        return default
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            payload = response.json()
        except ValueError:
            return response.text or default
        if isinstance(payload, dict):
            for key in ("message", "error", "detail"):
                if key in payload:
                    return str(payload[key])
        return str(payload)
    return response.text or default


def _clean_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None and value != ""}


class ApiClient:
    """Thin wrapper over ``requests.Session`` for the dashboard read endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, path: str, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=_clean_params(params or {}), timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            error_type = _classify_error(status_code)
            message = _extract_error_message(e.response, str(e))
            logger.error("GET %s failed with status %s (%s): %s", url, status_code, error_type, message)
            raise ApiClientError(status_code, message, error_type) from e
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error("GET %s network error: %s", url, e)
            raise ApiClientError(message=f"Network error: {e}", error_type="network") from e
        except requests.RequestException as e:
            logger.error("GET %s failed: %s", url, e)
            raise ApiClientError(message=str(e), error_type="unknown") from e

    def _get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        response = self._request(path, params)
        try:
            return response.json()
        except ValueError as e:
            raise ApiClientError(response.status_code, "Response is not valid JSON", "server") from e

    def get_lease(self, lease_id: str) -> Dict[str, Any]:
        return self._get_json(f"/v2/agents/vanguards/lease/{lease_id}")

    def get_action_queue(self) -> Any:
        return self._get_json("/v2/actions/queue")

    def get_compliance_analytics(self, time_range: str = "30d", framework: Optional[str] = None) -> Dict[str, Any]:
        return self._get_json(
            "/api/analytics/compliance",
            {"timeRange": time_range, "framework": framework},
        )

    def get_audit_logs(self, page: int = 1, page_size: int = 25, **filters: Any) -> Page[Dict[str, Any]]:
        if page < 1 or page_size < 1:
            raise ValueError("page and page_size must be positive")
        payload = self._get_json(
            "/api/audit-logs",
            {"page": page, "pageSize": page_size, **filters},
        )
        return Page.from_payload(payload)

    def export_audit_logs(self, fmt: str = "csv", **filters: Any) -> bytes:
        """Download the filtered audit log as a CSV or PDF byte stream."""
        fmt = fmt.lower()
        if fmt not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {fmt!r}; expected one of {EXPORT_FORMATS}")
        response = self._request("/api/audit-logs/export", {"format": fmt, **filters})
        return response.content


def fetch_or_fallback(fetch: Callable[[], T], fallback: T, label: str = "fetch") -> Result[T]:
    """Run ``fetch`` and wrap the outcome; failures log and carry ``fallback``."""
    try:
        return Ok(fetch())
    except ApiClientError as exc:
        logger.error("%s failed (%s); using fallback data", label, exc)
        return Err(str(exc), fallback)
    except (ValueError, KeyError, TypeError) as exc:
        logger.error("%s returned unusable data (%s); using fallback data", label, exc)
        return Err(str(exc), fallback)

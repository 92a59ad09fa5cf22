"""
Background fetching for live panels.

Fetches run on a small thread pool. Each submission takes a fresh request id
for its channel; when it completes, its result is kept only if no newer
submission was issued for that channel in the meantime.

A feed belongs to one browser session (see ``session_feed``).
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from typing import Any, Callable, Dict, MutableMapping, Optional, TypeVar

from vertical_dashboards.data.api_client import fetch_or_fallback
from vertical_dashboards.data.results import Err, RequestTracker, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

SESSION_KEY = "vd_live_feed"
PENDING_REASON = "Request still loading"


class LiveFeed:
    def __init__(self, max_workers: int = 4, tracker: Optional[RequestTracker] = None):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="vd-live")
        self._tracker = tracker or RequestTracker()
        self._lock = threading.Lock()
        self._results: Dict[str, Result[Any]] = {}

    def submit(self, channel: str, fetch: Callable[[], T], fallback: T) -> "Future[Result[T]]":
        request_id = self._tracker.issue(channel)
        logger.debug("Submitting %s request #%d", channel, request_id)
        return self._executor.submit(self._run, channel, request_id, fetch, fallback)

    def _run(self, channel: str, request_id: int, fetch: Callable[[], T], fallback: T) -> Result[T]:
        try:
            result = fetch_or_fallback(fetch, fallback, label=channel)
        except Exception as exc:
            logger.exception("%s request #%d raised unexpectedly", channel, request_id)
            result = Err(str(exc), fallback)

        with self._lock:
            if not self._tracker.is_current(channel, request_id):
                logger.debug(
                    "Discarding stale %s response #%d (latest is #%d)",
                    channel,
                    request_id,
                    self._tracker.latest(channel),
                )
                return result
            self._results[channel] = result
        return result

    def latest(self, channel: str) -> Optional[Result[Any]]:
        with self._lock:
            return self._results.get(channel)

    @staticmethod
    def resolve(future: "Future[Result[T]]", fallback: T, timeout: Optional[float] = 0.0) -> Result[T]:
        """Result of this particular submission, or a pending ``Err`` if it has not finished.

        Unlike ``latest``, this never hands back a response from an earlier
        request on the same channel.
        """
        try:
            return future.result(timeout=timeout)
        except FutureTimeout:
            return Err(PENDING_REASON, fallback)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "LiveFeed":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()


def session_feed(state: MutableMapping[str, Any], key: str = SESSION_KEY, max_workers: int = 2) -> LiveFeed:
    """Return the feed stored in ``state``, creating it on first use.

    Pass ``st.session_state`` so each browser session gets its own tracker and
    result slots.
    """
    feed = state.get(key)
    if not isinstance(feed, LiveFeed):
        feed = LiveFeed(max_workers=max_workers)
        state[key] = feed
    return feed

"""
Explicit fetch results and out-of-order response guarding.

A fetch either succeeds (``Ok``) or fails with a reason and the static
fallback the caller should show instead (``Err``). Pages use ``is_ok`` to
decide whether to show a degraded-data banner.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[T]):
    reason: str
    fallback: T

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[T]]


def unwrap_or_fallback(result: Result[T]) -> T:
    if isinstance(result, Ok):
        return result.value
    return result.fallback


class RequestTracker:
    """Issues increasing request ids per channel.

    Only a response carrying the newest id of its channel may be applied;
    anything older is stale.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest: Dict[str, int] = {}

    def issue(self, channel: str) -> int:
        with self._lock:
            request_id = self._latest.get(channel, 0) + 1
            self._latest[channel] = request_id
            return request_id

    def is_current(self, channel: str, request_id: int) -> bool:
        with self._lock:
            return self._latest.get(channel) == request_id

    def latest(self, channel: str) -> int:
        with self._lock:
            return self._latest.get(channel, 0)

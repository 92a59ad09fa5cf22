import threading

from vertical_dashboards.data.api_client import ApiClientError
from vertical_dashboards.data.live import PENDING_REASON, LiveFeed, session_feed
from vertical_dashboards.data.results import Err, Ok, RequestTracker, unwrap_or_fallback


def test_unwrap_or_fallback():
    assert unwrap_or_fallback(Ok([1, 2])) == [1, 2]
    assert unwrap_or_fallback(Err("down", [])) == []
    assert Ok(1).is_ok
    assert not Err("down", 0).is_ok


def test_request_tracker_ids_are_per_channel():
    tracker = RequestTracker()
    first = tracker.issue("leases")
    second = tracker.issue("leases")
    other = tracker.issue("queue")

    assert second > first
    assert other == 1
    assert not tracker.is_current("leases", first)
    assert tracker.is_current("leases", second)
    assert tracker.latest("leases") == second
    assert tracker.latest("unknown") == 0


def test_live_feed_stores_result():
    with LiveFeed(max_workers=2) as feed:
        result = feed.submit("queue", lambda: {"items": [1]}, {}).result(timeout=5)
        assert result == Ok({"items": [1]})
        assert feed.latest("queue") == result
        assert feed.latest("other") is None


def test_live_feed_wraps_failures_with_fallback():
    def failing():
        raise ApiClientError(503, "unavailable", "server")

    with LiveFeed(max_workers=1) as feed:
        result = feed.submit("compliance", failing, {"overview": {}}).result(timeout=5)
    assert isinstance(result, Err)
    assert result.fallback == {"overview": {}}
    assert "unavailable" in result.reason


def test_live_feed_catches_unexpected_errors():
    def broken():
        raise RuntimeError("boom")

    with LiveFeed(max_workers=1) as feed:
        result = feed.submit("audit", broken, []).result(timeout=5)
    assert result == Err("boom", [])


def test_slow_stale_response_does_not_overwrite_newer_one():
    release = threading.Event()

    def slow():
        release.wait(timeout=5)
        return "stale"

    with LiveFeed(max_workers=2) as feed:
        slow_future = feed.submit("lease", slow, "fallback")
        fast_result = feed.submit("lease", lambda: "fresh", "fallback").result(timeout=5)
        assert feed.latest("lease") == fast_result

        release.set()
        slow_result = slow_future.result(timeout=5)

        assert slow_result == Ok("stale")
        assert feed.latest("lease") == Ok("fresh")


def test_session_feed_is_created_once_per_session():
    first, second = {}, {}
    try:
        feed = session_feed(first)
        assert session_feed(first) is feed
        assert session_feed(second) is not feed
    finally:
        for state in (first, second):
            state["vd_live_feed"].shutdown()


def test_sessions_do_not_see_each_others_responses():
    release = threading.Event()

    def slow_gdpr():
        release.wait(timeout=5)
        return {"framework": "GDPR"}

    session_a, session_b = {}, {}
    feed_a, feed_b = session_feed(session_a), session_feed(session_b)
    try:
        gdpr_future = feed_a.submit("compliance", slow_gdpr, {})
        feed_b.submit("compliance", lambda: {"framework": "SOX"}, {}).result(timeout=5)
        release.set()
        gdpr_future.result(timeout=5)

        assert feed_a.latest("compliance") == Ok({"framework": "GDPR"})
        assert feed_b.latest("compliance") == Ok({"framework": "SOX"})
    finally:
        feed_a.shutdown()
        feed_b.shutdown()


def test_resolve_reports_pending_instead_of_previous_response():
    release = threading.Event()

    def slow_sox():
        release.wait(timeout=5)
        return {"framework": "SOX"}

    with LiveFeed(max_workers=2) as feed:
        feed.submit("compliance", lambda: {"framework": "GDPR"}, {}).result(timeout=5)
        sox_future = feed.submit("compliance", slow_sox, {"overview": {}})

        pending = feed.resolve(sox_future, {"overview": {}}, timeout=0.1)
        assert pending == Err(PENDING_REASON, {"overview": {}})
        assert feed.latest("compliance") == Ok({"framework": "GDPR"})

        release.set()
        assert feed.resolve(sox_future, {"overview": {}}, timeout=5) == Ok({"framework": "SOX"})

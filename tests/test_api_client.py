import json

import pytest
import requests

from vertical_dashboards.data.api_client import ApiClient, ApiClientError, fetch_or_fallback
from vertical_dashboards.data.results import Err, Ok


def _response(status=200, body=None, content=b"", content_type="application/json"):
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response.headers["content-type"] = content_type
    response._content = json.dumps(body).encode("utf-8") if body is not None else content
    response.url = "http://api.test"
    return response


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _client(session):
    return ApiClient("http://api.test/", timeout=3.0, session=session)


def test_get_lease_builds_url():
    session = StubSession(_response(body={"id": "L-1"}))
    assert _client(session).get_lease("L-1") == {"id": "L-1"}
    assert session.calls[0]["url"] == "http://api.test/v2/agents/vanguards/lease/L-1"
    assert session.calls[0]["timeout"] == 3.0


def test_get_action_queue():
    session = StubSession(_response(body=[{"id": 1}]))
    assert _client(session).get_action_queue() == [{"id": 1}]
    assert session.calls[0]["url"].endswith("/v2/actions/queue")


def test_compliance_analytics_drops_empty_params():
    session = StubSession(_response(body={"overview": {"complianceScore": 91}}))
    payload = _client(session).get_compliance_analytics("7d")
    assert payload["overview"]["complianceScore"] == 91
    assert session.calls[0]["params"] == {"timeRange": "7d"}


def test_audit_logs_parse_into_page():
    body = {"logs": [{"id": "a"}, {"id": "b"}], "total": 60, "page": 2, "pageSize": 25}
    session = StubSession(_response(body=body))
    page = _client(session).get_audit_logs(page=2, action="login", resource="")

    assert [item["id"] for item in page.items] == ["a", "b"]
    assert page.total == 60
    assert page.page == 2
    assert page.page_count == 3
    assert session.calls[0]["params"] == {"page": 2, "pageSize": 25, "action": "login"}


def test_audit_logs_reject_invalid_paging():
    with pytest.raises(ValueError):
        _client(StubSession()).get_audit_logs(page=0)


def test_export_returns_bytes():
    session = StubSession(_response(content=b"id,action\n1,login\n", content_type="text/csv"))
    data = _client(session).export_audit_logs("CSV", status="success")
    assert data.startswith(b"id,action")
    assert session.calls[0]["params"] == {"format": "csv", "status": "success"}


def test_export_rejects_unknown_format():
    session = StubSession()
    with pytest.raises(ValueError):
        _client(session).export_audit_logs("xlsx")
    assert session.calls == []


@pytest.mark.parametrize(
    "status, error_type",
    [(400, "validation"), (404, "validation"), (429, "rate_limit"), (500, "server"), (503, "server")],
)
def test_http_errors_are_classified(status, error_type):
    session = StubSession(_response(status=status, body={"message": "nope"}))
    with pytest.raises(ApiClientError) as excinfo:
        _client(session).get_action_queue()
    assert excinfo.value.status_code == status
    assert excinfo.value.error_type == error_type
    assert excinfo.value.message == "nope"


def test_connection_errors_are_network_errors():
    session = StubSession(error=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(ApiClientError) as excinfo:
        _client(session).get_action_queue()
    assert excinfo.value.error_type == "network"
    assert excinfo.value.status_code is None


def test_invalid_json_is_a_server_error():
    session = StubSession(_response(content=b"<html>", content_type="text/html"))
    with pytest.raises(ApiClientError) as excinfo:
        _client(session).get_action_queue()
    assert excinfo.value.error_type == "server"


def test_fetch_or_fallback():
    assert fetch_or_fallback(lambda: 5, 0) == Ok(5)

    def failing():
        raise ApiClientError(500, "down", "server")

    result = fetch_or_fallback(failing, [], label="queue")
    assert isinstance(result, Err)
    assert result.fallback == []

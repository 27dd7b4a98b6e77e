"""Tests for the shared HTTP helpers."""

from __future__ import annotations

import responses
from requests.exceptions import ConnectionError as RequestsConnectionError

from safemap.http import USER_AGENT, create_session, get_json

URL = "https://api.example.com/data"


class TestCreateSession:
    def test_user_agent(self):
        session = create_session()
        assert session.headers["User-Agent"] == USER_AGENT
        assert USER_AGENT.startswith("SafeMap/")

    def test_retry_configured(self):
        adapter = create_session(retries=4).get_adapter("https://example.com")
        assert adapter.max_retries.total == 4
        assert 503 in adapter.max_retries.status_forcelist


class TestGetJson:
    @responses.activate
    def test_success(self):
        responses.add(responses.GET, URL, json={"ok": True}, status=200)
        assert get_json(create_session(), URL, params={"q": "x"}) == {"ok": True}
        assert "q=x" in responses.calls[0].request.url

    @responses.activate
    def test_non_200_returns_none(self):
        responses.add(responses.GET, URL, json={"error": "nope"}, status=404)
        assert get_json(create_session(), URL) is None

    @responses.activate
    def test_connection_error_returns_none(self):
        responses.add(responses.GET, URL, body=RequestsConnectionError("refused"))
        assert get_json(create_session(), URL) is None

    @responses.activate
    def test_invalid_json_returns_none(self, caplog):
        responses.add(responses.GET, URL, body="not json", status=200)
        with caplog.at_level("WARNING", logger="safemap.http"):
            assert get_json(create_session(), URL, label="Example") is None
        assert "Example" in caplog.text

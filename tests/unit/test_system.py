"""Tests for API systems, the HTTP transport and the client factory."""

import pytest
import requests
import responses
from phonelogs import PROD, Client, HttpTransport, RequestConfig, System, client, get_system
from phonelogs.system import API_URL_ENV
from responses import matchers


class TestSystem:
    """Tests for System and get_system."""

    def test_prod(self, monkeypatch):
        monkeypatch.delenv(API_URL_ENV, raising=False)
        assert get_system() is PROD
        assert PROD.url_for("phone/call_logs") == "https://api.zoom.us/v2/phone/call_logs"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(API_URL_ENV, "http://localhost:8080/v2")

        system = get_system()

        assert system.name == "CUSTOM"
        assert system.api_url == "http://localhost:8080/v2/"

    @pytest.mark.parametrize("path", ["phone/call_logs", "/phone/call_logs"])
    def test_url_for(self, path):
        system = System("TEST", "https://example.test/v2")
        assert system.url_for(path) == "https://example.test/v2/phone/call_logs"


class TestHttpTransport:
    """Tests for the requests based transport."""

    @responses.activate
    def test_request(self):
        responses.get(
            "https://example.test/v2/phone/call_logs",
            json={"call_logs": []},
            match=[matchers.query_param_matcher({"page_size": "30"})],
        )
        transport = HttpTransport()

        response = transport.request(
            RequestConfig(
                url="https://example.test/v2/phone/call_logs",
                params={"page_size": "30"},
                headers={"Accept": "application/json"},
            )
        )

        assert response.json() == {"call_logs": []}
        assert responses.calls[0].request.headers["Accept"] == "application/json"

    @responses.activate
    def test_error_status_raises(self):
        responses.get("https://example.test/v2/phone/call_logs", status=404)

        with pytest.raises(requests.HTTPError):
            HttpTransport().request(RequestConfig(url="https://example.test/v2/phone/call_logs"))

    @responses.activate
    def test_session_headers_are_used(self):
        responses.get("https://example.test/v2/x", json={})
        session = requests.Session()
        session.headers["Authorization"] = "Bearer abc"

        HttpTransport(session).request(RequestConfig(url="https://example.test/v2/x"))

        assert responses.calls[0].request.headers["Authorization"] == "Bearer abc"

    def test_close_only_owned_session(self):
        session = requests.Session()
        transport = HttpTransport(session)
        assert not transport.owns_session
        assert HttpTransport().owns_session


class TestClient:
    """Tests for the client factory."""

    def test_client_defaults(self, monkeypatch):
        monkeypatch.delenv(API_URL_ENV, raising=False)

        with client() as api:
            assert isinstance(api, Client)
            assert api.system is PROD
            assert api.executor.timeout == 30
            assert api.call_logs is not None

    def test_client_timeout_and_system(self):
        system = System("TEST", "https://example.test/v2/")
        api = client(system, timeout=5)

        assert api.executor.system is system
        assert api.executor.timeout == 5
        assert repr(api) == "Client(system='TEST', api_url='https://example.test/v2/')"
        api.close()

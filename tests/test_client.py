import dataclasses

import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning

from sparkpost_client import SparkPost
from sparkpost_client.auth import AuthStrategy
from sparkpost_client.exceptions import (
    BadResponseError,
    ConfigError,
    InvalidTransportError,
    MissingCredentialError,
    ResourceNotFoundError,
    UnreachableError,
)
from sparkpost_client.http import RequestsTransport

BASE_URL = "https://api.sparkpost.test:8443/api/v1"


def build_client(auth=None, **options):
    settings = {"key": "api-key", "host": "api.sparkpost.test", "port": 8443}
    settings.update(options)
    return SparkPost(settings=settings, auth=auth)


def test_default_transport_is_bound_to_base_url():
    client = build_client()

    assert isinstance(client.transport, RequestsTransport)
    assert client.transport.configuration.base_uri == BASE_URL
    assert client.transport.configuration.user_agent.startswith("python-sparkpost")


def test_keyword_options_override_settings():
    client = SparkPost(settings={"key": "one", "host": "a.test"}, key="two")

    assert client.config.key == "two"
    assert client.config.host == "a.test"


def test_missing_key_fails_construction():
    with pytest.raises(MissingCredentialError):
        SparkPost(settings={"host": "api.sparkpost.test"})


def test_invalid_transport_fails_construction():
    with pytest.raises(InvalidTransportError):
        SparkPost(object(), key="api-key")


def test_get_with_query_hits_expected_url(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE_URL}/transmissions/", json={"results": []})

    result = client.transmission.get(None, {"foo": "bar"})

    assert result == {"results": []}
    assert matcher.last_request.url == f"{BASE_URL}/transmissions/?foo=bar"
    assert matcher.last_request.headers["Authorization"] == "api-key"
    assert matcher.last_request.headers["User-Agent"].startswith("python-sparkpost")


def test_send_transmission_posts_mapped_body(requests_mock):
    client = build_client()
    matcher = requests_mock.post(
        f"{BASE_URL}/transmissions/",
        json={"results": {"id": "11668787484950529", "total_accepted_recipients": 1}},
        additional_matcher=lambda request: request.json()["content"]["subject"] == "Hello",
    )

    result = client.transmission.send(
        {
            "from": "sender@example.com",
            "subject": "Hello",
            "text": "line one\r\nline two",
            "recipients": [{"address": "to@example.com"}],
        }
    )

    assert result["results"]["total_accepted_recipients"] == 1
    body = matcher.last_request.json()
    assert body["content"]["text"] == "line one\nline two"
    assert body["recipients"] == [{"address": "to@example.com"}]
    assert matcher.last_request.headers["Content-Type"] == "application/json"


def test_404_raises_resource_not_found(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/transmissions/missing",
        status_code=404,
        json={"errors": [{"message": "resource not found"}]},
    )

    with pytest.raises(ResourceNotFoundError) as excinfo:
        client.transmission.find("missing")

    assert excinfo.value.endpoint == "transmissions"


def test_500_raises_bad_response(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/transmissions/", status_code=500, text="boom")

    with pytest.raises(BadResponseError) as excinfo:
        client.transmission.all()

    assert excinfo.value.endpoint == "transmissions"
    assert excinfo.value.status_code == 500
    assert excinfo.value.details == "boom"


def test_connection_error_raises_unreachable(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/transmissions/",
        exc=requests.exceptions.ConnectionError("Connection refused"),
    )

    with pytest.raises(UnreachableError) as excinfo:
        client.transmission.get()

    assert "Connection refused" in str(excinfo.value)


def test_ssl_error_raises_unreachable():
    class ExplodingSession:
        def request(self, *args, **kwargs):  # pragma: no cover - helper
            raise requests.exceptions.SSLError("CERTIFICATE_VERIFY_FAILED")

        def close(self):  # pragma: no cover - helper
            pass

    client = SparkPost(RequestsTransport(session=ExplodingSession()), key="api-key")

    with pytest.raises(UnreachableError) as excinfo:
        client.transmission.get()

    assert "CERTIFICATE_VERIFY_FAILED" in str(excinfo.value)


def test_request_logging_includes_endpoint(caplog, requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/message-events/", json={"results": []})

    with caplog.at_level("INFO", logger="sparkpost_client.client"):
        client.message_events.search({"events": ["delivery"]})

    assert "endpoint=message-events" in caplog.text
    assert "api-key" not in caplog.text


def test_disables_insecure_warning_when_verify_disabled(monkeypatch):
    captured: list[object] = []

    def fake_disable(warning):  # pragma: no cover - helper
        captured.append(warning)

    monkeypatch.setattr(
        "sparkpost_client.http.urllib3.disable_warnings",
        fake_disable,
    )

    client = build_client(strictSSL=False)

    assert client.transport.verify is False
    assert captured and captured[0] is InsecureRequestWarning


def test_context_manager_closes_transport():
    closed: list[bool] = []

    class ClosingSession(requests.Session):
        def close(self):
            closed.append(True)
            super().close()

    with SparkPost(RequestsTransport(session=ClosingSession()), key="api-key"):
        pass

    assert closed == [True]


def test_custom_auth_strategy_sets_headers(requests_mock):
    class SubaccountAuth(AuthStrategy):
        def apply(self, headers):
            headers["Authorization"] = "master-key"
            headers["X-MSYS-SUBACCOUNT"] = "42"

    client = build_client(auth=SubaccountAuth())
    matcher = requests_mock.get(f"{BASE_URL}/transmissions/", json={"results": []})

    client.transmission.get()

    assert matcher.last_request.headers["Authorization"] == "master-key"
    assert matcher.last_request.headers["X-MSYS-SUBACCOUNT"] == "42"


def test_auth_must_be_a_strategy():
    with pytest.raises(ConfigError, match="AuthStrategy"):
        build_client(auth="Bearer nope")


def test_requests_transport_returns_status_and_body(requests_mock):
    transport = RequestsTransport()
    transport.configuration.base_uri = BASE_URL
    requests_mock.get(f"{BASE_URL}/account/", content=b'{"results": {}}', status_code=200)

    response = transport.send("/account/", "GET", {"Authorization": "api-key"})

    assert response.status_code == 200
    assert response.content == b'{"results": {}}'
    assert [f.name for f in dataclasses.fields(response)] == ["status_code", "content"]

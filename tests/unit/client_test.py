"""Unit tests for the API client."""

import httpx
import pytest

from report_export.domain.errors import RequestError
from report_export.operations.client import ApiClient


def make_client(handler, base_url="https://reports.test", **kwargs):
    return ApiClient(base_url, "secret", transport=httpx.MockTransport(handler), **kwargs)


class TestApiClient:
    """Test request building and error mapping."""

    def test_attaches_token_and_base_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        with make_client(handler, base_url="https://reports.test/api/") as client:
            body = client.get("/rest/1/?output=project&pretty")

        assert body == {"ok": True}
        request = seen[0]
        assert request.headers["Authorization"] == "Token secret"
        assert request.url.host == "reports.test"
        assert request.url.path == "/api/rest/1/"
        assert request.url.params["output"] == "project"
        assert "pretty" in request.url.params

    def test_custom_auth_scheme(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        with make_client(handler, auth_scheme="Bearer") as client:
            client.get("/x")

        assert seen[0].headers["Authorization"] == "Bearer secret"

    def test_post_returns_json(self):
        def handler(request):
            assert request.method == "POST"
            return httpx.Response(200, json={"jobId": "42"})

        with make_client(handler) as client:
            assert client.post("/rest/1/demo/report/export_zip?format=xml") == {"jobId": "42"}

    def test_empty_body_is_none(self):
        with make_client(lambda request: httpx.Response(204)) as client:
            assert client.post("/x") is None

    def test_get_binary_relative_and_absolute(self):
        def handler(request):
            return httpx.Response(200, content=str(request.url).encode())

        with make_client(handler) as client:
            assert client.get_binary("/f/1") == b"https://reports.test/f/1"
            assert client.get_binary("https://cdn.test/f/2") == b"https://cdn.test/f/2"

    def test_http_error_status(self):
        with make_client(lambda request: httpx.Response(500)) as client:
            with pytest.raises(RequestError) as exc_info:
                client.post("/rest/1/demo/report/export_zip?format=xml")

        error = exc_info.value
        assert error.status_code == 500
        assert error.method == "POST"
        assert isinstance(error.__cause__, httpx.HTTPStatusError)

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(RequestError) as exc_info:
                client.get("/rest/1/")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_invalid_json(self):
        with make_client(lambda request: httpx.Response(200, content=b"<html>")) as client:
            with pytest.raises(RequestError):
                client.get("/rest/1/")

    def test_no_retry(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        with make_client(handler) as client:
            with pytest.raises(RequestError):
                client.get("/rest/1/")

        assert len(calls) == 1

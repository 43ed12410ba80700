"""Authenticated HTTP client for the report service."""

from typing import Any

import httpx
import orjson

from report_export.domain.errors import RequestError


class ApiClient:
    """Thin wrapper around one ``httpx.Client`` bound to a base URL and token.

    Built once at startup and passed explicitly to every operation. Calls are
    never retried; any transport failure or non-2xx status becomes a
    :class:`RequestError`.

    Example:
        with ApiClient("https://reports.example.com", "secret") as client:
            projects = client.get("/rest/1/?output=project&pretty")
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        *,
        auth_scheme: str = "Token",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Root URL of the service; REST paths are resolved against it
            api_token: Static token sent with every request
            auth_scheme: Scheme prefix of the Authorization header
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": f"{auth_scheme} {api_token}"},
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def get(self, path: str) -> Any:
        """GET a resource and return its decoded JSON body."""
        return self._decode("GET", path, self._request("GET", path))

    def post(self, path: str) -> Any:
        """POST to a resource and return its decoded JSON body."""
        return self._decode("POST", path, self._request("POST", path))

    def get_binary(self, url: str) -> bytes:
        """GET raw content from a relative or absolute URL."""
        return self._request("GET", url).content

    def _request(self, method: str, url: str) -> httpx.Response:
        try:
            response = self._client.request(method, url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise RequestError(
                f"{method} {url} returned HTTP {status_code}",
                method=method,
                url=url,
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            raise RequestError(
                f"{method} {url} failed: {e}",
                method=method,
                url=url,
            ) from e
        return response

    @staticmethod
    def _decode(method: str, url: str, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise RequestError(
                f"{method} {url} returned a body that is not valid JSON",
                method=method,
                url=url,
                status_code=response.status_code,
            ) from e

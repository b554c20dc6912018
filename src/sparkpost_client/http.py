"""HTTP transport contract and the default requests-based transport."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import urlparse

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .exceptions import UnexpectedResponseError


@dataclass(slots=True)
class TransportConfiguration:
    """Writable settings a bound transport sends every request with."""

    base_uri: str = ""
    user_agent: str = ""


@dataclass(slots=True)
class HttpResponse:
    """Raw response envelope returned by a transport."""

    status_code: int
    content: bytes = b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class TransportError(Exception):
    """Raised by a transport when a request fails.

    ``response`` is set when the server answered with an unsuccessful status
    and left as ``None`` when no HTTP exchange completed.
    """

    def __init__(self, message: str, *, response: HttpResponse | None = None) -> None:
        super().__init__(message)
        self.response = response


class Transport(Protocol):
    """Capability every transport handed to `SparkPost` must provide.

    ``send`` should raise `TransportError` on failure. Any other exception it
    raises is reported by the client as an unreachable endpoint.
    """

    configuration: TransportConfiguration

    def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        ...


def ensure_success(response: HttpResponse) -> None:
    """Raise `TransportError` if the response signals a failure."""

    if 200 <= response.status_code < 300:
        return
    message = f"HTTP {response.status_code}: {response.text[:200]}"
    raise TransportError(message, response=response)


def parse_json(response: HttpResponse) -> Any:
    """Parse JSON with helpful error context."""

    if not response.content:
        return None
    try:
        return json.loads(response.content.decode("utf-8"))
    except ValueError as exc:
        raise UnexpectedResponseError(
            "Response did not contain valid JSON",
            status_code=response.status_code,
            details=response.text[:200],
        ) from exc


class RequestsTransport:
    """Send requests through a `requests.Session`."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        verify: bool | str = True,
        timeout: float | tuple[float, float] | None = None,
        configuration: TransportConfiguration | None = None,
    ) -> None:
        self.configuration = configuration or TransportConfiguration()
        self.verify = verify
        self.timeout = timeout
        self._session = session or requests.Session()
        self._suppress_insecure_warning_if_needed()

    def send(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        request_headers = dict(headers)
        if self.configuration.user_agent:
            request_headers.setdefault("User-Agent", self.configuration.user_agent)
        try:
            response = self._session.request(
                method=method,
                url=self._resolve_url(url),
                headers=request_headers,
                data=body,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise TransportError(reason) from exc

        result = HttpResponse(
            status_code=response.status_code,
            content=response.content or b"",
        )
        ensure_success(result)
        return result

    def close(self) -> None:
        self._session.close()

    def _resolve_url(self, url: str) -> str:
        parsed = urlparse(url)
        if parsed.scheme and parsed.netloc:
            return url
        base = self.configuration.base_uri.rstrip("/")
        return f"{base}/{url.lstrip('/')}"

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.verify, bool) and not self.verify:
            urllib3.disable_warnings(InsecureRequestWarning)


__all__ = [
    "HttpResponse",
    "RequestsTransport",
    "Transport",
    "TransportConfiguration",
    "TransportError",
    "ensure_success",
    "parse_json",
]

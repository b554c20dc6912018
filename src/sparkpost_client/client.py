"""High-level SparkPost REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from .auth.api_key import ApiKeyAuth
from .auth.base import AuthStrategy
from .binding import bind_transport
from .config import resolve_config
from .exceptions import (
    BadResponseError,
    ConfigError,
    ResourceNotFoundError,
    SparkPostError,
    UnreachableError,
)
from .http import RequestsTransport, Transport, ensure_success, parse_json
from .resources import APIResource, MessageEvents, Transmissions


logger = logging.getLogger(__name__)


class SparkPost:
    """Wrap SparkPost REST endpoints behind resource objects.

    Connection options may be passed as a ``settings`` mapping, as keyword
    arguments, or both (keywords win)::

        client = SparkPost(key="<api key>")
        client.transmission.send({"from": "me@example.com", ...})
    """

    def __init__(
        self,
        transport: Any | None = None,
        settings: Mapping[str, Any] | None = None,
        *,
        auth: AuthStrategy | None = None,
        **options: Any,
    ) -> None:
        merged: dict[str, Any] = dict(settings or {})
        merged.update(options)
        # Configuration must be resolved before the transport can be bound.
        self.config = resolve_config(merged)
        self._auth = auth if auth is not None else ApiKeyAuth(self.config.key)
        self._validate_auth_strategy()
        if transport is None:
            transport = RequestsTransport(verify=self.config.strict_ssl)
        self._transport: Transport = bind_transport(transport, self.config)
        self._resources: dict[str, APIResource] = {}
        self.transmission = Transmissions(self)
        self.message_events = MessageEvents(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> SparkPost:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Public API --------------------------------------------------------------
    @property
    def transport(self) -> Transport:
        return self._transport

    def resource(self, endpoint: str) -> APIResource:
        """Return a plain resource for an endpoint without a dedicated wrapper."""

        name = endpoint.strip("/")
        if not name:
            raise ValueError("endpoint must be a non-empty name")
        if name not in self._resources:
            self._resources[name] = APIResource(self, endpoint=name)
        return self._resources[name]

    def request(
        self,
        method: str,
        path: str,
        *,
        endpoint: str,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON payload."""

        request_headers = self._prepare_headers(headers)
        self._log_request(method, path, endpoint)
        try:
            response = self._transport.send(path, method, request_headers, body)
            ensure_success(response)
        except Exception as exc:
            # Any transport failure, typed or not, is reported per endpoint.
            raise self._classify_failure(endpoint, exc) from exc
        return parse_json(response)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    # Internal helpers -------------------------------------------------------
    def _prepare_headers(self, overrides: Mapping[str, str] | None) -> MutableMapping[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        self._auth.apply(headers)
        if overrides:
            headers.update(overrides)
        return headers

    @staticmethod
    def _classify_failure(endpoint: str, exc: Exception) -> SparkPostError:
        response = getattr(exc, "response", None)
        if response is None:
            reason = str(exc).strip() or exc.__class__.__name__
            logger.warning("SparkPost %s API unreachable: %s", endpoint, reason)
            return UnreachableError(endpoint, reason)

        logger.warning(
            "SparkPost %s API answered with status %s", endpoint, response.status_code
        )
        if response.status_code == 404:
            return ResourceNotFoundError(endpoint, details=response.text)
        return BadResponseError(endpoint, response.status_code, details=response.text)

    def _log_request(self, method: str, path: str, endpoint: str) -> None:
        logger.info(
            "SparkPost request %s %s (endpoint=%s)",
            method.upper(),
            path,
            endpoint,
        )

    def _validate_auth_strategy(self) -> None:
        if not isinstance(self._auth, AuthStrategy):
            raise ConfigError(
                f"auth must be an AuthStrategy, got {type(self._auth).__name__}"
            )

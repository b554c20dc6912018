"""Generic endpoint wrapper shared by every resource."""

from __future__ import annotations

import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from ..mapping import build_request_model

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import SparkPost

ALLOWED_ACTIONS = frozenset({"POST", "PUT", "GET", "DELETE"})


class APIResource:
    """Issue create/update/get/delete calls against one API endpoint.

    Subclasses set ``endpoint`` and may declare ``parameter_mappings`` and
    ``structure`` (see `sparkpost_client.mapping`) to reshape request bodies.
    A resource without mappings sends body keys through unchanged.
    """

    endpoint: str = ""
    parameter_mappings: Mapping[str, str] = MappingProxyType({})
    structure: Mapping[str, Any] = MappingProxyType({})

    def __init__(self, client: SparkPost, endpoint: str | None = None) -> None:
        self._client = client
        if endpoint is not None:
            self.endpoint = endpoint
        if not self.endpoint:
            raise ValueError(f"{type(self).__name__} requires an endpoint name")

    def create(
        self,
        body: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return self._call_resource("POST", body=body, headers=headers)

    def update(
        self,
        resource_path: str,
        body: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return self._call_resource("PUT", resource_path, body=body, headers=headers)

    def get(
        self,
        resource_path: str | None = None,
        query: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Fetch the collection, or one entity when ``resource_path`` is given."""

        return self._call_resource("GET", resource_path, query=query, headers=headers)

    def delete(
        self,
        resource_path: str | None = None,
        query: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return self._call_resource("DELETE", resource_path, query=query, headers=headers)

    def build_request_model(self, request_config: Mapping[str, Any]) -> dict[str, Any]:
        """Return the body this resource would send for ``request_config``."""

        return build_request_model(request_config, self.structure, self.parameter_mappings)

    def build_url(
        self,
        resource_path: str | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        url = f"/{self.endpoint}/"
        if resource_path is not None:
            url += str(resource_path)
        params = {
            key: _query_value(value)
            for key, value in (query or {}).items()
            if value is not None
        }
        if params:
            url += "?" + urlencode(params, doseq=True)
        return url

    def _build_body(self, body: Mapping[str, Any] | None) -> bytes | None:
        if not body:
            return None
        model = self.build_request_model(body)
        return json.dumps(model, separators=(",", ":")).encode("utf-8")

    def _call_resource(
        self,
        method: str,
        resource_path: str | None = None,
        *,
        body: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        action = method.upper()
        if action not in ALLOWED_ACTIONS:
            raise ValueError(f"Invalid resource action: {method}")

        return self._client.request(
            action,
            self.build_url(resource_path, query),
            endpoint=self.endpoint,
            body=self._build_body(body),
            headers=headers,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"


def _query_value(value: Any) -> Any:
    # Booleans go on the wire as 1/0.
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_query_value(item) for item in value if item is not None]
    return value

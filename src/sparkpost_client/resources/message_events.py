"""Message event search helpers."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .base import APIResource


class MessageEvents(APIResource):
    """Query the message events stream."""

    endpoint = "message-events"

    def search(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Search message events.

        Non-string iterable values are sent comma-separated, e.g.
        ``{"events": ["delivery", "bounce"]}`` becomes ``events=delivery,bounce``.
        """
        params = {key: _join_values(value) for key, value in (query or {}).items()}
        return self.get(None, params)

    def samples(self, events: Iterable[str] | str | None = None) -> dict[str, Any]:
        query = {"events": _join_values(events)} if events else None
        return self.get("events/samples", query)

    def documentation(self) -> dict[str, Any]:
        return self.get("events/documentation")


def _join_values(value: Any) -> Any:
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return ",".join(str(item) for item in value)
    return value


__all__ = ["MessageEvents"]

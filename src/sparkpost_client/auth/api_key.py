"""API key authentication."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field

from .base import AuthStrategy


@dataclass(frozen=True, slots=True)
class ApiKeyAuth(AuthStrategy):
    """Send the raw API key as the ``Authorization`` header."""

    key: str = field(repr=False)

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = self.key

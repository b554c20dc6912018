"""Configuration helpers for SparkPost client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .exceptions import MissingCredentialError

API_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "host": "api.sparkpost.com",
        "protocol": "https",
        "port": 443,
        "strictSSL": True,
        "key": "",
        "version": "v1",
    }
)

# Python-style spellings accepted alongside the wire-compatible option names.
_OPTION_ALIASES: Mapping[str, str] = MappingProxyType({"strict_ssl": "strictSSL"})


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Resolved, immutable connection settings for `SparkPost`."""

    key: str = field(repr=False)
    host: str = API_DEFAULTS["host"]
    protocol: str = API_DEFAULTS["protocol"]
    port: int | str | None = API_DEFAULTS["port"]
    strict_ssl: bool = API_DEFAULTS["strictSSL"]
    version: str = API_DEFAULTS["version"]

    def as_settings(self) -> dict[str, Any]:
        return {
            "host": self.host,
            "protocol": self.protocol,
            "port": self.port,
            "strictSSL": self.strict_ssl,
            "key": self.key,
            "version": self.version,
        }

    def replace(self, **changes: Any) -> ConnectionConfig:
        """Return a newly resolved configuration with ``changes`` applied."""

        settings = self.as_settings()
        settings.update(changes)
        return resolve_config(settings)


def resolve_config(settings: Mapping[str, Any]) -> ConnectionConfig:
    """Merge ``settings`` over `API_DEFAULTS`, rejecting a missing API key.

    Unrecognised options are ignored.
    """

    if not isinstance(settings, Mapping):
        raise TypeError("settings must be a mapping of connection options")

    key = settings.get("key")
    if not isinstance(key, str) or not key.strip():
        raise MissingCredentialError("You must provide an API key")

    merged = dict(API_DEFAULTS)
    for option, value in settings.items():
        name = _OPTION_ALIASES.get(option, option)
        if name in merged:
            merged[name] = value

    return ConnectionConfig(
        key=merged["key"],
        host=merged["host"],
        protocol=merged["protocol"],
        port=merged["port"],
        strict_ssl=merged["strictSSL"],
        version=merged["version"],
    )


__all__ = ["API_DEFAULTS", "ConnectionConfig", "resolve_config"]

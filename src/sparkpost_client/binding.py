"""Attach base URL and user agent to a transport."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from .config import ConnectionConfig
from .exceptions import InvalidTransportError
from .http import Transport

DISTRIBUTION_NAME = "sparkpost-client"
USER_AGENT_PREFIX = "python-sparkpost"

logger = logging.getLogger(__name__)


def build_base_url(config: ConnectionConfig) -> str:
    port = f":{config.port}" if config.port else ""
    return f"{config.protocol}://{config.host}{port}/api/{config.version}"


@lru_cache(maxsize=1)
def package_version() -> str | None:
    """Return the installed version of this library, or ``None`` if unknown."""

    from importlib.metadata import PackageNotFoundError, version

    try:
        return version(DISTRIBUTION_NAME)
    except (PackageNotFoundError, ValueError):
        logger.debug("Package metadata for %s is unavailable", DISTRIBUTION_NAME)
        return None


def build_user_agent(library_version: str | None = None) -> str:
    resolved = library_version if library_version is not None else package_version()
    if not resolved:
        return USER_AGENT_PREFIX
    return f"{USER_AGENT_PREFIX}/{resolved}"


def bind_transport(transport: Any, config: ConnectionConfig) -> Transport:
    """Validate ``transport`` and point its configuration at the SparkPost API.

    The transport's own configuration object is updated in place and the same
    transport is returned.
    """

    _validate_transport(transport)
    configuration = transport.configuration
    try:
        configuration.base_uri = build_base_url(config)
        configuration.user_agent = build_user_agent()
    except (AttributeError, TypeError) as exc:
        raise InvalidTransportError(
            "transport configuration must accept base_uri and user_agent"
        ) from exc
    logger.debug("Bound %s to %s", type(transport).__name__, configuration.base_uri)
    return transport


def _validate_transport(transport: Any) -> None:
    send = getattr(transport, "send", None)
    if not callable(send):
        raise InvalidTransportError("transport must provide a callable send() method")
    configuration = getattr(transport, "configuration", None)
    if configuration is None:
        raise InvalidTransportError("transport must expose a writable configuration object")
    for attribute in ("base_uri", "user_agent"):
        if not hasattr(configuration, attribute):
            raise InvalidTransportError(
                f"transport configuration is missing the {attribute!r} attribute"
            )


__all__ = ["bind_transport", "build_base_url", "build_user_agent", "package_version"]

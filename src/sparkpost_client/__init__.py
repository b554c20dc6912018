"""High-level SparkPost client entrypoints."""
from .client import SparkPost
from .auth import ApiKeyAuth, AuthStrategy
from .config import ConnectionConfig, resolve_config
from .exceptions import SparkPostError
from .http import HttpResponse, RequestsTransport, TransportConfiguration, TransportError

__all__ = [
    "SparkPost",
    "ApiKeyAuth",
    "AuthStrategy",
    "ConnectionConfig",
    "resolve_config",
    "SparkPostError",
    "HttpResponse",
    "RequestsTransport",
    "TransportConfiguration",
    "TransportError",
]

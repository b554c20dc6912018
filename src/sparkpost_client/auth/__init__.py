"""Authentication strategies for SparkPost."""
from .api_key import ApiKeyAuth
from .base import AuthStrategy

__all__ = ["AuthStrategy", "ApiKeyAuth"]

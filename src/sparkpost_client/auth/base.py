"""Credential strategies applied to every SparkPost request."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableMapping


class AuthStrategy(ABC):
    """Adds credentials to the outgoing request headers.

    `SparkPost` uses `ApiKeyAuth` unless another strategy is passed as
    ``auth=``; subaccount or proxy setups can supply their own.
    """

    @abstractmethod
    def apply(self, headers: MutableMapping[str, str]) -> None:
        """Set the credential headers on ``headers``."""

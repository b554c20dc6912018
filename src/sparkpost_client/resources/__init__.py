"""Resource-specific convenience wrappers."""
from .base import APIResource
from .message_events import MessageEvents
from .transmissions import Transmissions

__all__ = [
    "APIResource",
    "MessageEvents",
    "Transmissions",
]

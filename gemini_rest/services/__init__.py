"""Services for the application."""

from .client import GeminiClient, NO_RESPONSE_TEXT
from .session import get_client, close_client

__all__ = [
    "GeminiClient",
    "NO_RESPONSE_TEXT",
    "get_client",
    "close_client",
]

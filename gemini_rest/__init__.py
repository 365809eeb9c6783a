"""Async client for the Gemini generateContent REST API."""

__version__ = "0.1.0"

from gemini_rest.errors import (  # noqa: E402
    GeminiError,
    CredentialMissingError,
    ApiError,
    ModelRefusalError,
    NoImageDataError,
    NoAudioDataError,
)
from gemini_rest.services.client import GeminiClient, NO_RESPONSE_TEXT  # noqa: E402

__all__ = [
    "__version__",
    "GeminiClient",
    "NO_RESPONSE_TEXT",
    "GeminiError",
    "CredentialMissingError",
    "ApiError",
    "ModelRefusalError",
    "NoImageDataError",
    "NoAudioDataError",
]

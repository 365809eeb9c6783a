"""Shared client management for the HTTP application."""

from gemini_rest.services.client import GeminiClient


_client: GeminiClient | None = None


async def get_client() -> GeminiClient:
    """Get or create the shared Gemini client."""
    global _client
    if _client is None:
        _client = GeminiClient()
    return _client


async def close_client() -> None:
    """Close the shared Gemini client."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None

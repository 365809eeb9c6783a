"""Configuration management for the application."""

import os
from pathlib import Path
from typing import Callable

from dotenv import dotenv_values
from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Log level")

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # HTTP client fingerprint
    impersonate: str = Field(
        default="chrome131", description="Browser fingerprint used by curl_cffi"
    )

    # Generative Language API Configuration
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative Language API base URL",
    )
    text_model: str = Field(
        default="gemini-2.5-flash", description="Default model for text responses"
    )
    image_model: str = Field(
        default="gemini-2.5-flash-image", description="Model used for image generation"
    )
    tts_model: str = Field(
        default="gemini-2.5-flash-preview-tts",
        description="Model used for speech generation",
    )
    max_output_tokens: int = Field(
        default=500, description="Output token cap for text responses"
    )
    default_voice: str = Field(
        default="Fenrir", description="Prebuilt voice used for speech generation"
    )

    # Dotenv file probed for build-tool injected keys
    dotenv_path: str = Field(default=".env", description="Dotenv file path")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Names probed in the process environment, in priority order
PROCESS_ENV_KEYS = (
    "REACT_APP_API_KEY",
    "VITE_API_KEY",
    "NEXT_PUBLIC_API_KEY",
    "API_KEY",
)

# Names probed in the build-tool dotenv file, in priority order
DOTENV_KEYS = (
    "VITE_API_KEY",
    "REACT_APP_API_KEY",
    "API_KEY",
)

MISSING_KEY_WARNING = (
    "Gemini API key not found in environment. "
    "Please ensure VITE_API_KEY or REACT_APP_API_KEY is set."
)


class CredentialSource(BaseModel):
    """A single named lookup of the API key."""

    mechanism: str = Field(..., description="Where the key is looked up")
    name: str = Field(..., description="Variable name")
    lookup: Callable[[str], str | None] = Field(..., exclude=True)

    class Config:
        frozen = True

    def get(self) -> str | None:
        value = self.lookup(self.name)
        return value or None


def _process_env(name: str) -> str | None:
    return os.environ.get(name)


def _dotenv_lookup(path: str | os.PathLike) -> Callable[[str], str | None]:
    """Lookup over a dotenv file, read once. A missing file yields nothing."""
    values: dict[str, str | None] = {}
    if Path(path).is_file():
        values = dotenv_values(path)

    def lookup(name: str) -> str | None:
        return values.get(name)

    return lookup


def default_credential_sources(
    dotenv_path: str | os.PathLike = ".env",
) -> list[CredentialSource]:
    """Ordered sources: process environment first, then the dotenv file."""
    dotenv_lookup = _dotenv_lookup(dotenv_path)
    sources = [
        CredentialSource(mechanism="environ", name=name, lookup=_process_env)
        for name in PROCESS_ENV_KEYS
    ]
    sources.extend(
        CredentialSource(mechanism="dotenv", name=name, lookup=dotenv_lookup)
        for name in DOTENV_KEYS
    )
    return sources


def resolve_api_key(sources: list[CredentialSource] | None = None) -> str:
    """
    Resolve the API key from the first source holding a non-empty value.

    Args:
        sources: Ordered credential sources, defaults to the process
            environment followed by the configured dotenv file

    Returns:
        The API key, or an empty string when no source provides one
    """
    if sources is None:
        sources = default_credential_sources(settings.dotenv_path)

    for source in sources:
        value = source.get()
        if value:
            logger.debug(f"API key resolved from {source.mechanism}:{source.name}")
            return value

    logger.warning(MISSING_KEY_WARNING)
    return ""


# Global settings instance
settings = Settings()

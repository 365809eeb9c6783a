"""Data models for the application."""

from .request import (
    GenerateContentRequest,
    ChatMessage,
    Content,
    Part,
    InlineData,
    GenerationConfig,
    SpeechConfig,
    VoiceConfig,
    PrebuiltVoiceConfig,
    TextRequest,
    ImageRequest,
    SpeechRequest,
)
from .response import (
    GenerateContentResponse,
    Candidate,
    ErrorResponse,
    ErrorDetail,
    TextResponse,
    ImageResponse,
    SpeechResponse,
)

__all__ = [
    "GenerateContentRequest",
    "ChatMessage",
    "Content",
    "Part",
    "InlineData",
    "GenerationConfig",
    "SpeechConfig",
    "VoiceConfig",
    "PrebuiltVoiceConfig",
    "TextRequest",
    "ImageRequest",
    "SpeechRequest",
    "GenerateContentResponse",
    "Candidate",
    "ErrorResponse",
    "ErrorDetail",
    "TextResponse",
    "ImageResponse",
    "SpeechResponse",
]

"""Request models for the Gemini generateContent API."""

from typing import Literal
from pydantic import BaseModel, Field


class InlineData(BaseModel):
    """Inline base64 data with its MIME type."""

    mimeType: str | None = Field(default=None, description="MIME type of the data")
    data: str | None = Field(default=None, description="Base64 encoded data")


class Part(BaseModel):
    """Part of content, can be text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")


class Content(BaseModel):
    """Content with role and parts."""

    role: Literal["user", "model"] | None = Field(
        default="user", description="Role of the content"
    )
    parts: list[Part] = Field(default_factory=list, description="Parts of the content")


class ChatMessage(BaseModel):
    """A conversation history entry as supplied by callers."""

    role: str = Field(default="user", description="Role of the speaker")
    parts: list[Part] = Field(default_factory=list, description="Parts of the message")

    def to_content(self) -> Content:
        """Convert to a wire turn, keeping only parts with non-blank text."""
        return Content(
            role="model" if self.role == "model" else "user",
            parts=[
                Part(text=part.text)
                for part in self.parts
                if part.text and part.text.strip()
            ],
        )


class PrebuiltVoiceConfig(BaseModel):
    """Prebuilt voice selection."""

    voiceName: str = Field(..., description="Prebuilt voice name")


class VoiceConfig(BaseModel):
    prebuiltVoiceConfig: PrebuiltVoiceConfig


class SpeechConfig(BaseModel):
    voiceConfig: VoiceConfig


class GenerationConfig(BaseModel):
    """Generation configuration."""

    maxOutputTokens: int | None = Field(default=None, description="Maximum output tokens")
    responseModalities: list[str] | None = Field(
        default=None, description="Response modalities"
    )
    speechConfig: SpeechConfig | None = Field(default=None, description="Speech configuration")


class GenerateContentRequest(BaseModel):
    """Request model for generateContent endpoint."""

    contents: list[Content] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig | None = Field(
        default=None, description="Generation configuration"
    )
    systemInstruction: Content | None = Field(
        default=None, description="System instruction"
    )
    config: GenerationConfig | None = Field(
        default=None, description="Output configuration for speech requests"
    )

    def to_body(self) -> dict:
        """JSON body with unset fields left out."""
        return self.model_dump(exclude_none=True)


class TextRequest(BaseModel):
    """Body of the text endpoint."""

    history: list[ChatMessage] = Field(default_factory=list, description="Conversation so far")
    prompt: str = Field(..., description="New user prompt")
    imageParts: list[Part] | None = Field(default=None, description="Inline images for the prompt")
    model: str | None = Field(default=None, description="Model name override")
    systemInstruction: str | None = Field(default=None, description="System instruction")


class ImageRequest(BaseModel):
    """Body of the image endpoint."""

    prompt: str = Field(..., description="Image prompt")


class SpeechRequest(BaseModel):
    """Body of the speech endpoint."""

    text: str = Field(..., description="Text to speak")
    voiceName: str | None = Field(default=None, description="Prebuilt voice name")

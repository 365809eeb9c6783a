"""Response models for the Gemini generateContent API."""

from pydantic import BaseModel, Field
from .request import Content, Part


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content | None = Field(default=None, description="Content of the candidate")
    finishReason: str | None = Field(default=None, description="Reason for finishing")
    index: int = Field(default=0, description="Index of the candidate")


class GenerateContentResponse(BaseModel):
    """Response model for generateContent endpoint."""

    candidates: list[Candidate] = Field(
        default_factory=list, description="Candidates from generation"
    )
    modelVersion: str | None = Field(default=None, description="Model version used")

    @property
    def first_parts(self) -> list[Part]:
        """Parts of the first candidate, empty when there are none."""
        if not self.candidates or self.candidates[0].content is None:
            return []
        return self.candidates[0].content.parts


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int | None = Field(default=None, description="Error code")
    message: str | None = Field(default=None, description="Error message")
    status: str | None = Field(default=None, description="Error status")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(default_factory=ErrorDetail, description="Error details")


class TextResponse(BaseModel):
    text: str = Field(..., description="Generated text")


class ImageResponse(BaseModel):
    image: str = Field(..., description="Generated image as a data URI")


class SpeechResponse(BaseModel):
    audio: str = Field(..., description="Base64 encoded audio")

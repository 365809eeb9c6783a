"""Errors raised by the Gemini client."""


class GeminiError(Exception):
    """Base class for client errors."""


class CredentialMissingError(GeminiError):
    """No API key was resolved when a call was attempted."""

    def __init__(
        self,
        message: str = "API key missing. Please create a variable named 'VITE_API_KEY' with your key.",
    ):
        super().__init__(message)


class ApiError(GeminiError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int, status: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status = status


class ModelRefusalError(GeminiError):
    """The model answered with text instead of the requested image."""

    def __init__(self, text: str):
        super().__init__(f"Model refused: {text}")
        self.text = text


class NoImageDataError(GeminiError):
    def __init__(self, message: str = "No image data returned from API"):
        super().__init__(message)


class NoAudioDataError(GeminiError):
    def __init__(self, message: str = "No audio content returned"):
        super().__init__(message)

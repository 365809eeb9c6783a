"""Gemini REST client for text, image and speech generation."""

from typing import Any, Sequence

from curl_cffi.requests import AsyncSession
from loguru import logger
from pydantic import BaseModel

from gemini_rest.config import (
    Settings,
    default_credential_sources,
    resolve_api_key,
    settings as default_settings,
)
from gemini_rest.errors import (
    ApiError,
    CredentialMissingError,
    ModelRefusalError,
    NoAudioDataError,
    NoImageDataError,
)
from gemini_rest.models.request import (
    ChatMessage,
    Content,
    GenerateContentRequest,
    GenerationConfig,
    InlineData,
    Part,
    PrebuiltVoiceConfig,
    SpeechConfig,
    VoiceConfig,
)
from gemini_rest.models.response import ErrorResponse, GenerateContentResponse


NO_RESPONSE_TEXT = "I couldn't generate a response."


def _coerce(model: type[BaseModel], value: Any) -> Any:
    if isinstance(value, model):
        return value
    return model.model_validate(value)


class GeminiClient:
    """Client for the Gemini generateContent REST endpoint.

    The API key is resolved once, when the client is built. A session passed
    in by the caller is never closed by the client.
    """

    def __init__(
        self,
        api_key: str | None = None,
        settings: Settings | None = None,
        session: AsyncSession | None = None,
    ):
        self.settings = settings if settings is not None else default_settings
        if api_key is None:
            api_key = resolve_api_key(
                default_credential_sources(self.settings.dotenv_path)
            )
        self.api_key = api_key
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession()
        return self._session

    async def aclose(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _require_key(self) -> None:
        if not self.api_key:
            error = CredentialMissingError()
            logger.error(f"Gemini REST error: {error}")
            raise error

    async def generate_text_response(
        self,
        history: Sequence[ChatMessage | dict],
        prompt: str,
        image_parts: Sequence[Part | dict] | None = None,
        model_name: str | None = None,
        system_instruction: str | None = None,
    ) -> str:
        """
        Generate a text reply to a prompt following a conversation.

        Args:
            history: Earlier turns, roles other than "model" are sent as "user"
            prompt: Text of the new user turn
            image_parts: Inline images sent ahead of the prompt in the new turn
            model_name: Model to use, defaults to the configured text model
            system_instruction: Optional system instruction text

        Returns:
            Text of the first part of the first candidate, or a fallback
            sentence when the model returned no text
        """
        self._require_key()
        model = model_name if model_name is not None else self.settings.text_model

        try:
            request = self._build_text_request(
                history, prompt, image_parts, system_instruction
            )
            response = await self._call_api(model, request, "API Error: {reason}")

            parts = response.first_parts
            if parts and parts[0].text:
                return parts[0].text
            return NO_RESPONSE_TEXT

        except Exception as e:
            logger.error(f"Gemini REST text error: {e}")
            raise

    async def generate_image(self, prompt: str) -> str:
        """Generate an image and return it as a base64 data URI."""
        self._require_key()

        try:
            request = GenerateContentRequest(
                contents=[Content(role="user", parts=[Part(text=prompt)])]
            )
            response = await self._call_api(
                self.settings.image_model, request, "Image generation failed."
            )

            parts = response.first_parts
            image_part = next((p for p in parts if p.inlineData is not None), None)

            if image_part is None:
                # The model may explain a refusal in text instead
                text_part = next((p for p in parts if p.text), None)
                if text_part is not None:
                    raise ModelRefusalError(text_part.text)
                raise NoImageDataError()

            mime_type = image_part.inlineData.mimeType or "image/png"
            return f"data:{mime_type};base64,{image_part.inlineData.data}"

        except Exception as e:
            logger.error(f"Gemini REST image error: {e}")
            raise

    async def generate_speech(self, text: str, voice_name: str | None = None) -> str:
        """Synthesize speech and return the raw base64 audio payload."""
        self._require_key()
        voice = voice_name if voice_name is not None else self.settings.default_voice

        try:
            request = GenerateContentRequest(
                contents=[Content(role="user", parts=[Part(text=text)])],
                config=GenerationConfig(
                    responseModalities=["AUDIO"],
                    speechConfig=SpeechConfig(
                        voiceConfig=VoiceConfig(
                            prebuiltVoiceConfig=PrebuiltVoiceConfig(voiceName=voice)
                        )
                    ),
                ),
            )
            response = await self._call_api(
                self.settings.tts_model, request, "TTS generation failed"
            )

            parts = response.first_parts
            inline = parts[0].inlineData if parts else None
            if inline is None or not inline.data:
                raise NoAudioDataError()

            return inline.data

        except Exception as e:
            logger.error(f"Gemini REST TTS error: {e}")
            raise

    def _build_text_request(
        self,
        history: Sequence[ChatMessage | dict],
        prompt: str,
        image_parts: Sequence[Part | dict] | None,
        system_instruction: str | None,
    ) -> GenerateContentRequest:
        """Build the request body for a text response."""
        contents = []
        for message in history:
            content = _coerce(ChatMessage, message).to_content()
            if content.parts:
                contents.append(content)

        current_parts = []
        for image in image_parts or []:
            inline = _coerce(Part, image).inlineData
            if inline is None:
                raise ValueError("Image part has no inlineData")
            current_parts.append(
                Part(
                    inlineData=InlineData(mimeType=inline.mimeType, data=inline.data)
                )
            )
        current_parts.append(Part(text=prompt))
        contents.append(Content(role="user", parts=current_parts))

        request = GenerateContentRequest(
            contents=contents,
            generationConfig=GenerationConfig(
                maxOutputTokens=self.settings.max_output_tokens
            ),
        )
        if system_instruction:
            request.systemInstruction = Content(
                role=None, parts=[Part(text=system_instruction)]
            )

        return request

    async def _call_api(
        self, model: str, request: GenerateContentRequest, default_error: str
    ) -> GenerateContentResponse:
        """
        POST a generateContent request.

        Args:
            model: Model name to call
            request: The request body
            default_error: Message used when the error body carries none,
                may reference the HTTP reason as {reason}

        Returns:
            The parsed response

        Raises:
            ApiError: On a non-success HTTP status
        """
        logger.debug(f"Calling generateContent for model: {model}")

        response = await self.session.post(
            url=f"{self.settings.base_url}/models/{model}:generateContent?key={self.api_key}",
            headers={"Content-Type": "application/json"},
            json=request.to_body(),
            timeout=self.settings.timeout,
            impersonate=self.settings.impersonate,
            proxy=self.settings.proxy,
        )

        if not 200 <= response.status_code < 300:
            detail = self._parse_error(response)
            message = detail.error.message or default_error.format(
                reason=response.reason or response.status_code
            )
            logger.error(
                f"API request failed - model: {model}, status: {response.status_code}, "
                f"message: {message}"
            )
            raise ApiError(message, response.status_code, detail.error.status)

        return GenerateContentResponse.model_validate(response.json())

    @staticmethod
    def _parse_error(response) -> ErrorResponse:
        """Parse an error body, tolerating bodies that are not Gemini errors."""
        try:
            return ErrorResponse.model_validate(response.json())
        except ValueError:
            logger.warning(
                f"Unreadable error body: {response.text[:500] if response.text else 'empty'}"
            )
            return ErrorResponse()

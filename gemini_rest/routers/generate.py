"""Generation router exposing the Gemini client over HTTP."""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from gemini_rest.errors import (
    ApiError,
    CredentialMissingError,
    GeminiError,
    ModelRefusalError,
)
from gemini_rest.models.request import ImageRequest, SpeechRequest, TextRequest
from gemini_rest.models.response import (
    ErrorResponse,
    ImageResponse,
    SpeechResponse,
    TextResponse,
)
from gemini_rest.services.client import GeminiClient
from gemini_rest.services.session import get_client


router = APIRouter()


ERROR_RESPONSES = {
    422: {"model": ErrorResponse, "description": "Model refused the request"},
    502: {"model": ErrorResponse, "description": "Bad upstream response"},
    503: {"model": ErrorResponse, "description": "Service Unavailable"},
}


def _http_error(error: GeminiError) -> HTTPException:
    """Map a client error to the Gemini error envelope."""
    if isinstance(error, CredentialMissingError):
        status_code, status = 503, "UNAVAILABLE"
    elif isinstance(error, ApiError):
        status_code = error.status_code if error.status_code >= 400 else 502
        status = error.status or "INTERNAL"
    elif isinstance(error, ModelRefusalError):
        status_code, status = 422, "FAILED_PRECONDITION"
    else:
        status_code, status = 502, "INTERNAL"

    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": status_code,
                "message": str(error),
                "status": status,
            }
        },
    )


@router.post(
    "/v1/text",
    response_model=TextResponse,
    responses=ERROR_RESPONSES,
    summary="Generate text",
    description="Answer a prompt following a conversation, optionally with inline images.",
)
async def generate_text(
    request: TextRequest, client: GeminiClient = Depends(get_client)
) -> TextResponse:
    logger.info(f"Received text request for model: {request.model or 'default'}")
    try:
        text = await client.generate_text_response(
            request.history,
            request.prompt,
            image_parts=request.imageParts,
            model_name=request.model,
            system_instruction=request.systemInstruction,
        )
    except GeminiError as e:
        raise _http_error(e)
    return TextResponse(text=text)


@router.post(
    "/v1/image",
    response_model=ImageResponse,
    responses=ERROR_RESPONSES,
    summary="Generate image",
    description="Generate an image from a prompt, returned as a data URI.",
)
async def generate_image(
    request: ImageRequest, client: GeminiClient = Depends(get_client)
) -> ImageResponse:
    logger.info("Received image request")
    try:
        image = await client.generate_image(request.prompt)
    except GeminiError as e:
        raise _http_error(e)
    return ImageResponse(image=image)


@router.post(
    "/v1/speech",
    response_model=SpeechResponse,
    responses=ERROR_RESPONSES,
    summary="Generate speech",
    description="Synthesize speech, returned as base64 audio.",
)
async def generate_speech(
    request: SpeechRequest, client: GeminiClient = Depends(get_client)
) -> SpeechResponse:
    logger.info(f"Received speech request with voice: {request.voiceName or 'default'}")
    try:
        audio = await client.generate_speech(request.text, voice_name=request.voiceName)
    except GeminiError as e:
        raise _http_error(e)
    return SpeechResponse(audio=audio)

"""Speech-to-text and text-to-speech endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, File, Form, Response, UploadFile
from sit_chatbot.logging import setup_logging

from ..dependencies import get_synthesis_handler, get_transcription_handler
from ..domain.models import UploadedAudio
from ..exceptions import UpstreamError, UpstreamUnreachableError, ValidationError
from ..handlers import SynthesisHandler, TranscriptionHandler
from ..response_models import ErrorResponse, SynthesisRequest, TranscriptionResponse
from .errors import error_response

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["speech"])

TranscriptionHandlerDep = Annotated[
    TranscriptionHandler, Depends(get_transcription_handler)
]
SynthesisHandlerDep = Annotated[SynthesisHandler, Depends(get_synthesis_handler)]

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/speech-to-text",
    response_model=TranscriptionResponse,
    responses=ERROR_RESPONSES,
)
def speech_to_text(
    handler: TranscriptionHandlerDep,
    audio: Annotated[UploadFile | None, File()] = None,
    language: Annotated[str | None, Form()] = None,
):
    """
    Transcribes the uploaded `audio` field.

    The upload is optionally normalized to mono 16 kHz PCM before it is sent
    to the speech-to-text provider.
    """
    if audio is None:
        return error_response(400, "No audio file uploaded")

    uploaded = UploadedAudio(
        data=audio.file.read(),
        file_name=audio.filename or "recording.wav",
        content_type=audio.content_type or "application/octet-stream",
        language=language or None,
    )

    try:
        text = handler.process(uploaded)
    except ValidationError as e:
        return error_response(400, "No audio file uploaded", e.message)
    except UpstreamError as e:
        logger.error(
            "Transcription failed",
            extra={"upstream_status": e.status_code, "service": e.service},
        )
        return error_response(500, "Transcription failed", str(e))
    except UpstreamUnreachableError as e:
        logger.error(
            "Transcription failed, service unreachable",
            extra={"service": e.service, "error": str(e.cause)},
        )
        return error_response(500, "Transcription failed", str(e))

    return TranscriptionResponse(text=text)


@router.post(
    "/text-to-speech",
    response_class=Response,
    responses={200: {"content": {"audio/mpeg": {}}}, **ERROR_RESPONSES},
)
def text_to_speech(
    handler: SynthesisHandlerDep,
    request: Annotated[SynthesisRequest | None, Body()] = None,
):
    """Synthesizes speech for `text` and returns it as audio/mpeg."""
    request = request or SynthesisRequest()

    try:
        audio = handler.process(request.text, request.voice_id)
    except ValidationError as e:
        return error_response(400, "Text is required", e.message)
    except UpstreamError as e:
        logger.error(
            "Text-to-speech failed",
            extra={"upstream_status": e.status_code, "service": e.service},
        )
        return error_response(500, "Text-to-speech failed", str(e))
    except UpstreamUnreachableError as e:
        logger.error(
            "Text-to-speech failed, service unreachable",
            extra={"service": e.service, "error": str(e.cause)},
        )
        return error_response(500, "Text-to-speech failed", str(e))

    return Response(content=audio, media_type="audio/mpeg")

"""ElevenLabs implementation of the TranscriptionService interface."""

import httpx
from sit_chatbot.logging import setup_logging

from .interfaces import TranscriptionService
from ..exceptions import UpstreamError
from .upstream import decode_json, ensure_success, unreachable

logger = setup_logging()

SERVICE_NAME = "speech-to-text"


class ElevenLabsTranscriber(TranscriptionService):
    """Sends audio to the ElevenLabs speech-to-text endpoint."""

    def __init__(self, client: httpx.Client, model_id: str):
        self._client = client
        self._model_id = model_id

    def transcribe(
        self,
        audio_data: bytes,
        file_name: str,
        content_type: str,
        language: str | None = None,
    ) -> str:
        """
        Uploads audio as multipart form data and returns the transcript text.

        Raises:
            UpstreamError: If ElevenLabs answers with a non-success status
                or a body without a text transcript.
            UpstreamUnreachableError: If the request fails or times out.
        """
        form = {"model_id": self._model_id}
        if language:
            form["language_code"] = language

        try:
            response = self._client.post(
                "/v1/speech-to-text",
                data=form,
                files={"file": (file_name, audio_data, content_type)},
            )
        except httpx.TransportError as e:
            raise unreachable(SERVICE_NAME, e) from e

        ensure_success(SERVICE_NAME, response)

        body = decode_json(SERVICE_NAME, response)
        if not isinstance(body, dict) or not isinstance(body.get("text") or "", str):
            logger.error(
                "Unexpected transcription response",
                extra={"service": SERVICE_NAME, "body_type": type(body).__name__},
            )
            raise UpstreamError(
                SERVICE_NAME, response.status_code, "unexpected response body"
            )

        text = body.get("text") or ""
        logger.info(
            "Audio transcription successful",
            extra={"file_name": file_name, "characters": len(text)},
        )
        return text

"""ElevenLabs implementation of the SpeechSynthesizer interface."""

import httpx
from sit_chatbot.logging import setup_logging

from .interfaces import SpeechSynthesizer
from .upstream import ensure_success, unreachable

logger = setup_logging()

SERVICE_NAME = "text-to-speech"


class ElevenLabsSynthesizer(SpeechSynthesizer):
    """Generates MPEG speech through the ElevenLabs text-to-speech endpoint."""

    def __init__(
        self,
        client: httpx.Client,
        model_id: str,
        stability: float,
        similarity_boost: float,
    ):
        self._client = client
        self._model_id = model_id
        self._stability = stability
        self._similarity_boost = similarity_boost

    def synthesize(self, text: str, voice_id: str) -> bytes:
        """
        Requests speech for text and returns the MPEG bytes.

        Raises:
            UpstreamError: If ElevenLabs answers with a non-success status.
            UpstreamUnreachableError: If the request fails or times out.
        """
        payload = {
            "text": text,
            "model_id": self._model_id,
            "voice_settings": {
                "stability": self._stability,
                "similarity_boost": self._similarity_boost,
            },
        }
        try:
            response = self._client.post(
                f"/v1/text-to-speech/{voice_id}",
                json=payload,
                headers={"Accept": "audio/mpeg"},
            )
        except httpx.TransportError as e:
            raise unreachable(SERVICE_NAME, e) from e

        ensure_success(SERVICE_NAME, response)

        logger.info(
            "Speech synthesized",
            extra={"voice_id": voice_id, "bytes": len(response.content)},
        )
        return response.content

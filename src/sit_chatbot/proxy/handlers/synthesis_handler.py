"""Handler for text-to-speech requests."""

from sit_chatbot.logging import setup_logging

from ..exceptions import ValidationError
from ..infrastructure.interfaces import SpeechSynthesizer

logger = setup_logging()


class SynthesisHandler:
    """Validates synthesis requests and applies the default voice."""

    def __init__(self, synthesizer: SpeechSynthesizer, default_voice_id: str):
        self._synthesizer = synthesizer
        self._default_voice_id = default_voice_id

    def process(self, text: str | None, voice_id: str | None = None) -> bytes:
        """
        Synthesizes speech for text.

        Raises:
            ValidationError: If text is missing or blank.
            UpstreamError: If the text-to-speech service rejects the request.
            UpstreamUnreachableError: If the text-to-speech service cannot be reached.
        """
        if not text or not text.strip():
            raise ValidationError("Text is required")

        voice = voice_id or self._default_voice_id
        logger.info(
            "Converting text to speech",
            extra={"voice_id": voice, "preview": text[:50]},
        )
        return self._synthesizer.synthesize(text, voice)

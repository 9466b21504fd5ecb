"""Handler for speech-to-text requests."""

import os
import tempfile

from sit_chatbot.logging import setup_logging

from ..domain.models import UploadedAudio
from ..exceptions import LocalProcessingError, ValidationError
from ..infrastructure.interfaces import AudioNormalizer, TranscriptionService

logger = setup_logging()

NORMALIZED_CONTENT_TYPE = "audio/wav"


class TranscriptionHandler:
    """Orchestrates upload staging, optional normalization and transcription."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        normalizer: AudioNormalizer | None = None,
        upload_dir: str | None = None,
    ):
        self._transcription_service = transcription_service
        self._normalizer = normalizer
        self._upload_dir = upload_dir

    def process(self, audio: UploadedAudio) -> str:
        """
        Transcribes an uploaded audio file.

        The upload and its normalized copy live in a per-request temporary
        directory that is removed before this method returns or raises.

        Args:
            audio: The uploaded audio.

        Returns:
            The trimmed transcript.

        Raises:
            ValidationError: If the upload is empty.
            UpstreamError: If the speech-to-text service rejects the request.
            UpstreamUnreachableError: If the speech-to-text service cannot be reached.
        """
        if not audio.data:
            raise ValidationError("No audio file uploaded")

        logger.info(
            "Processing audio",
            extra={
                "file_name": audio.file_name,
                "content_type": audio.content_type,
                "bytes": len(audio.data),
            },
        )

        staging = tempfile.TemporaryDirectory(prefix="stt-", dir=self._upload_dir)
        try:
            with staging as temp_dir:
                source_path = os.path.join(temp_dir, _source_name(audio.file_name))
                with open(source_path, "wb") as f:
                    f.write(audio.data)

                audio_data, file_name, content_type = self._prepare(
                    audio, source_path, temp_dir
                )
                transcript = self._transcription_service.transcribe(
                    audio_data, file_name, content_type, audio.language
                )
        finally:
            logger.info("Removed temporary audio", extra={"temp_dir": staging.name})

        transcript = transcript.strip()
        logger.info("Transcription result", extra={"transcript": transcript})
        return transcript

    def _prepare(
        self, audio: UploadedAudio, source_path: str, temp_dir: str
    ) -> tuple[bytes, str, str]:
        """Returns the bytes to submit, falling back to the original upload."""
        if self._normalizer is None:
            return audio.data, audio.file_name, audio.content_type

        target_path = os.path.join(temp_dir, "normalized.wav")
        try:
            self._normalizer.normalize(source_path, target_path)
        except LocalProcessingError as e:
            logger.warning(
                "Audio normalization failed, submitting original audio",
                extra={"file_name": audio.file_name, "error": str(e.cause or e)},
            )
            return audio.data, audio.file_name, audio.content_type

        with open(target_path, "rb") as f:
            normalized = f.read()
        base_name = os.path.splitext(audio.file_name)[0] or "recording"
        return normalized, f"{base_name}.wav", NORMALIZED_CONTENT_TYPE


def _source_name(file_name: str) -> str:
    """Keeps only the extension of a client supplied file name."""
    extension = os.path.splitext(os.path.basename(file_name))[1]
    return f"original{extension}"

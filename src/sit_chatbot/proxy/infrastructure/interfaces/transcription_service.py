"""Abstract interface for speech-to-text providers."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(
        self,
        audio_data: bytes,
        file_name: str,
        content_type: str,
        language: str | None = None,
    ) -> str:
        """
        Transcribes audio data and returns the raw transcript text.

        Args:
            audio_data: Raw audio file bytes.
            file_name: File name reported to the provider.
            content_type: MIME type of audio_data.
            language: Optional language code hint.

        Returns:
            The transcript as returned by the provider.

        Raises:
            UpstreamError: If the provider answers with a non-success status.
            UpstreamUnreachableError: If the provider cannot be reached.
        """
        pass

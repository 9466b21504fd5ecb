"""Abstract interface for text-to-speech providers."""

from abc import ABC, abstractmethod


class SpeechSynthesizer(ABC):
    """Abstract base class for text-to-speech backends."""

    @abstractmethod
    def synthesize(self, text: str, voice_id: str) -> bytes:
        """
        Synthesizes speech for text using the given voice.

        Returns:
            MPEG audio bytes.

        Raises:
            UpstreamError: If the provider answers with a non-success status.
            UpstreamUnreachableError: If the provider cannot be reached.
        """
        pass

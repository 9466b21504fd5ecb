"""Abstract interface for the request proxy as seen by the client."""

from abc import ABC, abstractmethod
from typing import Any


class ChatProxy(ABC):
    """The three proxy operations used by one conversational turn."""

    @abstractmethod
    def transcribe(
        self,
        audio: bytes,
        file_name: str = "recording.wav",
        content_type: str = "audio/wav",
    ) -> str:
        """
        Sends recorded audio for transcription.

        Raises:
            ProxyRequestError: If the proxy answers with a non-success status.
            ProxyUnavailableError: If the proxy cannot be reached.
        """
        pass

    @abstractmethod
    def chat(self, payload: dict[str, Any]) -> Any:
        """
        Sends a chat-completion request and returns the decoded response.

        Raises:
            ProxyRequestError: If the proxy answers with a non-success status.
            ProxyUnavailableError: If the proxy cannot be reached.
        """
        pass

    @abstractmethod
    def synthesize(self, text: str, voice_id: str | None = None) -> bytes:
        """
        Requests MPEG speech for text.

        Raises:
            ProxyRequestError: If the proxy answers with a non-success status.
            ProxyUnavailableError: If the proxy cannot be reached.
        """
        pass

"""Abstract interface for the chat-completion backend."""

from abc import ABC, abstractmethod
from typing import Any


class ChatBackend(ABC):
    """Abstract base class for OpenAI-compatible chat-completion backends."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Base URL of the backend, reported in error responses."""
        pass

    @abstractmethod
    def complete(self, payload: dict[str, Any]) -> Any:
        """
        Forwards a chat-completion request and returns the decoded JSON body.

        Raises:
            UpstreamError: If the backend answers with a non-success status.
            UpstreamUnreachableError: If the backend cannot be reached.
        """
        pass

    @abstractmethod
    def check_health(self) -> bool:
        """Returns True when the backend health endpoint answers successfully."""
        pass

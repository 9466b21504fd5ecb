"""HTTP client for the OpenAI-compatible RAG backend."""

from typing import Any

import httpx
from sit_chatbot.logging import setup_logging

from .interfaces import ChatBackend
from .upstream import decode_json, ensure_success, unreachable

logger = setup_logging()

SERVICE_NAME = "RAG backend"


class RagChatBackend(ChatBackend):
    """Relays chat-completion requests to the RAG backend."""

    def __init__(self, client: httpx.Client, base_url: str, health_timeout: float = 5.0):
        self._client = client
        self._base_url = base_url
        self._health_timeout = health_timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def complete(self, payload: dict[str, Any]) -> Any:
        """
        Posts payload to /v1/chat/completions and returns the JSON body untouched.

        Raises:
            UpstreamError: If the backend answers with a non-success status.
            UpstreamUnreachableError: If the request fails or times out.
        """
        url = f"{self._base_url}/v1/chat/completions"
        logger.info("Forwarding chat request", extra={"url": url})
        try:
            response = self._client.post(url, json=payload)
        except httpx.TransportError as e:
            raise unreachable(SERVICE_NAME, e) from e

        logger.info(
            "RAG backend responded",
            extra={"status_code": response.status_code},
        )
        ensure_success(SERVICE_NAME, response)
        return decode_json(SERVICE_NAME, response)

    def check_health(self) -> bool:
        try:
            response = self._client.get(
                f"{self._base_url}/health", timeout=self._health_timeout
            )
        except httpx.TransportError as e:
            logger.warning(
                "RAG backend health check failed",
                extra={"url": self._base_url, "error": str(e)},
            )
            return False

        if not response.is_success:
            logger.warning(
                "RAG backend health check returned error status",
                extra={"url": self._base_url, "status_code": response.status_code},
            )
            return False

        logger.info("RAG backend reachable", extra={"url": self._base_url})
        return True

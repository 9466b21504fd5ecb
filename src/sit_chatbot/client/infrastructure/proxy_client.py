"""HTTP implementation of the ChatProxy interface."""

import logging
from typing import Any

import httpx

from ..exceptions import ProxyRequestError, ProxyUnavailableError
from .interfaces import ChatProxy

logger = logging.getLogger(__name__)


class HttpProxyClient(ChatProxy):
    """Calls the request proxy endpoints over HTTP."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def transcribe(
        self,
        audio: bytes,
        file_name: str = "recording.wav",
        content_type: str = "audio/wav",
    ) -> str:
        logger.info("Sending audio for transcription", extra={"bytes": len(audio)})
        response = self._post(
            "speech-to-text",
            "/api/speech-to-text",
            files={"audio": (file_name, audio, content_type)},
        )
        result = self._json("speech-to-text", response)
        text = result.get("text") if isinstance(result, dict) else None
        if not isinstance(text, str):
            logger.error(
                "Unexpected transcription response",
                extra={"body_type": type(result).__name__},
            )
            raise ProxyRequestError(
                "speech-to-text", response.status_code, "unexpected response body"
            )
        return text

    def chat(self, payload: dict[str, Any]) -> Any:
        response = self._post("chat", "/api/chat", json=payload)
        return self._json("chat", response)

    def synthesize(self, text: str, voice_id: str | None = None) -> bytes:
        body = {"text": text}
        if voice_id:
            body["voice_id"] = voice_id
        response = self._post("text-to-speech", "/api/text-to-speech", json=body)
        return response.content

    def _post(self, operation: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.post(path, **kwargs)
        except httpx.TransportError as e:
            logger.error(
                "Proxy unreachable",
                extra={"operation": operation, "error": str(e)},
            )
            raise ProxyUnavailableError(operation, e) from e

        if not response.is_success:
            details = _error_details(response)
            logger.error(
                "Proxy request failed",
                extra={
                    "operation": operation,
                    "status_code": response.status_code,
                    "details": details,
                },
            )
            raise ProxyRequestError(operation, response.status_code, details)
        return response

    def _json(self, operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ProxyRequestError(
                operation, response.status_code, "invalid JSON response"
            ) from e


def _error_details(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        return str(body.get("details") or body.get("error") or "")
    return str(body)[:200]

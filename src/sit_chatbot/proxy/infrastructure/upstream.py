"""Helpers shared by the upstream HTTP clients."""

import httpx
from sit_chatbot.logging import setup_logging

from ..exceptions import UpstreamError, UpstreamUnreachableError

logger = setup_logging()

BODY_LOG_LIMIT = 500


def truncate(body: str, limit: int = BODY_LOG_LIMIT) -> str:
    """Shortens an upstream body for logs and error details."""
    if len(body) <= limit:
        return body
    return body[:limit] + "..."


def ensure_success(service: str, response: httpx.Response) -> None:
    """
    Raises UpstreamError when the upstream response is not a 2xx.

    Raises:
        UpstreamError: Carrying the upstream status and truncated body.
    """
    if response.is_success:
        return
    body = truncate(response.text)
    logger.error(
        "Upstream returned error status",
        extra={"service": service, "status_code": response.status_code, "body": body},
    )
    raise UpstreamError(service, response.status_code, body)


def unreachable(service: str, error: httpx.TransportError) -> UpstreamUnreachableError:
    """Logs a transport failure and wraps it in UpstreamUnreachableError."""
    logger.error(
        "Upstream unreachable",
        extra={
            "service": service,
            "error_type": type(error).__name__,
            "error": str(error),
        },
    )
    return UpstreamUnreachableError(service, error)


def decode_json(service: str, response: httpx.Response):
    """
    Decodes a successful upstream response body as JSON.

    Raises:
        UpstreamError: If the body is not valid JSON.
    """
    try:
        return response.json()
    except ValueError:
        body = truncate(response.text)
        logger.error(
            "Upstream returned invalid JSON",
            extra={"service": service, "status_code": response.status_code, "body": body},
        )
        raise UpstreamError(service, response.status_code, f"invalid JSON body: {body}")

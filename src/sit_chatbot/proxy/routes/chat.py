"""Chat-completion relay endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sit_chatbot.logging import setup_logging

from ..dependencies import get_chat_backend
from ..exceptions import UpstreamError, UpstreamUnreachableError
from ..infrastructure.interfaces import ChatBackend
from ..response_models import ErrorResponse
from .errors import error_response

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["chat"])

ChatBackendDep = Annotated[ChatBackend, Depends(get_chat_backend)]

RELAY_ERROR = "Failed to get response from RAG backend"


@router.post("/chat", responses={500: {"model": ErrorResponse}})
def chat(backend: ChatBackendDep, payload: Annotated[dict[str, Any], Body()]):
    """Forwards an OpenAI-style chat-completion request to the RAG backend."""
    logger.info(
        "Received chat request",
        extra={
            "model": payload.get("model"),
            "message_count": len(payload.get("messages") or []),
        },
    )

    try:
        data = backend.complete(payload)
    except UpstreamError as e:
        logger.error(
            "Chat relay failed",
            extra={"upstream_status": e.status_code, "backend_url": backend.base_url},
        )
        return error_response(500, RELAY_ERROR, str(e), backend.base_url)
    except UpstreamUnreachableError as e:
        logger.error(
            "Chat relay failed, backend unreachable",
            extra={"error": str(e.cause), "backend_url": backend.base_url},
        )
        return error_response(500, RELAY_ERROR, str(e), backend.base_url)

    return JSONResponse(content=data)

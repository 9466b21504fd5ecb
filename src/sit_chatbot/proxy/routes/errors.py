"""Error response construction shared by the API routes."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sit_chatbot.logging import setup_logging

from ..response_models import ErrorResponse

logger = setup_logging()

INVALID_INPUT_ERRORS = {
    "/api/speech-to-text": "No audio file uploaded",
    "/api/text-to-speech": "Text is required",
    "/api/chat": "Invalid chat request",
}


def error_response(
    status_code: int,
    error: str,
    details: str | None = None,
    backend_url: str | None = None,
) -> JSONResponse:
    """Builds the JSON error body returned to the UI."""
    body = ErrorResponse(error=error, details=details, backend_url=backend_url)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def invalid_input_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reports malformed request bodies and form fields as 400 errors."""
    details = summarize_errors(exc.errors())
    logger.warning(
        "Rejected malformed request",
        extra={"path": request.url.path, "details": details},
    )
    error = INVALID_INPUT_ERRORS.get(request.url.path, "Invalid request")
    return error_response(400, error, details)


def summarize_errors(errors) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in errors
    )

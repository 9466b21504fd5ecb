"""Request and response models for the proxy API."""

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Response returned after a successful transcription."""

    text: str


class SynthesisRequest(BaseModel):
    """Body of a text-to-speech request."""

    text: str | None = None
    voice_id: str | None = None


class ErrorResponse(BaseModel):
    """Error body returned by every proxy endpoint."""

    error: str
    details: str | None = None
    backend_url: str | None = None

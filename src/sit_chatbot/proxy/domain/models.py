"""Domain models for the request proxy."""

from pydantic import BaseModel


class UploadedAudio(BaseModel, frozen=True):
    """An audio upload received from the UI, held for a single transcription."""

    data: bytes
    file_name: str = "recording.wav"
    content_type: str = "application/octet-stream"
    language: str | None = None

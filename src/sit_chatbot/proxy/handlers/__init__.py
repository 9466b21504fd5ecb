"""Handler exports."""

from .synthesis_handler import SynthesisHandler
from .transcription_handler import TranscriptionHandler

__all__ = ["SynthesisHandler", "TranscriptionHandler"]

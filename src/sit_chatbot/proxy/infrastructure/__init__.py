"""Infrastructure layer exports."""

from .elevenlabs_synthesizer import ElevenLabsSynthesizer
from .elevenlabs_transcriber import ElevenLabsTranscriber
from .rag_backend import RagChatBackend

__all__ = ["ElevenLabsSynthesizer", "ElevenLabsTranscriber", "RagChatBackend"]

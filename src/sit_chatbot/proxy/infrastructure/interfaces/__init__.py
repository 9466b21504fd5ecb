"""Infrastructure interface exports."""

from .audio_normalizer import AudioNormalizer
from .chat_backend import ChatBackend
from .speech_synthesizer import SpeechSynthesizer
from .transcription_service import TranscriptionService

__all__ = [
    "AudioNormalizer",
    "ChatBackend",
    "SpeechSynthesizer",
    "TranscriptionService",
]

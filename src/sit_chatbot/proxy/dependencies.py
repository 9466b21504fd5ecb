"""FastAPI dependency injection configuration."""

import httpx
from sit_chatbot.logging import setup_logging

from .config import AppConfig, load_config
from .domain import FfmpegAudioNormalizer
from .handlers import SynthesisHandler, TranscriptionHandler
from .infrastructure import ElevenLabsSynthesizer, ElevenLabsTranscriber, RagChatBackend
from .infrastructure.interfaces import ChatBackend

logger = setup_logging()

_config = load_config()

# ElevenLabs setup
_elevenlabs_client = httpx.Client(
    base_url=_config.elevenlabs.base_url,
    headers={"xi-api-key": _config.elevenlabs.api_key},
    timeout=_config.elevenlabs.timeout_seconds,
)

_transcriber = ElevenLabsTranscriber(
    _elevenlabs_client, model_id=_config.elevenlabs.stt_model_id
)
_synthesizer = ElevenLabsSynthesizer(
    _elevenlabs_client,
    model_id=_config.elevenlabs.tts_model_id,
    stability=_config.elevenlabs.stability,
    similarity_boost=_config.elevenlabs.similarity_boost,
)

# Audio pre-processing setup
_normalizer = (
    FfmpegAudioNormalizer(
        ffmpeg_path=_config.audio.ffmpeg_path,
        sample_rate=_config.audio.sample_rate,
        channels=_config.audio.channels,
        timeout_seconds=_config.audio.timeout_seconds,
    )
    if _config.audio.normalize
    else None
)

# RAG backend setup
_rag_client = httpx.Client(timeout=_config.rag_backend.timeout_seconds)
_chat_backend = RagChatBackend(
    _rag_client,
    base_url=_config.rag_backend.base_url,
    health_timeout=_config.rag_backend.health_timeout_seconds,
)


def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return _config


def get_transcription_handler() -> TranscriptionHandler:
    """Returns the configured speech-to-text handler."""
    return TranscriptionHandler(
        _transcriber, normalizer=_normalizer, upload_dir=_config.audio.upload_dir
    )


def get_synthesis_handler() -> SynthesisHandler:
    """Returns the configured text-to-speech handler."""
    return SynthesisHandler(
        _synthesizer, default_voice_id=_config.elevenlabs.default_voice_id
    )


def get_chat_backend() -> ChatBackend:
    """Returns the configured chat-completion backend."""
    return _chat_backend

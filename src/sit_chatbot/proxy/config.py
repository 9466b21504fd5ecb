"""Proxy configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class ElevenLabsConfig(BaseModel, frozen=True):
    """Speech provider configuration shared by speech-to-text and text-to-speech."""

    api_key: str
    base_url: str = "https://api.elevenlabs.io"
    stt_model_id: str = "scribe_v1"
    tts_model_id: str = "eleven_monolingual_v1"
    default_voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    stability: float = 0.5
    similarity_boost: float = 0.5
    timeout_seconds: float = 30.0


class RagBackendConfig(BaseModel, frozen=True):
    """Chat-completion (RAG) backend configuration."""

    base_url: str = "http://localhost:8000"
    timeout_seconds: float = 30.0
    health_timeout_seconds: float = 5.0


class AudioConfig(BaseModel, frozen=True):
    """Upload pre-processing configuration."""

    normalize: bool = True
    ffmpeg_path: str = "ffmpeg"
    sample_rate: int = 16000
    channels: int = 1
    timeout_seconds: float = 30.0
    upload_dir: str | None = None


class ServerConfig(BaseModel, frozen=True):
    """HTTP listener configuration."""

    host: str = "127.0.0.1"
    port: int = 3000
    static_dir: str | None = None
    cors_origins: tuple[str, ...] = ("*",)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    elevenlabs: ElevenLabsConfig
    rag_backend: RagBackendConfig
    audio: AudioConfig
    server: ServerConfig


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    upstream_timeout = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30"))
    return AppConfig(
        elevenlabs=ElevenLabsConfig(
            api_key=os.getenv("ELEVENLABS_API_KEY", ""),
            base_url=os.getenv("ELEVENLABS_BASE_URL", "https://api.elevenlabs.io"),
            stt_model_id=os.getenv("ELEVENLABS_STT_MODEL", "scribe_v1"),
            tts_model_id=os.getenv("ELEVENLABS_TTS_MODEL", "eleven_monolingual_v1"),
            default_voice_id=os.getenv("ELEVENLABS_VOICE_ID", "21m00Tcm4TlvDq8ikWAM"),
            stability=float(os.getenv("TTS_STABILITY", "0.5")),
            similarity_boost=float(os.getenv("TTS_SIMILARITY_BOOST", "0.5")),
            timeout_seconds=upstream_timeout,
        ),
        rag_backend=RagBackendConfig(
            base_url=os.getenv("RAG_BACKEND_URL", "http://localhost:8000").rstrip("/"),
            timeout_seconds=upstream_timeout,
        ),
        audio=AudioConfig(
            normalize=_env_flag("AUDIO_NORMALIZATION", "true"),
            ffmpeg_path=os.getenv("FFMPEG_PATH", "ffmpeg"),
            sample_rate=int(os.getenv("AUDIO_SAMPLE_RATE", "16000")),
            upload_dir=os.getenv("UPLOAD_DIR") or None,
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "3000")),
            static_dir=os.getenv("STATIC_DIR") or None,
            cors_origins=tuple(
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ),
        ),
    )

"""Client configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class ProxyConfig(BaseModel, frozen=True):
    """Request proxy connection configuration."""

    url: str = "http://127.0.0.1:3000"
    timeout_seconds: float = 60.0


class MicrophoneConfig(BaseModel, frozen=True):
    """Capture configuration."""

    sample_rate: int = 16000
    channels: int = 1


class PlaybackConfig(BaseModel, frozen=True):
    """Playback configuration."""

    ffplay_path: str = "ffplay"


class AppConfig(BaseModel, frozen=True):
    """Root client configuration."""

    proxy: ProxyConfig
    microphone: MicrophoneConfig
    playback: PlaybackConfig
    chat_model: str = "gpt-4"
    voice_id: str | None = "21m00Tcm4TlvDq8ikWAM"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        proxy=ProxyConfig(
            url=os.getenv("PROXY_URL", "http://127.0.0.1:3000").rstrip("/"),
            timeout_seconds=float(os.getenv("PROXY_TIMEOUT_SECONDS", "60")),
        ),
        microphone=MicrophoneConfig(
            sample_rate=int(os.getenv("MIC_SAMPLE_RATE", "16000")),
            channels=int(os.getenv("MIC_CHANNELS", "1")),
        ),
        playback=PlaybackConfig(
            ffplay_path=os.getenv("FFPLAY_PATH", "ffplay"),
        ),
        chat_model=os.getenv("CHAT_MODEL", "gpt-4"),
        voice_id=os.getenv("VOICE_ID", "21m00Tcm4TlvDq8ikWAM") or None,
    )

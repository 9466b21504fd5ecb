"""Dependency injection configuration for the terminal client."""

import httpx

from .avatar import SpeakingAvatar
from .config import load_config
from .console import TerminalConsole
from .infrastructure import FfplayAudioPlayer, HttpProxyClient, TerminalView
from .infrastructure.sounddevice_microphone import SoundDeviceMicrophone
from .orchestrator import SessionOrchestrator

_config = load_config()

_http_client = httpx.Client(
    base_url=_config.proxy.url, timeout=_config.proxy.timeout_seconds
)

_view = TerminalView()
_proxy = HttpProxyClient(_http_client)
_microphone = SoundDeviceMicrophone(
    sample_rate=_config.microphone.sample_rate,
    channels=_config.microphone.channels,
)
_player = FfplayAudioPlayer(ffplay_path=_config.playback.ffplay_path)
_avatar = SpeakingAvatar(on_change=_view.render_avatar)


def get_orchestrator() -> SessionOrchestrator:
    """Returns the configured session orchestrator."""
    return SessionOrchestrator(
        proxy=_proxy,
        microphone=_microphone,
        player=_player,
        view=_view,
        indicator=_avatar,
        chat_model=_config.chat_model,
        voice_id=_config.voice_id,
    )


def get_console() -> TerminalConsole:
    """Returns the configured terminal console."""
    return TerminalConsole(get_orchestrator(), _view)

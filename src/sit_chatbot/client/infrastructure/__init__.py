"""Infrastructure layer exports."""

from .ffplay_player import FfplayAudioPlayer
from .proxy_client import HttpProxyClient
from .terminal_view import TerminalView

__all__ = ["FfplayAudioPlayer", "HttpProxyClient", "TerminalView"]

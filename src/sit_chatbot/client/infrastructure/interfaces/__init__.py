"""Infrastructure interface exports."""

from .audio_player import AudioPlayer
from .chat_proxy import ChatProxy
from .conversation_view import ConversationView
from .microphone import Microphone
from .speaking_indicator import SpeakingIndicator

__all__ = [
    "AudioPlayer",
    "ChatProxy",
    "ConversationView",
    "Microphone",
    "SpeakingIndicator",
]

"""Abstract interface for audio playback."""

from abc import ABC, abstractmethod


class AudioPlayer(ABC):
    @abstractmethod
    def play(self, audio: bytes) -> None:
        """
        Plays MPEG audio, returning when playback has finished.

        Raises:
            AudioPlaybackError: If the audio cannot be played.
        """
        pass

"""Abstract interface for audio capture."""

from abc import ABC, abstractmethod


class Microphone(ABC):
    """A capture device that records one utterance at a time."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    @abstractmethod
    def check_permission(self) -> None:
        """
        Verifies that an input device can be opened.

        Raises:
            MicrophoneError: If no usable input device is available.
        """
        pass

    @abstractmethod
    def start(self) -> None:
        """
        Opens the capture stream.

        Raises:
            MicrophoneError: If the stream cannot be opened or is already open.
        """
        pass

    @abstractmethod
    def stop(self) -> bytes:
        """Releases the capture stream and returns the recording as WAV bytes."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Releases the capture stream, discarding anything recorded."""
        pass

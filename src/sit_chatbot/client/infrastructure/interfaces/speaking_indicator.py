"""Abstract interface for the decorative speaking indicator."""

from abc import ABC, abstractmethod


class SpeakingIndicator(ABC):
    @abstractmethod
    def start(self) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

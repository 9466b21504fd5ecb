"""Abstract interface for audio pre-processing."""

from abc import ABC, abstractmethod


class AudioNormalizer(ABC):
    """Converts an uploaded audio file into the provider's preferred format."""

    @abstractmethod
    def normalize(self, source_path: str, target_path: str) -> None:
        """
        Writes a normalized copy of source_path to target_path.

        Raises:
            LocalProcessingError: If the conversion fails.
        """
        pass

"""Domain layer exports."""

from .audio_normalizer import FfmpegAudioNormalizer
from .models import UploadedAudio

__all__ = ["FfmpegAudioNormalizer", "UploadedAudio"]

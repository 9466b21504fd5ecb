"""Audio normalization through an external ffmpeg process."""

import os
import subprocess

from sit_chatbot.logging import setup_logging

from ..exceptions import LocalProcessingError
from ..infrastructure.interfaces import AudioNormalizer

logger = setup_logging()


class FfmpegAudioNormalizer(AudioNormalizer):
    """Re-encodes uploads to mono, fixed sample rate, 16-bit PCM WAV."""

    def __init__(
        self,
        ffmpeg_path: str = "ffmpeg",
        sample_rate: int = 16000,
        channels: int = 1,
        timeout_seconds: float = 30.0,
    ):
        self._ffmpeg_path = ffmpeg_path
        self._sample_rate = sample_rate
        self._channels = channels
        self._timeout_seconds = timeout_seconds

    def normalize(self, source_path: str, target_path: str) -> None:
        """
        Converts the audio at source_path and writes it to target_path.

        Raises:
            LocalProcessingError: If ffmpeg is missing, fails, times out or
                produces no output.
        """
        cmd = self._build_command(source_path, target_path)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self._timeout_seconds,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise LocalProcessingError(os.path.basename(source_path), e) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()[-400:]
            raise LocalProcessingError(
                os.path.basename(source_path),
                RuntimeError(f"ffmpeg exited {result.returncode}: {stderr}"),
            )

        if not os.path.exists(target_path) or os.path.getsize(target_path) == 0:
            raise LocalProcessingError(
                os.path.basename(source_path),
                RuntimeError("ffmpeg produced no output"),
            )

        logger.info(
            "Audio normalized",
            extra={
                "source": os.path.basename(source_path),
                "sample_rate": self._sample_rate,
                "channels": self._channels,
            },
        )

    def _build_command(self, source_path: str, target_path: str) -> list[str]:
        return [
            self._ffmpeg_path,
            "-y",
            "-loglevel",
            "error",
            "-i",
            source_path,
            "-ac",
            str(self._channels),
            "-ar",
            str(self._sample_rate),
            "-acodec",
            "pcm_s16le",
            target_path,
        ]

"""Audio playback through an external ffplay process."""

import logging
import subprocess

from ..exceptions import AudioPlaybackError
from .interfaces import AudioPlayer

logger = logging.getLogger(__name__)


class FfplayAudioPlayer(AudioPlayer):
    """Pipes audio into ffplay and waits for it to finish."""

    def __init__(self, ffplay_path: str = "ffplay"):
        self._ffplay_path = ffplay_path

    def play(self, audio: bytes) -> None:
        cmd = [
            self._ffplay_path,
            "-nodisp",
            "-autoexit",
            "-loglevel",
            "error",
            "-i",
            "pipe:0",
        ]
        logger.info("Started playing audio", extra={"bytes": len(audio)})
        try:
            result = subprocess.run(cmd, input=audio, capture_output=True)
        except OSError as e:
            raise AudioPlaybackError(f"Could not start {self._ffplay_path}", e) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()[-400:]
            raise AudioPlaybackError(f"ffplay exited {result.returncode}: {stderr}")
        logger.info("Finished playing audio")

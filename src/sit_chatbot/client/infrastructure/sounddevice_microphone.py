"""Microphone capture through PortAudio (sounddevice)."""

import logging
import threading

import numpy as np
import sounddevice as sd

from ..domain.audio import encode_wav
from ..exceptions import MicrophoneError
from .interfaces import Microphone

logger = logging.getLogger(__name__)

DTYPE = "int16"


class SoundDeviceMicrophone(Microphone):
    """Records from the default input device into memory."""

    def __init__(self, sample_rate: int = 16000, channels: int = 1):
        self._sample_rate = sample_rate
        self._channels = channels
        self._stream: sd.InputStream | None = None
        self._frames: list[np.ndarray] = []
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def check_permission(self) -> None:
        try:
            sd.check_input_settings(
                samplerate=self._sample_rate, channels=self._channels, dtype=DTYPE
            )
        except (sd.PortAudioError, ValueError) as e:
            logger.error("Microphone unavailable", extra={"error": str(e)})
            raise MicrophoneError("No usable microphone", e) from e

    def start(self) -> None:
        if self._stream is not None:
            raise MicrophoneError("Microphone is already recording")

        with self._lock:
            self._frames = []
        try:
            stream = sd.InputStream(
                samplerate=self._sample_rate,
                channels=self._channels,
                dtype=DTYPE,
                callback=self._on_audio,
            )
            stream.start()
        except (sd.PortAudioError, ValueError) as e:
            logger.error("Could not open microphone", extra={"error": str(e)})
            raise MicrophoneError("Could not open microphone", e) from e

        self._stream = stream
        logger.info("Recording started", extra={"sample_rate": self._sample_rate})

    def stop(self) -> bytes:
        self.close()
        with self._lock:
            frames, self._frames = self._frames, []
        if not frames:
            return b""

        samples = np.concatenate(frames, axis=0)
        logger.info(
            "Recording stopped",
            extra={"seconds": round(len(samples) / self._sample_rate, 2)},
        )
        return encode_wav(samples, self._sample_rate, self._channels)

    def close(self) -> None:
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            stream.stop()
            stream.close()
        except sd.PortAudioError as e:
            logger.warning("Error stopping microphone", extra={"error": str(e)})

    def _on_audio(self, indata, frames, time_info, status) -> None:
        if status:
            logger.warning("Microphone status", extra={"status": str(status)})
        with self._lock:
            self._frames.append(indata.copy())

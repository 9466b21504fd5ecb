"""PCM helpers for captured microphone audio."""

import io
import wave

import numpy as np


def encode_wav(samples: np.ndarray, sample_rate: int, channels: int = 1) -> bytes:
    """Packs int16 samples into an in-memory WAV file."""
    pcm = np.asarray(samples, dtype=np.int16)
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(channels)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(pcm.tobytes())
    return buffer.getvalue()

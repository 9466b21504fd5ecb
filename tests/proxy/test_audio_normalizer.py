import subprocess

import pytest

from sit_chatbot.proxy.domain import FfmpegAudioNormalizer
from sit_chatbot.proxy.domain import audio_normalizer
from sit_chatbot.proxy.exceptions import LocalProcessingError


@pytest.fixture
def paths(tmp_path):
    source = tmp_path / "original.webm"
    source.write_bytes(b"webm")
    return str(source), str(tmp_path / "normalized.wav")


def _fake_run(returncode=0, write_output=True, stderr=b""):
    calls = []

    def run(cmd, capture_output, timeout):
        calls.append(cmd)
        if write_output:
            with open(cmd[-1], "wb") as f:
                f.write(b"RIFF")
        return subprocess.CompletedProcess(cmd, returncode, b"", stderr)

    return run, calls


def test_builds_mono_pcm16_command(monkeypatch, paths):
    run, calls = _fake_run()
    monkeypatch.setattr(audio_normalizer.subprocess, "run", run)
    source, target = paths

    FfmpegAudioNormalizer(ffmpeg_path="/opt/ffmpeg", sample_rate=16000).normalize(
        source, target
    )

    cmd = calls[0]
    assert cmd[0] == "/opt/ffmpeg"
    assert cmd[cmd.index("-i") + 1] == source
    assert cmd[cmd.index("-ac") + 1] == "1"
    assert cmd[cmd.index("-ar") + 1] == "16000"
    assert cmd[cmd.index("-acodec") + 1] == "pcm_s16le"
    assert cmd[-1] == target


def test_nonzero_exit_raises(monkeypatch, paths):
    run, _ = _fake_run(returncode=1, write_output=False, stderr=b"Invalid data")
    monkeypatch.setattr(audio_normalizer.subprocess, "run", run)

    with pytest.raises(LocalProcessingError) as exc_info:
        FfmpegAudioNormalizer().normalize(*paths)

    assert "Invalid data" in str(exc_info.value.cause)


def test_missing_output_raises(monkeypatch, paths):
    run, _ = _fake_run(write_output=False)
    monkeypatch.setattr(audio_normalizer.subprocess, "run", run)

    with pytest.raises(LocalProcessingError):
        FfmpegAudioNormalizer().normalize(*paths)


@pytest.mark.parametrize(
    "error",
    [FileNotFoundError("ffmpeg"), subprocess.TimeoutExpired("ffmpeg", 30)],
)
def test_missing_binary_or_timeout_raises(monkeypatch, paths, error):
    def run(cmd, capture_output, timeout):
        raise error

    monkeypatch.setattr(audio_normalizer.subprocess, "run", run)

    with pytest.raises(LocalProcessingError) as exc_info:
        FfmpegAudioNormalizer().normalize(*paths)

    assert exc_info.value.cause is error

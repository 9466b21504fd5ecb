import logging
import os

import pytest

from sit_chatbot.proxy.domain.models import UploadedAudio
from sit_chatbot.proxy.exceptions import (
    LocalProcessingError,
    UpstreamError,
    UpstreamUnreachableError,
    ValidationError,
)
from sit_chatbot.proxy.handlers import TranscriptionHandler
from sit_chatbot.proxy.infrastructure.interfaces import (
    AudioNormalizer,
    TranscriptionService,
)


class FakeTranscriber(TranscriptionService):
    def __init__(self, upload_dir, result="  hello world \n", error=None):
        self.upload_dir = upload_dir
        self.result = result
        self.error = error
        self.calls = []
        self.files_during_call = []

    def transcribe(self, audio_data, file_name, content_type, language=None):
        self.calls.append((audio_data, file_name, content_type, language))
        for root, _, files in os.walk(self.upload_dir):
            self.files_during_call.extend(os.path.join(root, f) for f in files)
        if self.error is not None:
            raise self.error
        return self.result


class CopyingNormalizer(AudioNormalizer):
    def __init__(self):
        self.calls = []

    def normalize(self, source_path, target_path):
        self.calls.append((source_path, target_path))
        with open(target_path, "wb") as f:
            f.write(b"RIFF-normalized")


class FailingNormalizer(AudioNormalizer):
    def normalize(self, source_path, target_path):
        raise LocalProcessingError(os.path.basename(source_path), RuntimeError("no ffmpeg"))


def _remaining(path):
    return [os.path.join(root, f) for root, _, files in os.walk(path) for f in files] + [
        os.path.join(root, d) for root, dirs, _ in os.walk(path) for d in dirs
    ]


def _upload(data=b"webm-bytes", name="recording.webm"):
    return UploadedAudio(data=data, file_name=name, content_type="audio/webm")


def test_returns_trimmed_transcript_and_removes_files(tmp_path):
    transcriber = FakeTranscriber(tmp_path)
    handler = TranscriptionHandler(transcriber, upload_dir=str(tmp_path))

    assert handler.process(_upload()) == "hello world"
    assert transcriber.files_during_call
    assert _remaining(tmp_path) == []


def test_submits_normalized_audio_as_wav(tmp_path):
    transcriber = FakeTranscriber(tmp_path)
    normalizer = CopyingNormalizer()
    handler = TranscriptionHandler(transcriber, normalizer, upload_dir=str(tmp_path))

    handler.process(_upload())

    audio_data, file_name, content_type, _ = transcriber.calls[0]
    assert audio_data == b"RIFF-normalized"
    assert file_name == "recording.wav"
    assert content_type == "audio/wav"
    assert len(transcriber.files_during_call) == 2
    assert _remaining(tmp_path) == []


def test_normalization_failure_falls_back_to_original(tmp_path):
    transcriber = FakeTranscriber(tmp_path)
    handler = TranscriptionHandler(
        transcriber, FailingNormalizer(), upload_dir=str(tmp_path)
    )

    assert handler.process(_upload()) == "hello world"
    assert transcriber.calls[0][:3] == (b"webm-bytes", "recording.webm", "audio/webm")
    assert _remaining(tmp_path) == []


def test_files_removed_when_upstream_fails(tmp_path):
    transcriber = FakeTranscriber(
        tmp_path, error=UpstreamError("speech-to-text", 401, "invalid key")
    )
    handler = TranscriptionHandler(
        transcriber, CopyingNormalizer(), upload_dir=str(tmp_path)
    )

    with pytest.raises(UpstreamError) as exc_info:
        handler.process(_upload())

    assert exc_info.value.status_code == 401
    assert _remaining(tmp_path) == []


@pytest.mark.parametrize(
    "error",
    [UpstreamUnreachableError("speech-to-text"), RuntimeError("unexpected")],
)
def test_files_removed_on_any_exception(tmp_path, error):
    handler = TranscriptionHandler(
        FakeTranscriber(tmp_path, error=error), upload_dir=str(tmp_path)
    )

    with pytest.raises(type(error)):
        handler.process(_upload())

    assert _remaining(tmp_path) == []


def test_empty_upload_is_rejected_without_upstream_call(tmp_path):
    transcriber = FakeTranscriber(tmp_path)
    handler = TranscriptionHandler(transcriber, upload_dir=str(tmp_path))

    with pytest.raises(ValidationError):
        handler.process(_upload(data=b""))

    assert transcriber.calls == []
    assert _remaining(tmp_path) == []


def test_client_file_name_cannot_escape_temp_dir(tmp_path):
    transcriber = FakeTranscriber(tmp_path)
    handler = TranscriptionHandler(transcriber, upload_dir=str(tmp_path))

    handler.process(_upload(name="../../etc/evil.wav"))

    assert [os.path.basename(p) for p in transcriber.files_during_call] == ["original.wav"]
    assert _remaining(tmp_path) == []


def test_language_is_forwarded(tmp_path):
    transcriber = FakeTranscriber(tmp_path)
    handler = TranscriptionHandler(transcriber, upload_dir=str(tmp_path))

    handler.process(
        UploadedAudio(data=b"x", file_name="a.wav", content_type="audio/wav", language="de")
    )

    assert transcriber.calls[0][3] == "de"


class CleanupWatcher(logging.Handler):
    """Notes whether the temp directory still exists when cleanup is logged."""

    def __init__(self):
        super().__init__()
        self.existed = []

    def emit(self, record):
        if record.getMessage() == "Removed temporary audio":
            self.existed.append(os.path.exists(record.temp_dir))


@pytest.mark.parametrize("error", [None, UpstreamError("speech-to-text", 500, "boom")])
def test_cleanup_is_logged_after_removal(tmp_path, error):
    watcher = CleanupWatcher()
    logging.getLogger().addHandler(watcher)
    handler = TranscriptionHandler(
        FakeTranscriber(tmp_path, error=error), upload_dir=str(tmp_path)
    )

    try:
        if error is None:
            handler.process(_upload())
        else:
            with pytest.raises(UpstreamError):
                handler.process(_upload())
    finally:
        logging.getLogger().removeHandler(watcher)

    assert watcher.existed == [False]

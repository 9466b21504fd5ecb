import httpx
import pytest
from fastapi.testclient import TestClient
from upstream_mocks import RecordingTransport, elevenlabs_client

from sit_chatbot.proxy.dependencies import (
    get_chat_backend,
    get_synthesis_handler,
    get_transcription_handler,
)
from sit_chatbot.proxy.handlers import SynthesisHandler, TranscriptionHandler
from sit_chatbot.proxy.infrastructure import (
    ElevenLabsSynthesizer,
    ElevenLabsTranscriber,
    RagChatBackend,
)
from sit_chatbot.proxy.main import app

DEFAULT_VOICE = "21m00Tcm4TlvDq8ikWAM"


@pytest.fixture
def api():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_transcriber(tmp_path):
    """Routes /api/speech-to-text to a transcriber backed by a mock transport."""

    def install(handler, normalizer=None) -> RecordingTransport:
        recorder = RecordingTransport(handler)
        transcriber = ElevenLabsTranscriber(
            elevenlabs_client(recorder), model_id="scribe_v1"
        )
        app.dependency_overrides[get_transcription_handler] = lambda: TranscriptionHandler(
            transcriber, normalizer=normalizer, upload_dir=str(tmp_path)
        )
        return recorder

    return install


@pytest.fixture
def use_synthesizer():
    def install(handler) -> RecordingTransport:
        recorder = RecordingTransport(handler)
        synthesizer = ElevenLabsSynthesizer(
            elevenlabs_client(recorder),
            model_id="eleven_monolingual_v1",
            stability=0.5,
            similarity_boost=0.5,
        )
        app.dependency_overrides[get_synthesis_handler] = lambda: SynthesisHandler(
            synthesizer, default_voice_id=DEFAULT_VOICE
        )
        return recorder

    return install


@pytest.fixture
def use_chat_backend():
    def install(handler) -> RecordingTransport:
        recorder = RecordingTransport(handler)
        backend = RagChatBackend(
            httpx.Client(transport=recorder.transport), base_url="http://rag.test"
        )
        app.dependency_overrides[get_chat_backend] = lambda: backend
        return recorder

    return install

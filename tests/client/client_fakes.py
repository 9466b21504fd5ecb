from sit_chatbot.client.exceptions import (
    AudioPlaybackError,
    MicrophoneError,
    ProxyUnavailableError,
)
from sit_chatbot.client.infrastructure.interfaces import (
    AudioPlayer,
    ChatProxy,
    ConversationView,
    Microphone,
    SpeakingIndicator,
)


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeProxy(ChatProxy):
    def __init__(self, transcript="hello", reply=None, audio=b"mpeg-bytes"):
        self.transcript = transcript
        self.reply = completion("hi there") if reply is None else reply
        self.audio = audio
        self.transcribe_error = None
        self.chat_error = None
        self.synthesize_error = None
        self.calls = []

    def transcribe(self, audio, file_name="recording.wav", content_type="audio/wav"):
        self.calls.append(("transcribe", audio))
        if self.transcribe_error:
            raise self.transcribe_error
        return self.transcript

    def chat(self, payload):
        self.calls.append(("chat", payload))
        if self.chat_error:
            raise self.chat_error
        return self.reply

    def synthesize(self, text, voice_id=None):
        self.calls.append(("synthesize", text, voice_id))
        if self.synthesize_error:
            raise self.synthesize_error
        return self.audio

    def operations(self):
        return [call[0] for call in self.calls]


class FakeMicrophone(Microphone):
    def __init__(self, audio=b"RIFF-recording"):
        self.audio = audio
        self.permission_granted = True
        self.start_error = None
        self.stop_error = None
        self.open = False
        self.closed_count = 0

    @property
    def is_open(self):
        return self.open

    def check_permission(self):
        if not self.permission_granted:
            raise MicrophoneError("Permission denied")

    def start(self):
        if self.start_error:
            raise self.start_error
        if self.open:
            raise MicrophoneError("Microphone is already recording")
        self.open = True

    def stop(self):
        self.close()
        if self.stop_error:
            raise self.stop_error
        return self.audio

    def close(self):
        if self.open:
            self.closed_count += 1
        self.open = False


class FakeIndicator(SpeakingIndicator):
    def __init__(self):
        self.active = False
        self.starts = 0

    def start(self):
        self.active = True
        self.starts += 1

    def stop(self):
        self.active = False


class FakePlayer(AudioPlayer):
    def __init__(self, indicator):
        self.indicator = indicator
        self.played = []
        self.indicator_during_play = []
        self.error = None

    def play(self, audio):
        self.played.append(audio)
        self.indicator_during_play.append(self.indicator.active)
        if self.error:
            raise self.error


class FakeView(ConversationView):
    def __init__(self):
        self.events = []

    def show_state(self, session):
        self.events.append(("state", session.state.value))

    def show_connection(self, connected):
        self.events.append(("connection", connected))

    def show_turn(self, turn, transcribed=False):
        self.events.append(("turn", turn.role.value, turn.content, transcribed))

    def show_error(self, message):
        self.events.append(("error", message))

    def show_notice(self, message):
        self.events.append(("notice", message))

    def reset(self):
        self.events.append(("reset",))

    def errors(self):
        return [event[1] for event in self.events if event[0] == "error"]


def timeout_error():
    return ProxyUnavailableError("chat", TimeoutError("timed out after 30s"))


def playback_error():
    return AudioPlaybackError("ffplay exited 1")

import pytest
from client_fakes import FakeIndicator, FakeMicrophone, FakePlayer, FakeProxy, FakeView

from sit_chatbot.client.orchestrator import SessionOrchestrator


class Harness:
    def __init__(self):
        self.proxy = FakeProxy()
        self.microphone = FakeMicrophone()
        self.indicator = FakeIndicator()
        self.player = FakePlayer(self.indicator)
        self.view = FakeView()
        self.orchestrator = SessionOrchestrator(
            proxy=self.proxy,
            microphone=self.microphone,
            player=self.player,
            view=self.view,
            indicator=self.indicator,
            chat_model="gpt-4",
            voice_id="voice-1",
        )


@pytest.fixture
def harness():
    return Harness()

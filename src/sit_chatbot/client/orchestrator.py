"""Sequencing of conversational turns."""

import logging
import re
from typing import Any

from .domain import (
    ChatTurn,
    ConversationSession,
    ConversationState,
    InputMode,
    PrimaryAction,
    Role,
    can_transition,
    end_conversation,
    primary_action,
    switch_input_mode,
    transition,
)
from .exceptions import AudioPlaybackError, MicrophoneError, ProxyError
from .infrastructure.interfaces import (
    AudioPlayer,
    ChatProxy,
    ConversationView,
    Microphone,
    SpeakingIndicator,
)

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I could not process your request."

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Trims text and collapses runs of whitespace."""
    return _WHITESPACE.sub(" ", text.strip())


def extract_reply(response: Any) -> str:
    """Returns the first completion choice's content, or the fallback reply."""
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None
    if not isinstance(content, str) or not content.strip():
        return FALLBACK_REPLY
    return content


class SessionOrchestrator:
    """
    Runs the transcribe, relay and synthesize pipeline for each user turn.

    Every public method takes the current ConversationSession and returns the
    session that results from the action. No method leaves the session in
    the processing state.
    """

    def __init__(
        self,
        proxy: ChatProxy,
        microphone: Microphone,
        player: AudioPlayer,
        view: ConversationView,
        indicator: SpeakingIndicator,
        chat_model: str = "gpt-4",
        voice_id: str | None = None,
    ):
        self._proxy = proxy
        self._microphone = microphone
        self._player = player
        self._view = view
        self._indicator = indicator
        self._chat_model = chat_model
        self._voice_id = voice_id

    def handle_primary_action(self, session: ConversationSession) -> ConversationSession:
        action = primary_action(session)
        if action is PrimaryAction.START_CONVERSATION:
            return self.start_conversation(session)
        if action is PrimaryAction.START_RECORDING:
            return self.start_recording(session)
        if action is PrimaryAction.STOP_RECORDING:
            return self.stop_recording(session)
        return session

    def start_conversation(self, session: ConversationSession) -> ConversationSession:
        if not can_transition(session, ConversationState.CONNECTED):
            return session
        try:
            self._microphone.check_permission()
        except MicrophoneError:
            logger.exception("Microphone permission denied")
            self._view.show_error("Microphone permission is required for voice features.")
            self._view.show_state(session)
            return session

        session = transition(session, ConversationState.CONNECTED)
        self._view.show_connection(True)
        self._view.show_state(session)
        return session

    def start_recording(self, session: ConversationSession) -> ConversationSession:
        if not can_transition(session, ConversationState.RECORDING):
            return session
        try:
            self._microphone.start()
        except MicrophoneError as e:
            logger.exception("Error starting speech capture")
            self._view.show_error(f"Failed to start speech recognition. {e}")
            return session

        session = transition(session, ConversationState.RECORDING)
        self._view.show_state(session)
        return session

    def stop_recording(self, session: ConversationSession) -> ConversationSession:
        session = transition(session, ConversationState.PROCESSING)
        self._view.show_state(session)
        try:
            audio = self._microphone.stop()
        except MicrophoneError as e:
            logger.exception("Error stopping speech capture")
            self._view.show_error(f"Failed to stop speech recognition. {e}")
            return self._finish(session)

        if not audio:
            self._view.show_notice("No audio was captured.")
            return self._finish(session)

        try:
            transcript = normalize_text(self._proxy.transcribe(audio))
        except ProxyError as e:
            logger.exception("Error getting transcription")
            self._view.show_error(f"Failed to transcribe speech: {e}")
            return self._finish(session)

        if not transcript:
            self._view.show_notice("No speech detected.")
            return self._finish(session)

        logger.info("Received transcription", extra={"transcript": transcript})
        return self._finish(self._exchange(session, transcript, transcribed=True))

    def submit_text(self, session: ConversationSession, text: str) -> ConversationSession:
        text = normalize_text(text)
        if not text:
            return session
        if not can_transition(session, ConversationState.PROCESSING):
            self._view.show_error(
                "Not connected. Please start the conversation first."
            )
            return session

        session = transition(session, ConversationState.PROCESSING)
        self._view.show_state(session)
        return self._finish(self._exchange(session, text, transcribed=False))

    def end_conversation(self, session: ConversationSession) -> ConversationSession:
        self._microphone.close()
        self._indicator.stop()
        session = end_conversation(session)
        self._view.reset()
        self._view.show_connection(False)
        self._view.show_state(session)
        return session

    def switch_input_mode(
        self, session: ConversationSession, mode: InputMode
    ) -> ConversationSession:
        session = switch_input_mode(session, mode)
        self._view.show_state(session)
        return session

    def _exchange(
        self, session: ConversationSession, user_text: str, transcribed: bool
    ) -> ConversationSession:
        """Appends the user turn, relays the transcript and speaks the reply."""
        user_turn = ChatTurn(role=Role.USER, content=user_text)
        session = session.with_turn(user_turn)
        self._view.show_turn(user_turn, transcribed=transcribed)

        payload = {
            "model": self._chat_model,
            "messages": session.messages(),
            "stream": False,
        }
        try:
            reply = extract_reply(self._proxy.chat(payload))
        except ProxyError:
            logger.exception("Error sending message")
            self._view.show_error("Failed to process your message.")
            return session

        assistant_turn = ChatTurn(role=Role.ASSISTANT, content=reply)
        session = session.with_turn(assistant_turn)
        self._view.show_turn(assistant_turn)

        self._speak(reply)
        return session

    def _speak(self, text: str) -> None:
        """Plays synthesized speech; failures are logged and not shown."""
        try:
            audio = self._proxy.synthesize(text, self._voice_id)
        except ProxyError as e:
            logger.warning("Text-to-speech failed", extra={"error": str(e)})
            return

        self._indicator.start()
        try:
            self._player.play(audio)
        except AudioPlaybackError as e:
            logger.warning("Error playing speech", extra={"error": str(e)})
        finally:
            self._indicator.stop()

    def _finish(self, session: ConversationSession) -> ConversationSession:
        session = transition(session, ConversationState.CONNECTED)
        self._indicator.stop()
        self._view.show_state(session)
        return session

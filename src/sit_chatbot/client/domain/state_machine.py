"""Conversation state machine."""

import logging
from enum import Enum

from ..exceptions import InvalidTransitionError
from .models import ConversationSession, ConversationState, InputMode

logger = logging.getLogger(__name__)

_TRANSITIONS = {
    ConversationState.READY: {ConversationState.CONNECTED},
    ConversationState.CONNECTED: {
        ConversationState.RECORDING,
        ConversationState.PROCESSING,
    },
    ConversationState.RECORDING: {ConversationState.PROCESSING},
    ConversationState.PROCESSING: {ConversationState.CONNECTED},
}

_BUTTON_LABELS = {
    (ConversationState.READY, InputMode.VOICE): "Start Conversation",
    (ConversationState.READY, InputMode.TEXT): "Connect",
    (ConversationState.CONNECTED, InputMode.VOICE): "Start Speaking",
    (ConversationState.CONNECTED, InputMode.TEXT): "Connected",
}

_STATUS_TEXT = {
    ConversationState.READY: "Ready to help",
    ConversationState.CONNECTED: "Connected - Ready to listen",
    ConversationState.RECORDING: "Listening...",
    ConversationState.PROCESSING: "Processing your message",
}


class PrimaryAction(str, Enum):
    START_CONVERSATION = "start_conversation"
    START_RECORDING = "start_recording"
    STOP_RECORDING = "stop_recording"
    NONE = "none"


def can_transition(session: ConversationSession, target: ConversationState) -> bool:
    """Returns True when session may move to target."""
    if target is ConversationState.READY:
        return True
    if target not in _TRANSITIONS[session.state]:
        return False
    if target is ConversationState.RECORDING:
        return session.input_mode is InputMode.VOICE
    return True


def transition(
    session: ConversationSession, target: ConversationState
) -> ConversationSession:
    """
    Moves session to target.

    Raises:
        InvalidTransitionError: If the move is not allowed from the current state.
    """
    if not can_transition(session, target):
        raise InvalidTransitionError(session.state.value, target.value)
    logger.info(
        "State transition",
        extra={"from_state": session.state.value, "to_state": target.value},
    )
    return session.model_copy(update={"state": target})


def primary_action(session: ConversationSession) -> PrimaryAction:
    """Returns what the primary button does in the current session."""
    if session.state is ConversationState.READY:
        return PrimaryAction.START_CONVERSATION
    if session.state is ConversationState.CONNECTED:
        if session.input_mode is InputMode.VOICE:
            return PrimaryAction.START_RECORDING
        return PrimaryAction.NONE
    if session.state is ConversationState.RECORDING:
        return PrimaryAction.STOP_RECORDING
    return PrimaryAction.NONE


def end_conversation(session: ConversationSession) -> ConversationSession:
    """Resets the session to ready, dropping the transcript but keeping the input mode."""
    logger.info("Conversation ended", extra={"from_state": session.state.value})
    return ConversationSession(input_mode=session.input_mode)


def switch_input_mode(
    session: ConversationSession, mode: InputMode
) -> ConversationSession:
    return session.model_copy(update={"input_mode": mode})


def primary_enabled(session: ConversationSession) -> bool:
    return session.state is not ConversationState.PROCESSING


def primary_label(session: ConversationSession) -> str:
    if session.state is ConversationState.RECORDING:
        return "Stop Speaking"
    if session.state is ConversationState.PROCESSING:
        return "Processing..."
    return _BUTTON_LABELS[(session.state, session.input_mode)]


def status_text(session: ConversationSession) -> str:
    return _STATUS_TEXT[session.state]

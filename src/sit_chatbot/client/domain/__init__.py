"""Domain layer exports."""

from .models import ChatTurn, ConversationSession, ConversationState, InputMode, Role
from .state_machine import (
    PrimaryAction,
    can_transition,
    end_conversation,
    primary_action,
    switch_input_mode,
    transition,
)

__all__ = [
    "ChatTurn",
    "ConversationSession",
    "ConversationState",
    "InputMode",
    "PrimaryAction",
    "Role",
    "can_transition",
    "end_conversation",
    "primary_action",
    "switch_input_mode",
    "transition",
]

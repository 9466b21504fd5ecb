"""Domain models for the conversational client."""

from enum import Enum

from pydantic import BaseModel


class ConversationState(str, Enum):
    READY = "ready"
    CONNECTED = "connected"
    RECORDING = "recording"
    PROCESSING = "processing"


class InputMode(str, Enum):
    VOICE = "voice"
    TEXT = "text"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel, frozen=True):
    """A single message of the conversation transcript."""

    role: Role
    content: str

    def to_message(self) -> dict[str, str]:
        """Returns the turn as an OpenAI-style chat message."""
        return {"role": self.role.value, "content": self.content}


class ConversationSession(BaseModel, frozen=True):
    """
    The state of one UI session.

    Sessions are immutable; every step of the conversation returns a new
    session instead of mutating shared state.
    """

    state: ConversationState = ConversationState.READY
    input_mode: InputMode = InputMode.VOICE
    transcript: tuple[ChatTurn, ...] = ()

    def with_turn(self, turn: ChatTurn) -> "ConversationSession":
        """Returns a copy of the session with turn appended to the transcript."""
        return self.model_copy(update={"transcript": self.transcript + (turn,)})

    def messages(self) -> list[dict[str, str]]:
        """Returns the transcript as chat-completion messages."""
        return [turn.to_message() for turn in self.transcript]

"""Abstract interface for rendering the conversation."""

from abc import ABC, abstractmethod

from ...domain.models import ChatTurn, ConversationSession


class ConversationView(ABC):
    """Everything the orchestrator shows to the user."""

    @abstractmethod
    def show_state(self, session: ConversationSession) -> None:
        """Renders the primary button and status line for session."""
        pass

    @abstractmethod
    def show_connection(self, connected: bool) -> None:
        pass

    @abstractmethod
    def show_turn(self, turn: ChatTurn, transcribed: bool = False) -> None:
        """Appends a message to the chat transcript."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Appends a labeled error message to the chat transcript."""
        pass

    @abstractmethod
    def show_notice(self, message: str) -> None:
        pass

    @abstractmethod
    def reset(self) -> None:
        """Clears pending input and indicators after the conversation ends."""
        pass

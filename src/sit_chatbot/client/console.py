"""Interactive terminal loop driving the orchestrator."""

import logging
from typing import Callable

from .domain import ConversationSession, InputMode
from .infrastructure import TerminalView
from .orchestrator import SessionOrchestrator

logger = logging.getLogger(__name__)


class TerminalConsole:
    """Maps keyboard input to conversation actions."""

    def __init__(
        self,
        orchestrator: SessionOrchestrator,
        view: TerminalView,
        read_line: Callable[[str], str] = input,
    ):
        self._orchestrator = orchestrator
        self._view = view
        self._read_line = read_line

    def run(self) -> None:
        """Reads commands until /quit or end of input."""
        session = ConversationSession()
        self._view.show_help()
        self._view.show_connection(False)
        self._view.show_state(session)

        while True:
            try:
                line = self._read_line("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if line.strip() == "/quit":
                break
            session = self.handle(session, line)

        self._orchestrator.end_conversation(session)
        logger.info("Console closed")

    def handle(self, session: ConversationSession, line: str) -> ConversationSession:
        command = line.strip()
        if not command:
            return self._orchestrator.handle_primary_action(session)
        if command == "/voice":
            return self._orchestrator.switch_input_mode(session, InputMode.VOICE)
        if command == "/text":
            return self._orchestrator.switch_input_mode(session, InputMode.TEXT)
        if command == "/end":
            return self._orchestrator.end_conversation(session)
        if command == "/help":
            self._view.show_help()
            return session
        if session.input_mode is InputMode.TEXT:
            return self._orchestrator.submit_text(session, line)

        self._view.show_notice("Type /text to switch to text input.")
        return session

"""Terminal rendering of the conversation."""

import sys
from typing import TextIO

from ..domain.models import ChatTurn, ConversationSession, Role
from ..domain.state_machine import primary_enabled, primary_label, status_text
from .interfaces import ConversationView

AVATAR_FACES = {"closed": "(o_o)", "open": "(o0o)"}


class TerminalView(ConversationView):
    """Prints the chat and status line to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream or sys.stdout

    def show_state(self, session: ConversationSession) -> None:
        label = primary_label(session)
        action = f"[Enter] {label}" if primary_enabled(session) else label
        self._write(
            f"-- {status_text(session)} | mode: {session.input_mode.value} | {action}"
        )

    def show_connection(self, connected: bool) -> None:
        self._write("** Connected **" if connected else "** Disconnected **")

    def show_turn(self, turn: ChatTurn, transcribed: bool = False) -> None:
        if turn.role is Role.USER:
            content = f'"{turn.content}"' if transcribed else turn.content
            self._write(f"you> {content}")
        else:
            self._write(f"bot> {turn.content}")

    def show_error(self, message: str) -> None:
        self._write(f"bot> [error] {message}")

    def show_notice(self, message: str) -> None:
        self._write(f"   {message}")

    def show_help(self) -> None:
        self._write(
            "Enter: primary action | /voice, /text: input mode | "
            "/end: end conversation | /quit: exit"
        )

    def render_avatar(self, mouth: str) -> None:
        self._stream.write(f"\r{AVATAR_FACES.get(mouth, AVATAR_FACES['closed'])} ")
        self._stream.flush()

    def reset(self) -> None:
        self._stream.write("\r")
        self._stream.flush()

    def _write(self, line: str) -> None:
        self._stream.write(line + "\n")
        self._stream.flush()

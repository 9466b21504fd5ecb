"""
SIT Chatbot terminal client.

Entry point for the conversational client. It handles:
- Push-to-talk microphone capture.
- Speech-to-text, chat relay and text-to-speech through the request proxy.
- Playback of synthesized replies with an animated avatar.
- Structured JSON logging to stderr.
"""

import sys

from sit_chatbot.logging import setup_logging

from .dependencies import get_console


def main():
    """Starts the console."""
    setup_logging(sys.stderr)
    get_console().run()


if __name__ == "__main__":
    main()

"""Structured JSON logging shared by the proxy and the terminal client."""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(stream=None, level=None):
    """
    Routes the root logger and the Uvicorn loggers to one JSON handler.

    Args:
        stream: Destination of log lines, stdout by default. The terminal
            client passes stderr so logs stay out of the conversation.
        level: Level name or number. Defaults to LOG_LEVEL, then INFO.

    Returns:
        logging.Logger: The root logger.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    _attach(root_logger, handler, level)
    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        _attach(server_logger, handler, level)
        server_logger.propagate = False

    return root_logger


def _attach(logger: logging.Logger, handler: logging.Handler, level) -> None:
    logger.setLevel(level)
    logger.handlers = [handler]

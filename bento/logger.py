"""Logging helpers for the Bento client."""
import logging
import os
import sys

DISCARD_LOGGER_NAME = "bento.discard"


def get_logger(name: str = "bento") -> logging.Logger:
    """Get a console logger with configurable level.

    Only the root 'bento' logger gets a handler. Child loggers
    (e.g., 'bento.session', 'bento.transport') propagate to the root.
    """
    logger = logging.getLogger(name)

    # Only add a handler to the root 'bento' logger
    if name == "bento" and not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

        logger.setLevel(level)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))

        logger.addHandler(handler)

    return logger


def discard_logger() -> logging.Logger:
    """Logger that drops everything written to it.

    Default diagnostic sink for a Session until the owner sets one.
    """
    logger = logging.getLogger(DISCARD_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger

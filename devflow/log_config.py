"""Logging setup.

A full-screen app owns the terminal, so nothing is written to stderr while
it runs. Records go to the Textual devtools console (visible with
`textual console`) and, when configured, to a log file. Call
setup_logging() once at startup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

LOGGER_NAME = "devflow"

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s.%(funcName)s  %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the package logger.

    Safe to call multiple times; handlers are only attached once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if any(isinstance(h, TextualHandler) for h in logger.handlers):
        return

    fmt = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")

    textual_handler = TextualHandler()
    textual_handler.setLevel(level)
    textual_handler.setFormatter(fmt)
    logger.addHandler(textual_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    logger.propagate = False

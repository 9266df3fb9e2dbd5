"""Logging configuration for the command-line entrypoint."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure Python logging for the process.

    Logs go to stderr by default: stdout carries the JSON payload. Parser logs are diagnostics
    only and must never be shown to the chat user.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

"""Process-wide logging setup for the CLI entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    # stderr, so log lines never mix into the register prompts on stdout
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)

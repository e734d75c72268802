"""Logging utilities for CLI and workflow modules."""

from __future__ import annotations

import logging
from pathlib import Path


DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NOISY_LOGGERS = ("urllib3", "requests")


def configure_logging(
    log_file: Path | None,
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """Configure process-wide console and optional file logging.

    The console handler stays at WARNING by default so that command output
    written with ``typer.echo`` is not interleaved with INFO records; the file
    handler keeps the full trace.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, console_level))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(fmt=CONSOLE_LOG_FORMAT))
    stream_handler.setLevel(console_level)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger("mush")
    logger.setLevel(min(level, console_level))
    return logger

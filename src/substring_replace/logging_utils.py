"""Logging setup for the SubstringReplace command-line interface."""
# src/substring_replace/logging_utils.py

import logging
import sys
import time
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s | SubstringReplace - {version} | %(message)s"
FILE_FORMAT = "%(asctime)s | %(name)-32s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s"


class UtcFormatter(logging.Formatter):
    """Formats timestamps in UTC with 6-digit microseconds and a 'Z' suffix."""

    converter = time.gmtime

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        stamp = time.strftime(datefmt or self.default_time_format, self.converter(record.created))
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{stamp}.{microseconds:06d}Z"


def setup_logging(version: str, *, debug: bool = False) -> None:
    """
    Send all log records to stdout in the console format.

    Any handlers already on the root logger are removed first, so calling this
    twice leaves a single console handler.

    Args:
        version: The application version shown in every console line.
        debug: If True, DEBUG records are shown as well.

    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(UtcFormatter(CONSOLE_FORMAT.format(version=version)))
    root_logger.addHandler(console_handler)


def attach_debug_log(log_file: Path) -> None:
    """Also write DEBUG records to log_file; console logging continues if that fails."""
    root_logger = logging.getLogger()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError:
        root_logger.exception("Failed to create debug log file. Continuing with console logging only.")
        return

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(UtcFormatter(FILE_FORMAT))
    root_logger.addHandler(file_handler)
    root_logger.info("Detailed logs will be written to %s", log_file)

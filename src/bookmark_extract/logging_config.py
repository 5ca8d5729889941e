"""Colored logging configuration for the bookmark-extract CLI."""

import logging
import os
import re
import sys
from typing import TextIO

RESET = "\033[0m"
BOLD = "\033[1m"

LEVEL_COLORS = {
    "DEBUG": "\033[36m",      # Cyan
    "INFO": "\033[32m",       # Green
    "WARNING": "\033[33m",    # Yellow
    "ERROR": "\033[31m",      # Red
    "CRITICAL": "\033[35m",   # Magenta
}

# One color per pipeline stage; extractors share the source-format palette.
PREFIX_COLORS = {
    "PROCESSOR": "\033[97m",  # Bright White
    "DISPATCH": "\033[94m",   # Bright Blue
    "SAFARI": "\033[96m",     # Bright Cyan
    "FIREFOX": "\033[91m",    # Bright Red
    "CHROME": "\033[93m",     # Bright Yellow
    "FAVORITES": "\033[95m",  # Bright Magenta
    "TEXT": "\033[92m",       # Bright Green
    "MARKDOWN": "\033[92m",   # Bright Green
}

_PREFIX = re.compile(r"^\[(?P<name>[A-Z]+)\]")


def use_color(stream: TextIO) -> bool:
    """Color only interactive streams, and never when NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ColoredFormatter(logging.Formatter):
    """Colors the level name and a leading ``[STAGE]`` prefix of the message."""

    def __init__(self, *args, color: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.color = color

    def _color_prefix(self, match: re.Match) -> str:
        color = PREFIX_COLORS.get(match.group("name"))
        if color is None:
            return match.group(0)
        return f"{color}{BOLD}{match.group(0)}{RESET}"

    def format(self, record: logging.LogRecord) -> str:
        if not self.color:
            return super().format(record)

        # The record may be shared with other handlers; restore it afterwards.
        levelname, msg = record.levelname, record.msg
        record.levelname = f"{LEVEL_COLORS.get(levelname, '')}{levelname:<7}{RESET}"
        if isinstance(msg, str):
            record.msg = _PREFIX.sub(self._color_prefix, msg, count=1)
        try:
            return super().format(record)
        finally:
            record.levelname, record.msg = levelname, msg


def setup_colored_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Log output goes to stderr; stdout is reserved for the record stream.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
            color=use_color(sys.stderr),
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    root_logger.addHandler(handler)

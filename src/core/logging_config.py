"""
Central logging for the bridge process.

Logs go to stderr: with the stdio transport, stdout carries the MCP stream
and must stay clean. Optionally also writes to a file.
"""

import logging
import os
import sys
from pathlib import Path

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers owned by this project
_LOGGERS = ("core", "robots")


def configure_logging(level: str | int | None = None, log_file: str | Path | None = None) -> None:
    """Configure project logging once at startup.

    Args:
        level: Level name or number. Defaults to LOG_LEVEL, then INFO.
        log_file: Optional path of a file that receives the same records.

    Calling it again replaces the handlers instead of duplicating them.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for name in _LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for old in logger.handlers:
            old.close()
        logger.handlers.clear()
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.propagate = False

"""Logging setup."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def configure_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Replace the default loguru sink with one at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)

    if log_file is not None:
        logger.add(
            str(log_file),
            rotation="1 day",
            retention="7 days",
            level=level.upper(),
            format=LOG_FORMAT,
        )

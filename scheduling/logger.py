# scheduling/logger.py
import logging
import sys
from pathlib import Path

from .config import LOG_PATH, LOG_LEVEL

logger = logging.getLogger("scheduling")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# Prevent duplicate handlers if imported multiple times
if not logger.handlers:
    # Stream handler (stdout)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_formatter = logging.Formatter("[%(levelname)s] %(message)s")
    stream_handler.setFormatter(stream_formatter)
    logger.addHandler(stream_handler)

    # File handler, only when a log path is configured
    if LOG_PATH:
        log_file = Path(LOG_PATH)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``scheduling.filter``."""
    return logger.getChild(name)

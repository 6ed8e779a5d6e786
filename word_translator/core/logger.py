"""
Logging setup.

Provides configured loggers for the translator components.
"""

import json
import logging
import os
import sys
from typing import Optional

# Loggers already configured, so repeated calls reset instead of stacking handlers
_configured_loggers = set()


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _create_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Create a configured logger."""
    logger = logging.getLogger(name)

    if name in _configured_loggers:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    level_str = level or os.getenv("WORD_TRANSLATOR_LOG_LEVEL", "WARNING")
    try:
        log_level = getattr(logging, level_str.upper())
    except AttributeError:
        log_level = logging.INFO

    logger.setLevel(log_level)

    log_format = os.getenv("WORD_TRANSLATOR_LOG_FORMAT", "text")
    if log_format == "json":
        formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = os.getenv("WORD_TRANSLATOR_LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _configured_loggers.add(name)

    return logger


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a configured logger for a translator component."""
    return _create_logger(name, level)


translator_logger = get_logger("word_translator")

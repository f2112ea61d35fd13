"""
Logging configuration for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
import sys
import threading
from typing import Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        if not self.use_color:
            return super().format(record)

        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Color a copy so other handlers see the plain level name
        original_levelname = record.levelname
        record.levelname = f"{log_color}{record.levelname}{reset_color}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


LOG_FORMAT = '%(levelname)s - %(name)s - %(message)s'

_level: int = logging.INFO
_use_color: bool = True
_logger_instances: Dict[str, logging.Logger] = {}
_global_state_lock = threading.RLock()


def _make_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, use_color=_use_color))
    return handler


def configure_logging(level: int = logging.INFO, use_color: bool = True) -> None:
    """
    Set the level and coloring for every logger, current and future.

    Args:
        level: Logging level (DEBUG for --debug, ERROR for --quiet)
        use_color: Whether to color level names
    """
    global _level, _use_color
    with _global_state_lock:
        _level = level
        _use_color = use_color

        for logger in _logger_instances.values():
            logger.setLevel(level)
            logger.handlers.clear()
            logger.addHandler(_make_handler())


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger instance with thread safety.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    with _global_state_lock:
        if name in _logger_instances:
            return _logger_instances[name]

        logger = logging.getLogger(name)
        logger.setLevel(_level)
        logger.handlers.clear()
        logger.addHandler(_make_handler())

        # Prevent propagation to avoid duplicate messages
        logger.propagate = False

        _logger_instances[name] = logger
        return logger

"""Logging configuration."""

import logging
from typing import Dict

_ROOT = "replit_audio"
_loggers: Dict[str, logging.Logger] = {}


def _root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        root.setLevel(logging.WARNING)  # Only show warnings and errors
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
        )
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger under the package logger."""
    if name not in _loggers:
        _root_logger()
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def set_log_level(level) -> None:
    """Set the level of the package logger (e.g. logging.DEBUG or "DEBUG")."""
    _root_logger().setLevel(level)

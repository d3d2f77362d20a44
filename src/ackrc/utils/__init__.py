"""Shared helpers: errors and logging."""

from .errors import AckrcError, ConfigConflictError, RcReadError
from .logging import setup_logging, get_logger

__all__ = ["AckrcError", "ConfigConflictError", "RcReadError", "setup_logging", "get_logger"]

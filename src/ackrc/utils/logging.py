"""Logging setup for ackrc: discovery steps are logged to stderr."""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> logging.Logger:
    """
    Send ackrc log records to stderr.
    
    Discovery logs found and dropped rc files at DEBUG and the final count
    at INFO, so the CLI's --verbose flag maps to DEBUG.
    
    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
    
    Returns:
        The "ackrc" package logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("ackrc")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the "ackrc.<name>" logger for a module."""
    return logging.getLogger(f"ackrc.{name}")

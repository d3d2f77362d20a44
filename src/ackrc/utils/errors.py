"""Custom exception classes for ackrc."""


class AckrcError(Exception):
    """Base exception for all ackrc errors."""
    pass


class ConfigConflictError(AckrcError):
    """Raised when a directory contains both .ackrc and _ackrc."""

    def __init__(self, directory: str, message: str):
        super().__init__(message)
        self.directory = directory


class RcReadError(AckrcError):
    """Raised when an existing rc file cannot be opened for reading."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path

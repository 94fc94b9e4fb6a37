"""Exceptions for the sterile execution wrapper."""

from typing import Optional


class LaunchError(Exception):
    """Raised when a command could not be launched.

    Launch failures are non-retryable: a missing or non-executable binary
    stays missing.

    Attributes:
        error_code: Machine error code (NOT_FOUND, PERMISSION_DENIED, ...)
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code

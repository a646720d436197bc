"""Custom exceptions for the Vinculum converter."""

from typing import Optional


class VinculumError(Exception):
    """Base exception for all Vinculum errors."""

    pass


class OutOfRangeError(VinculumError, ValueError):
    """Raised when a number, or the value of a numeral, is outside the supported range."""

    pass


class InvalidNumeralError(VinculumError, ValueError):
    """Raised when a string is not a valid Roman numeral for the requested grammar."""

    pass


class QueryError(VinculumError, ValueError):
    """Raised when a conversion query is missing or cannot be interpreted."""

    pass


class ConfigurationError(VinculumError):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


class ServiceError(VinculumError):
    """Raised when the remote conversion service rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

"""
Utility functions and helpers for the Vinculum converter.

This package contains:
- exceptions: Custom exception classes
- constants: Constants used throughout the application
- file_ops: Query files and JSON output
- config: Configuration management
- text_utils: Query parsing utilities
"""

# Exceptions
from .exceptions import (
    ConfigurationError,
    InvalidNumeralError,
    OutOfRangeError,
    QueryError,
    ServiceError,
    VinculumError,
)

# Constants
from .constants import (
    MAX_LIMITLESS_NUMERAL,
    MAX_ROMAN_NUMERAL,
    ROMAN_NUMERAL_MAP,
    SERVER_ERROR_CODES,
)

# File operations
from .file_ops import read_queries, write_json_file

# Configuration
from .config import load_config

# Text utilities
from .text_utils import parse_query_int

__all__ = [
    # Exceptions
    "VinculumError",
    "OutOfRangeError",
    "InvalidNumeralError",
    "QueryError",
    "ConfigurationError",
    "ServiceError",
    # Constants
    "MAX_ROMAN_NUMERAL",
    "MAX_LIMITLESS_NUMERAL",
    "SERVER_ERROR_CODES",
    "ROMAN_NUMERAL_MAP",
    # File operations
    "read_queries",
    "write_json_file",
    # Configuration
    "load_config",
    # Text utilities
    "parse_query_int",
]

"""Vinculum - Roman numeral conversion, from I to 3,999,999."""

from .numerals import (
    apply_vinculum,
    format_vinculum,
    int_to_roman,
    int_to_roman_limitless,
    is_classical_numeral,
    normalize_vinculum,
    roman_to_int,
    roman_to_int_limitless,
    split_limitless,
)
from .utils import InvalidNumeralError, OutOfRangeError, VinculumError

__version__ = "1.0.0"

__all__ = [
    "int_to_roman",
    "roman_to_int",
    "int_to_roman_limitless",
    "roman_to_int_limitless",
    "is_classical_numeral",
    "apply_vinculum",
    "normalize_vinculum",
    "format_vinculum",
    "split_limitless",
    "VinculumError",
    "OutOfRangeError",
    "InvalidNumeralError",
]

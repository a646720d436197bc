"""
Roman numeral codec.

Converts between integers and Roman numerals in two grammars:

- classical: the standard subtractive notation for 1 to 3999
- limitless: a vinculum-marked classical numeral (worth 1000 times its face
  value) followed by an optional plain classical numeral, for 1 to 3,999,999

Limitless numerals are produced with a combining overline after every marked
letter. On input, either the overline form or the ASCII form (an underscore
before every marked letter) is accepted.
"""

import re
import unicodedata
from typing import Tuple

from .utils.constants import (
    ASCII_VINCULUM,
    CLASSICAL_PATTERN,
    COMBINING_OVERLINE,
    EXACT_MULTIPLIER_LIMIT,
    LIMITLESS_PATTERN,
    MAX_LIMITLESS_NUMERAL,
    MAX_ROMAN_NUMERAL,
    ROMAN_NUMERAL_MAP,
    ROMAN_SYMBOL_VALUES,
)
from .utils.exceptions import InvalidNumeralError, OutOfRangeError

_CLASSICAL_REGEX = re.compile(CLASSICAL_PATTERN)
_LIMITLESS_REGEX = re.compile(LIMITLESS_PATTERN)
_OVERLINED_LETTER_REGEX = re.compile(f"([IVXLCDM]){COMBINING_OVERLINE}")
_ASCII_MARKED_LETTER_REGEX = re.compile(f"{ASCII_VINCULUM}([IVXLCDM])")

LIMITLESS_RANGE_TEXT = f"{MAX_LIMITLESS_NUMERAL:,}"


def _is_number(num: object) -> bool:
    return isinstance(num, int) and not isinstance(num, bool)


def is_classical_numeral(roman: str) -> bool:
    """Returns True if the string is a non-empty numeral of the classical grammar."""
    return bool(roman) and _CLASSICAL_REGEX.fullmatch(roman) is not None


def int_to_roman(num: int) -> str:
    """
    Converts an integer to a Roman numeral using the subtractive notation.

    Args:
        num: An integer between 1 and 3999 (inclusive)

    Returns:
        The Roman numeral representation as a string

    Raises:
        OutOfRangeError: If num is not an integer or is outside the valid range

    Examples:
        >>> int_to_roman(4)
        'IV'
        >>> int_to_roman(1994)
        'MCMXCIV'
    """
    if not _is_number(num) or not 0 < num <= MAX_ROMAN_NUMERAL:
        raise OutOfRangeError(f"Input must be between 1 and {MAX_ROMAN_NUMERAL}")

    roman_numeral = []
    for value, numeral in ROMAN_NUMERAL_MAP:
        while num >= value:
            roman_numeral.append(numeral)
            num -= value

    return "".join(roman_numeral)


def roman_to_int(roman: str) -> int:
    """
    Converts a classical Roman numeral to an integer.

    The numeral must match the classical grammar exactly: upper case, no
    surrounding whitespace, no more than three repeats of a symbol and only
    the six standard subtractive pairs.

    Args:
        roman: A Roman numeral between I and MMMCMXCIX

    Returns:
        The integer value of the numeral

    Raises:
        InvalidNumeralError: If the string is empty or not a classical numeral

    Examples:
        >>> roman_to_int("XIV")
        14
        >>> roman_to_int("IIII")
        Traceback (most recent call last):
            ...
        vinculum.utils.exceptions.InvalidNumeralError: Invalid Roman numeral
    """
    if not isinstance(roman, str) or not is_classical_numeral(roman):
        raise InvalidNumeralError("Invalid Roman numeral")

    total = 0
    for i, char in enumerate(roman):
        current_value = ROMAN_SYMBOL_VALUES[char]
        next_value = ROMAN_SYMBOL_VALUES[roman[i + 1]] if i + 1 < len(roman) else 0
        # Smaller symbol in front of a larger one is the first half of a subtractive pair
        if current_value < next_value:
            total -= current_value
        else:
            total += current_value

    return total


def apply_vinculum(roman: str) -> str:
    """Marks every letter of a numeral with a combining overline."""
    return "".join(char + COMBINING_OVERLINE for char in roman)


def normalize_vinculum(text: str) -> str:
    """
    Rewrites overlined letters into the ASCII form, one underscore before each letter.

    Text already in the ASCII form is returned unchanged.

    Examples:
        >>> normalize_vinculum("V\\u0305II")
        '_VII'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return _OVERLINED_LETTER_REGEX.sub(ASCII_VINCULUM + r"\1", decomposed)


def format_vinculum(text: str) -> str:
    """Rewrites underscore-marked letters into letters with a combining overline."""
    return _ASCII_MARKED_LETTER_REGEX.sub(r"\1" + COMBINING_OVERLINE, text)


def split_limitless(text: str) -> Tuple[str, str]:
    """
    Splits a limitless numeral into its thousands block and its remainder block.

    Args:
        text: A limitless numeral in either vinculum form

    Returns:
        A tuple of (marked letters without markers, plain letters); either may be empty

    Raises:
        InvalidNumeralError: If the text is not a run of marked letters followed
            by a run of plain letters
    """
    if not isinstance(text, str):
        raise InvalidNumeralError("Invalid Roman numeral format")

    match = _LIMITLESS_REGEX.fullmatch(normalize_vinculum(text))
    if match is None:
        raise InvalidNumeralError("Invalid Roman numeral format")

    marked, plain = match.groups()
    return marked.replace(ASCII_VINCULUM, ""), plain


def _choose_thousands(num: int) -> Tuple[int, int]:
    """
    Picks the (thousands, remainder) split used to encode a limitless numeral.

    Below 10,000 the thousands are taken exactly. From 10,000 up the thousands
    are rounded down to a multiple of ten, provided the remainder that leaves
    is still a classical numeral (below 4000).
    """
    raw_thousands = num // 1000
    if num < EXACT_MULTIPLIER_LIMIT:
        return raw_thousands, num % 1000

    rounded_thousands = raw_thousands - (raw_thousands % 10)
    remainder_if_rounded = num - rounded_thousands * 1000
    if remainder_if_rounded <= MAX_ROMAN_NUMERAL:
        return rounded_thousands, remainder_if_rounded
    return raw_thousands, num % 1000


def int_to_roman_limitless(num: int) -> str:
    """
    Converts an integer to a Roman numeral, using vinculum notation above 3999.

    Examples:
        >>> int_to_roman_limitless(1994)
        'MCMXCIV'
        >>> normalize_vinculum(int_to_roman_limitless(342944))
        '_C_C_C_X_LMMCMXLIV'

    Raises:
        OutOfRangeError: If num is not an integer between 1 and 3,999,999
    """
    if not _is_number(num) or not 0 < num <= MAX_LIMITLESS_NUMERAL:
        raise OutOfRangeError(f"Input must be between 1 and {LIMITLESS_RANGE_TEXT}")

    if num <= MAX_ROMAN_NUMERAL:
        return int_to_roman(num)

    thousands, remainder = _choose_thousands(num)
    remainder_roman = int_to_roman(remainder) if remainder > 0 else ""
    return apply_vinculum(int_to_roman(thousands)) + remainder_roman


def roman_to_int_limitless(roman: str) -> int:
    """
    Converts a Roman numeral, optionally with a vinculum block, to an integer.

    Args:
        roman: A numeral such as "MMXXIV", "X\\u0305MMD" or "_X_LIV"

    Returns:
        The integer value, between 1 and 3,999,999

    Raises:
        InvalidNumeralError: If the numeral is malformed or either block is not
            a classical numeral
        OutOfRangeError: If the value is outside 1 to 3,999,999
    """
    marked, plain = split_limitless(roman)

    total = 0
    if marked:
        if not is_classical_numeral(marked):
            raise InvalidNumeralError("Invalid vinculum Roman numeral part")
        total += roman_to_int(marked) * 1000

    if plain:
        if not is_classical_numeral(plain):
            raise InvalidNumeralError("Invalid normal Roman numeral part")
        total += roman_to_int(plain)

    if not 0 < total <= MAX_LIMITLESS_NUMERAL:
        raise OutOfRangeError(
            f"Resulting number must be between 1 and {LIMITLESS_RANGE_TEXT}"
        )
    return total

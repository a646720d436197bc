"""Text parsing utilities for conversion queries."""

import re
from typing import Optional

from .constants import MAX_QUERY_DIGITS, QUERY_OVERFLOW

_LEADING_INTEGER_REGEX = re.compile(r"\s*([+-]?)([0-9]+)")


def parse_query_int(query: str) -> Optional[int]:
    """
    Parses the leading base-10 integer of a query string.

    Leading whitespace and a sign are allowed and anything after the digits is
    ignored, so "42abc" parses as 42. Only ASCII digits count. A digit run too
    long to be in any supported range parses as +/- QUERY_OVERFLOW, so it is
    rejected as out of range rather than overflowing int().

    Args:
        query: The raw query value

    Returns:
        The parsed integer, or None if the query does not start with digits

    Examples:
        >>> parse_query_int(" 1994")
        1994
        >>> parse_query_int("12.5")
        12
        >>> parse_query_int("XIV") is None
        True
    """
    match = _LEADING_INTEGER_REGEX.match(query)
    if match is None:
        return None

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_QUERY_DIGITS:
        return -QUERY_OVERFLOW if sign == "-" else QUERY_OVERFLOW
    return int(sign + digits)

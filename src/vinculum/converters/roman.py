from ..numerals import int_to_roman, roman_to_int
from .base import BaseConverter, ConversionMode


class RomanConverter(BaseConverter):
    """Converts integers between 1 and 3999 to classical Roman numerals."""

    mode = ConversionMode.ROMAN

    def convert_locally(self, query: str) -> str:
        return int_to_roman(self.parse_integer(query))


class RomanReverseConverter(BaseConverter):
    """Converts classical Roman numerals to integers, returned as decimal strings."""

    mode = ConversionMode.ROMAN_REVERSE

    def convert_locally(self, query: str) -> str:
        return str(roman_to_int(query))

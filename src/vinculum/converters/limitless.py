from typing import Any, Dict, Optional

from ..api_client import RomanServiceClient
from ..numerals import int_to_roman_limitless, normalize_vinculum, roman_to_int_limitless
from .base import BaseConverter, ConversionMode


class LimitlessConverter(BaseConverter):
    """
    Converts integers up to 3,999,999 to Roman numerals with a vinculum block.

    Numerals are produced with combining overlines. With `ascii_vinculum` set,
    the marked letters are written with a leading underscore instead, which is
    easier to type back in and survives terminals that cannot render overlines.
    """

    mode = ConversionMode.LIMITLESS

    def __init__(
        self,
        config: Dict[str, Any],
        api_client: Optional[RomanServiceClient] = None,
        ascii_vinculum: bool = False,
    ):
        super().__init__(config, api_client)
        self.ascii_vinculum = ascii_vinculum

    def convert_locally(self, query: str) -> str:
        return int_to_roman_limitless(self.parse_integer(query))

    def convert(self, query: Optional[str]) -> Dict[str, str]:
        record = super().convert(query)
        if self.ascii_vinculum:
            record["output"] = normalize_vinculum(record["output"])
        return record


class LimitlessReverseConverter(BaseConverter):
    """Converts Roman numerals in either vinculum form to integers, returned as decimal strings."""

    mode = ConversionMode.LIMITLESS_REVERSE

    def convert_locally(self, query: str) -> str:
        return str(roman_to_int_limitless(query))

"""Converter modules for the four conversion modes."""

from typing import Any, Dict, Optional, Type

from ..api_client import RomanServiceClient
from .base import BaseConverter, ConversionMode
from .limitless import LimitlessConverter, LimitlessReverseConverter
from .roman import RomanConverter, RomanReverseConverter

CONVERTER_CLASSES: Dict[ConversionMode, Type[BaseConverter]] = {
    ConversionMode.ROMAN: RomanConverter,
    ConversionMode.ROMAN_REVERSE: RomanReverseConverter,
    ConversionMode.LIMITLESS: LimitlessConverter,
    ConversionMode.LIMITLESS_REVERSE: LimitlessReverseConverter,
}


def get_converter(
    mode: ConversionMode,
    config: Dict[str, Any],
    api_client: Optional[RomanServiceClient] = None,
    **kwargs: Any,
) -> BaseConverter:
    """
    Builds the converter for a conversion mode.

    Args:
        mode: The conversion mode
        config: Configuration dictionary
        api_client: Optional service client to delegate conversions to
        **kwargs: Extra arguments for the converter class (e.g. ascii_vinculum)

    Returns:
        A converter instance
    """
    return CONVERTER_CLASSES[ConversionMode(mode)](config, api_client, **kwargs)


__all__ = [
    "BaseConverter",
    "ConversionMode",
    "LimitlessConverter",
    "LimitlessReverseConverter",
    "RomanConverter",
    "RomanReverseConverter",
    "CONVERTER_CLASSES",
    "get_converter",
]

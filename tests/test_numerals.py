"""
Tests for the Roman numeral codec.

Covers:
1. Classical encoding and decoding (1-3999)
2. Limitless encoding and decoding with vinculum blocks (1-3,999,999)
3. The thousands rounding policy
4. Vinculum marker helpers
"""

import re

import pytest

from vinculum import (
    InvalidNumeralError,
    OutOfRangeError,
    VinculumError,
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
from vinculum.utils.constants import ROMAN_NUMERAL_MAP

OVERLINE = "\u0305"


# =============================================================================
# CLASSICAL NUMERALS
# =============================================================================


class TestIntToRoman:
    """Tests for int_to_roman"""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (900, "CM"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3888, "MMMDCCCLXXXVIII"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_known_values(self, number: int, expected: str) -> None:
        assert int_to_roman(number) == expected

    @pytest.mark.parametrize("number", [0, -1, 4000, 10**9])
    def test_out_of_range(self, number: int) -> None:
        with pytest.raises(OutOfRangeError, match="Input must be between 1 and 3999"):
            int_to_roman(number)

    @pytest.mark.parametrize("number", [1.0, "12", None, True])
    def test_non_integer_rejected(self, number) -> None:
        with pytest.raises(OutOfRangeError):
            int_to_roman(number)

    def test_never_four_identical_symbols(self) -> None:
        """Canonical output never repeats a symbol four times in a row"""
        repeated = re.compile(r"(.)\1\1\1")
        for number in range(1, 4000):
            assert not repeated.search(int_to_roman(number)), number

    def test_output_matches_grammar(self) -> None:
        for number in range(1, 4000):
            assert is_classical_numeral(int_to_roman(number)), number

    def test_errors_share_base_class(self) -> None:
        """Callers can catch either the package error or ValueError"""
        with pytest.raises(VinculumError):
            int_to_roman(0)
        with pytest.raises(ValueError):
            int_to_roman(0)


class TestRomanToInt:
    """Tests for roman_to_int"""

    @pytest.mark.parametrize(
        "numeral, expected",
        [
            ("I", 1),
            ("IV", 4),
            ("XLII", 42),
            ("XCIX", 99),
            ("CDXLIV", 444),
            ("MCMXCIV", 1994),
            ("MMMCMXCIX", 3999),
        ],
    )
    def test_known_values(self, numeral: str, expected: int) -> None:
        assert roman_to_int(numeral) == expected

    @pytest.mark.parametrize(
        "numeral",
        [
            "IIII",  # four repeats
            "IC",  # invalid subtractive pair
            "VX",
            "IL",
            "XM",
            "VV",
            "DD",
            "MMMM",
            "IXI",
            "xiv",  # grammar is upper case only
            " XIV",
            "XIV ",
            "ABC",
            "",
        ],
    )
    def test_invalid_numerals(self, numeral: str) -> None:
        with pytest.raises(InvalidNumeralError, match="Invalid Roman numeral"):
            roman_to_int(numeral)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidNumeralError):
            roman_to_int(14)

    def test_round_trip_full_range(self) -> None:
        for number in range(1, 4000):
            assert roman_to_int(int_to_roman(number)) == number

    def test_accepted_strings_reencode_to_themselves(self) -> None:
        """Every numeral the decoder accepts is the canonical form of its value"""
        thousands = ["", "M", "MM", "MMM"]
        hundreds = ["", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM"]
        tens = ["", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC"]
        ones = ["", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX"]
        for m in thousands:
            for c in hundreds:
                for x in tens:
                    for i in ones:
                        numeral = m + c + x + i
                        if numeral:
                            assert int_to_roman(roman_to_int(numeral)) == numeral


class TestDigitTable:
    """Tests for the digit-value table"""

    def test_strictly_descending(self) -> None:
        values = [value for value, _ in ROMAN_NUMERAL_MAP]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values) == 13

    def test_symbols_decode_to_their_values(self) -> None:
        for value, symbol in ROMAN_NUMERAL_MAP:
            assert roman_to_int(symbol) == value


# =============================================================================
# LIMITLESS NUMERALS
# =============================================================================


class TestIntToRomanLimitless:
    """Tests for int_to_roman_limitless"""

    def test_small_numbers_are_classical(self) -> None:
        assert int_to_roman_limitless(1) == "I"
        assert int_to_roman_limitless(3999) == "MMMCMXCIX"

    def test_pure_multiplier(self) -> None:
        """5000 is an overlined V with no remainder block"""
        assert int_to_roman_limitless(5000) == "V" + OVERLINE
        assert roman_to_int_limitless("V" + OVERLINE) == 5000

    def test_first_limitless_value(self) -> None:
        assert int_to_roman_limitless(4000) == "I" + OVERLINE + "V" + OVERLINE

    def test_exact_thousands_below_ten_thousand(self) -> None:
        assert split_limitless(int_to_roman_limitless(9999)) == ("IX", "CMXCIX")
        assert split_limitless(int_to_roman_limitless(4001)) == ("IV", "I")

    def test_rounds_thousands_down_to_tens(self) -> None:
        """342944 uses a 340 multiplier and a 2944 remainder"""
        result = int_to_roman_limitless(342944)
        assert result == apply_vinculum("CCCXL") + "MMCMXLIV"
        assert split_limitless(result) == ("CCCXL", "MMCMXLIV")

    def test_keeps_raw_thousands_when_remainder_too_large(self) -> None:
        """3999999 cannot round to 3990 (remainder 9999), so 3999 is kept"""
        result = int_to_roman_limitless(3999999)
        assert split_limitless(result) == ("MMMCMXCIX", "CMXCIX")

    @pytest.mark.parametrize(
        "number, thousands, remainder",
        [
            (10000, "X", ""),
            (13500, "X", "MMMD"),
            (13999, "X", "MMMCMXCIX"),
            (14000, "XIV", ""),
            (14001, "XIV", "I"),
            (25250, "XXV", "CCL"),
        ],
    )
    def test_rounding_boundaries(self, number: int, thousands: str, remainder: str) -> None:
        assert split_limitless(int_to_roman_limitless(number)) == (thousands, remainder)

    @pytest.mark.parametrize("number", [0, -5, 4000000])
    def test_out_of_range(self, number: int) -> None:
        with pytest.raises(OutOfRangeError, match="Input must be between 1 and 3,999,999"):
            int_to_roman_limitless(number)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(OutOfRangeError):
            int_to_roman_limitless("5000")


class TestRomanToIntLimitless:
    """Tests for roman_to_int_limitless"""

    def test_ascii_form(self) -> None:
        assert roman_to_int_limitless("_C_C_C_X_LMMCMXLIV") == 342944

    def test_overline_form(self) -> None:
        numeral = apply_vinculum("CCCXL") + "MMCMXLIV"
        assert roman_to_int_limitless(numeral) == 342944

    def test_plain_numeral(self) -> None:
        assert roman_to_int_limitless("MCMXCIV") == 1994

    def test_non_canonical_split_is_accepted(self) -> None:
        """Any grammatical split decodes, not only the one the encoder picks"""
        assert roman_to_int_limitless("_C_C_C_X_L_I_ICMXLIV") == 342944
        assert roman_to_int_limitless("_IMMM") == 4000

    def test_max_value(self) -> None:
        assert roman_to_int_limitless("_M_M_M_C_M_X_C_I_XCMXCIX") == 3999999

    @pytest.mark.parametrize(
        "numeral",
        ["X_V", "_", "_x", "xiv", "_V" + OVERLINE, "_V_V_", "12", "V I"],
    )
    def test_malformed_layout(self, numeral: str) -> None:
        with pytest.raises(InvalidNumeralError, match="Invalid Roman numeral format"):
            roman_to_int_limitless(numeral)

    def test_invalid_marked_block(self) -> None:
        with pytest.raises(InvalidNumeralError, match="Invalid vinculum Roman numeral part"):
            roman_to_int_limitless("_I_I_I_I")

    def test_invalid_plain_block(self) -> None:
        """A remainder above 3999 is rejected by the classical grammar"""
        with pytest.raises(InvalidNumeralError, match="Invalid normal Roman numeral part"):
            roman_to_int_limitless("_VMMMM")

    def test_empty_string_is_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError, match="Resulting number must be between 1 and 3,999,999"):
            roman_to_int_limitless("")

    def test_total_above_upper_bound(self) -> None:
        with pytest.raises(OutOfRangeError):
            roman_to_int_limitless("_M_M_M_C_M_X_C_I_XMMMCMXCIX")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidNumeralError):
            roman_to_int_limitless(None)

    def test_round_trip_sampled(self) -> None:
        numbers = list(range(1, 20001)) + list(range(20001, 4000000, 997)) + [3999999]
        for number in numbers:
            assert roman_to_int_limitless(int_to_roman_limitless(number)) == number

    def test_round_trip_through_ascii_form(self) -> None:
        for number in range(3990000, 4000000, 37):
            ascii_numeral = normalize_vinculum(int_to_roman_limitless(number))
            assert roman_to_int_limitless(ascii_numeral) == number


# =============================================================================
# VINCULUM HELPERS
# =============================================================================


class TestVinculumHelpers:
    """Tests for the marker conversion helpers"""

    def test_apply_vinculum(self) -> None:
        assert apply_vinculum("XV") == "X" + OVERLINE + "V" + OVERLINE
        assert apply_vinculum("") == ""

    def test_normalize_vinculum(self) -> None:
        assert normalize_vinculum("X" + OVERLINE + "V" + OVERLINE + "II") == "_X_VII"

    def test_normalize_is_idempotent_on_ascii(self) -> None:
        assert normalize_vinculum("_X_VII") == "_X_VII"

    def test_format_vinculum(self) -> None:
        assert format_vinculum("_X_VII") == "X" + OVERLINE + "V" + OVERLINE + "II"

    def test_format_then_normalize(self) -> None:
        assert normalize_vinculum(format_vinculum("_C_C_C_X_LMMCMXLIV")) == "_C_C_C_X_LMMCMXLIV"

    def test_split_limitless(self) -> None:
        assert split_limitless("_X_VII") == ("XV", "II")
        assert split_limitless("XIV") == ("", "XIV")
        assert split_limitless("") == ("", "")

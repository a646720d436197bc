"""Constants used throughout the Vinculum converter."""

# Roman numeral conversion limits
MAX_ROMAN_NUMERAL = 3999
MAX_LIMITLESS_NUMERAL = 3999999

# Thousands multipliers below this are encoded exactly, above it they are
# rounded down to a multiple of ten when the remainder allows it
EXACT_MULTIPLIER_LIMIT = 10000

# HTTP status codes for retry
SERVER_ERROR_CODES = [500, 502, 503, 504]

# Roman numeral mapping (from largest to smallest for greedy algorithm)
ROMAN_NUMERAL_MAP = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ROMAN_SYMBOL_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Classical grammar for 1-3999
CLASSICAL_PATTERN = r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"

# Vinculum markers: combining overline after a letter, or "_" before it
COMBINING_OVERLINE = "\u0305"
ASCII_VINCULUM = "_"

# Limitless numerals after normalization: marked block then plain block
LIMITLESS_PATTERN = r"((?:_[IVXLCDM])*)([IVXLCDM]*)"

# Defaults applied when no config.json is present
DEFAULT_CONFIG = {
    "service_base_url": "http://localhost:8080",
    "timeout": 15,
    "max_retries": 3,
    "max_workers": 8,
    "output_dir": "output",
    "log_level": "INFO",
}

# Query integers with more significant digits than this are out of every
# supported range and are read as +/- QUERY_OVERFLOW
MAX_QUERY_DIGITS = 20
QUERY_OVERFLOW = 10**MAX_QUERY_DIGITS

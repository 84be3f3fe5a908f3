"""Integer radix conversions (decimal, hex, binary, octal, Roman).

Python integers are arbitrary precision, so no value is truncated.
"""
import re

from ..domain.errors import DecodeError
from .symbol_codecs import int_to_roman, roman_to_int

_PREFIXES = {16: "0x", 2: "0b", 8: "0o", 10: ""}
_DIGITS = {
    16: re.compile(r"^[-+]?(0x)?[0-9a-f]+$", re.IGNORECASE),
    2: re.compile(r"^[-+]?(0b)?[01]+$", re.IGNORECASE),
    8: re.compile(r"^[-+]?(0o)?[0-7]+$", re.IGNORECASE),
    10: re.compile(r"^[-+]?[0-9]+$"),
}
_NAMES = {16: "hexadecimal", 2: "binary", 8: "octal", 10: "decimal"}


def parse_int(text: str, base: int) -> int:
    """Parse an integer in ``base``, accepting the matching ``0x``/``0b``/``0o`` prefix."""
    cleaned = re.sub(r"[\s_]", "", text)
    if not _DIGITS[base].match(cleaned):
        raise DecodeError(f"Invalid {_NAMES[base]} integer: {text.strip()!r}")
    return int(cleaned, base)


def format_int(number: int, base: int) -> str:
    sign = "-" if number < 0 else ""
    magnitude = abs(number)
    if base == 16:
        digits = f"{magnitude:X}"
    elif base == 2:
        digits = f"{magnitude:b}"
    elif base == 8:
        digits = f"{magnitude:o}"
    else:
        digits = str(magnitude)
    return f"{sign}{_PREFIXES[base]}{digits}"


def convert_radix(text: str, from_base: int, to_base: int) -> str:
    return format_int(parse_int(text, from_base), to_base)


def int_text_to_roman(text: str, base: int = 10) -> str:
    return int_to_roman(parse_int(text, base))


def roman_to_int_text(text: str, base: int = 10) -> str:
    return format_int(roman_to_int(text), base)


def roman_to_bit_string(text: str) -> str:
    """Roman numeral to plain base-2 digits, without a prefix."""
    return f"{roman_to_int(text):b}"

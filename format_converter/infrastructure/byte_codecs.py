"""Byte and text codecs: Base64/32/58, hex, bit strings and text escapes.

Every codec works on ``bytes`` at its core. Text enters and leaves through
strict UTF-8, so a decoded byte sequence that is not valid UTF-8 is reported
as a ``DecodeError`` instead of being patched with replacement characters.
"""
import base64
import binascii
import html
import json
import re
from urllib.parse import quote, unquote, unquote_to_bytes

from ..domain.errors import DecodeError

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_BASE58_INDEX = {symbol: index for index, symbol in enumerate(BASE58_ALPHABET)}
_BASE32_INDEX = {symbol: index for index, symbol in enumerate(BASE32_ALPHABET)}
_WHITESPACE = re.compile(r"\s+")
_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]*$")
_HTML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}
_UNICODE_ESCAPE = re.compile(r"\\u\{([0-9a-fA-F]+)\}|\\u([0-9a-fA-F]{4})")


def utf8_encode(text: str) -> bytes:
    return text.encode("utf-8")


def utf8_decode(data: bytes) -> str:
    """Decode bytes as strict UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Decoded bytes are not valid UTF-8 (byte {exc.start})") from exc


# -------------------- Base64 --------------------

def bytes_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def base64_to_bytes(text: str) -> bytes:
    cleaned = _WHITESPACE.sub("", text)
    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"Invalid Base64: {exc}") from exc


def _url_alphabet(encoded: str) -> str:
    return encoded.replace("+", "-").replace("/", "_").rstrip("=")


def _standard_alphabet(text: str) -> str:
    cleaned = _WHITESPACE.sub("", text).replace("-", "+").replace("_", "/")
    return cleaned + "=" * (-len(cleaned) % 4)


def bytes_to_base64url(data: bytes) -> str:
    return _url_alphabet(bytes_to_base64(data))


def base64url_to_bytes(text: str) -> bytes:
    if "+" in text or "/" in text:
        raise DecodeError("Invalid Base64 URL: '+' and '/' are not part of the URL-safe alphabet")
    return base64_to_bytes(_standard_alphabet(text))


def base64_to_base64url(text: str) -> str:
    """Re-encode validated Base64 in the URL-safe alphabet without padding."""
    return bytes_to_base64url(base64_to_bytes(text))


def base64url_to_base64(text: str) -> str:
    return bytes_to_base64(base64url_to_bytes(text))


# -------------------- Base32 (RFC 4648) --------------------

def bytes_to_base32(data: bytes) -> str:
    """Encode bytes as a Base32 bit stream, padded to a multiple of 8 symbols."""
    if not data:
        return ""
    bit_count = len(data) * 8
    value = int.from_bytes(data, "big")
    # Zero-pad the bit stream to a multiple of 5 bits.
    pad_bits = -bit_count % 5
    value <<= pad_bits
    group_count = (bit_count + pad_bits) // 5
    symbols = [
        BASE32_ALPHABET[(value >> (5 * (group_count - 1 - i))) & 0x1F]
        for i in range(group_count)
    ]
    encoded = "".join(symbols)
    return encoded + "=" * (-len(encoded) % 8)


def base32_to_bytes(text: str) -> bytes:
    cleaned = _WHITESPACE.sub("", text).rstrip("=").upper()
    value = 0
    for position, symbol in enumerate(cleaned):
        index = _BASE32_INDEX.get(symbol)
        if index is None:
            raise DecodeError(f"Invalid Base32 character {symbol!r} at position {position}")
        value = (value << 5) | index
    bit_count = len(cleaned) * 5
    byte_count = bit_count // 8
    # Trailing bits that do not fill a byte are padding.
    value >>= bit_count - byte_count * 8
    return value.to_bytes(byte_count, "big")


# -------------------- Base58 (Bitcoin alphabet) --------------------

def bytes_to_base58(data: bytes) -> str:
    """Encode bytes as a big-endian integer in base 58.

    Leading zero bytes carry no numeric weight, so each one becomes a literal
    leading '1'.
    """
    number = int.from_bytes(data, "big")
    symbols = []
    while number > 0:
        number, remainder = divmod(number, 58)
        symbols.append(BASE58_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    encoded = "1" * leading_zeros + "".join(reversed(symbols))
    return encoded


def base58_to_bytes(text: str) -> bytes:
    cleaned = text.strip()
    number = 0
    for position, symbol in enumerate(cleaned):
        index = _BASE58_INDEX.get(symbol)
        if index is None:
            raise DecodeError(f"Invalid Base58 character {symbol!r} at position {position}")
        number = number * 58 + index
    leading_zeros = len(cleaned) - len(cleaned.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_zeros + body


# -------------------- Hex and bit strings --------------------

def bytes_to_hex(data: bytes) -> str:
    return " ".join(f"{byte:02x}" for byte in data)


def hex_to_bytes(text: str) -> bytes:
    cleaned = _WHITESPACE.sub("", text)
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    if not _HEX_DIGITS.match(cleaned):
        raise DecodeError("Invalid hex: only 0-9 and a-f are allowed")
    if len(cleaned) % 2:
        raise DecodeError(f"Invalid hex: odd number of digits ({len(cleaned)})")
    return bytes.fromhex(cleaned)


def bytes_to_binary(data: bytes) -> str:
    return " ".join(f"{byte:08b}" for byte in data)


def binary_to_bytes(text: str) -> bytes:
    tokens = text.split()
    if len(tokens) == 1 and len(tokens[0]) > 8 and len(tokens[0]) % 8 == 0:
        tokens = [tokens[0][i:i + 8] for i in range(0, len(tokens[0]), 8)]
    result = bytearray()
    for position, token in enumerate(tokens):
        if len(token) != 8 or set(token) - {"0", "1"}:
            raise DecodeError(f"Invalid binary group {token!r} at position {position}: expected 8 bits")
        result.append(int(token, 2))
    return bytes(result)


# -------------------- Text escapes --------------------

def text_to_unicode_escapes(text: str) -> str:
    parts = []
    for char in text:
        code_point = ord(char)
        if code_point > 0xFFFF:
            parts.append(f"\\u{{{code_point:x}}}")
        else:
            parts.append(f"\\u{code_point:04x}")
    return "".join(parts)


def unicode_escapes_to_text(text: str) -> str:
    def replace(match):
        code_point = int(match.group(1) or match.group(2), 16)
        if code_point > 0x10FFFF:
            raise DecodeError(f"Code point out of range: U+{code_point:X}")
        return chr(code_point)

    return _UNICODE_ESCAPE.sub(replace, text)


def text_to_url(text: str) -> str:
    # Same reserved set as encodeURIComponent.
    return quote(text, safe="-_.!~*'()")


def url_to_text(text: str) -> str:
    return unquote(text, errors="strict")


def bytes_to_url(data: bytes) -> str:
    return quote(data, safe="-_.!~*'()")


def url_to_bytes(text: str) -> bytes:
    return unquote_to_bytes(text)


def text_to_html_entities(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(char, char) for char in text)


def html_entities_to_text(text: str) -> str:
    return html.unescape(text)


def text_to_json_string(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def json_string_to_text(text: str) -> str:
    value = json.loads(text.strip())
    if not isinstance(value, str):
        raise DecodeError("JSON value is not a string")
    return value


# -------------------- Text-level shortcuts --------------------

def text_to_base64(text: str) -> str:
    return bytes_to_base64(utf8_encode(text))


def base64_to_text(text: str) -> str:
    return utf8_decode(base64_to_bytes(text))


def text_to_base64url(text: str) -> str:
    return bytes_to_base64url(utf8_encode(text))


def base64url_to_text(text: str) -> str:
    return utf8_decode(base64url_to_bytes(text))


def text_to_base32(text: str) -> str:
    return bytes_to_base32(utf8_encode(text))


def base32_to_text(text: str) -> str:
    return utf8_decode(base32_to_bytes(text))


def text_to_base58(text: str) -> str:
    return bytes_to_base58(utf8_encode(text))


def base58_to_text(text: str) -> str:
    return utf8_decode(base58_to_bytes(text))


def text_to_hex(text: str) -> str:
    return bytes_to_hex(utf8_encode(text))


def hex_to_text(text: str) -> str:
    return utf8_decode(hex_to_bytes(text))


def text_to_binary(text: str) -> str:
    return bytes_to_binary(utf8_encode(text))


def binary_to_text(text: str) -> str:
    return utf8_decode(binary_to_bytes(text))

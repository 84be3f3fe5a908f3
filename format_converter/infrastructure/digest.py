"""Message digests.

MD5 is implemented here on 32-bit words with explicit wraparound. The SHA
family is delegated to :mod:`hashlib` through ``DigestConverter``.
"""
import math
import struct
from typing import List

MASK_32 = 0xFFFFFFFF

SHA_ALGORITHMS = ("sha1", "sha256", "sha384", "sha512")

_MD5_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Per-round left-rotation amounts, four per round repeated four times.
_MD5_SHIFTS = (
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)

# K[i] = floor(|sin(i + 1)| * 2**32)
_MD5_CONSTANTS = [int(abs(math.sin(index + 1)) * 2 ** 32) & MASK_32 for index in range(64)]


def _rotate_left(value: int, amount: int) -> int:
    value &= MASK_32
    return ((value << amount) | (value >> (32 - amount))) & MASK_32


def _md5_pad(message: bytes) -> bytes:
    """Pad to 448 mod 512 bits and append the 64-bit little-endian bit length."""
    bit_length = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    padding = b"\x80" + b"\x00" * ((55 - len(message)) % 64)
    return message + padding + struct.pack("<Q", bit_length)


def _md5_block(state: List[int], block: bytes) -> None:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for index in range(64):
        if index < 16:
            mixed = (b & c) | (~b & d)
            word = index
        elif index < 32:
            mixed = (b & d) | (c & ~d)
            word = (5 * index + 1) % 16
        elif index < 48:
            mixed = b ^ c ^ d
            word = (3 * index + 5) % 16
        else:
            mixed = c ^ (b | ~d)
            word = (7 * index) % 16
        total = (a + (mixed & MASK_32) + _MD5_CONSTANTS[index] + words[word]) & MASK_32
        a, d, c = d, c, b
        b = (b + _rotate_left(total, _MD5_SHIFTS[index])) & MASK_32
    for position, value in enumerate((a, b, c, d)):
        state[position] = (state[position] + value) & MASK_32


def md5_bytes(message: bytes) -> str:
    """Return the MD5 digest of ``message`` as lowercase hex."""
    state = list(_MD5_INITIAL_STATE)
    padded = _md5_pad(message)
    for offset in range(0, len(padded), 64):
        _md5_block(state, padded[offset:offset + 64])
    return struct.pack("<4I", *state).hex()


def md5_text(text: str) -> str:
    return md5_bytes(text.encode("utf-8"))

"""Cipher-like text transforms and case styles.

ROT13 and Atbash only touch ASCII letters and are their own inverse. Pig Latin
decoding is a best-effort heuristic: the boundary of a relocated consonant
cluster is not recorded, so the whole trailing consonant run of the stem is
moved back. "ellohay" decodes to "hello", but "eastbay" (from "beast")
decodes to "stbea".
"""
import re
from typing import Dict, List

VOWELS = "aeiou"

LEET: Dict[str, str] = {
    "a": "4", "e": "3", "i": "1", "o": "0", "s": "5",
    "t": "7", "b": "8", "g": "9", "l": "|",
}
LEET_DECODE: Dict[str, str] = {symbol: letter for letter, symbol in LEET.items()}

_ASCII_WORD = re.compile(r"\b[a-zA-Z]+\b", re.ASCII)
_WORD_START = re.compile(r"\b\w", re.ASCII)
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def _shift_letter(char: str, transform) -> str:
    base = ord("A") if char <= "Z" else ord("a")
    return chr(base + transform(ord(char) - base))


def rot13(text: str) -> str:
    return re.sub(
        r"[A-Za-z]",
        lambda match: _shift_letter(match.group(0), lambda offset: (offset + 13) % 26),
        text,
    )


def atbash(text: str) -> str:
    return re.sub(
        r"[A-Za-z]",
        lambda match: _shift_letter(match.group(0), lambda offset: 25 - offset),
        text,
    )


def reverse(text: str) -> str:
    return text[::-1]


def to_leet(text: str) -> str:
    return "".join(LEET.get(char.lower(), char) for char in text)


def from_leet(text: str) -> str:
    return "".join(LEET_DECODE.get(char, char) for char in text)


# -------------------- Pig Latin --------------------

def _restore_capital(original: str, word: str) -> str:
    if original[0].isupper():
        return word[:1].upper() + word[1:]
    return word


def _pig_latin_word(match) -> str:
    original = match.group(0)
    lower = original.lower()
    if lower[0] in VOWELS:
        return _restore_capital(original, lower + "yay")
    cluster = 0
    while cluster < len(lower) and lower[cluster] not in VOWELS:
        cluster += 1
    return _restore_capital(original, lower[cluster:] + lower[:cluster] + "ay")


def _english_word(match) -> str:
    original = match.group(0)
    lower = original.lower()
    if lower.endswith("yay"):
        word = lower[:-3]
    elif lower.endswith("ay"):
        stem = lower[:-2]
        # The relocated cluster is the trailing run of consonants.
        split = len(stem)
        while split > 0 and stem[split - 1] not in VOWELS:
            split -= 1
        word = stem[split:] + stem[:split]
    else:
        word = lower
    if not word:
        return original
    return _restore_capital(original, word)


def to_pig_latin(text: str) -> str:
    return _ASCII_WORD.sub(_pig_latin_word, text)


def from_pig_latin(text: str) -> str:
    return _ASCII_WORD.sub(_english_word, text)


# -------------------- Case styles --------------------

def split_words(text: str) -> List[str]:
    """Split text into words on separators and camelCase boundaries."""
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", text)
    return [word for word in _NON_ALNUM.split(spaced) if word]


def to_upper(text: str) -> str:
    return text.upper()


def to_lower(text: str) -> str:
    return text.lower()


def to_title(text: str) -> str:
    return _WORD_START.sub(lambda match: match.group(0).upper(), text)


def to_camel(text: str) -> str:
    words = [word.lower() for word in split_words(text)]
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_snake(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def to_kebab(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


def words_to_text(text: str) -> str:
    """Turn a camel, snake or kebab identifier back into spaced lowercase words."""
    return " ".join(word.lower() for word in split_words(text))

"""Symbolic codecs: Morse, Grade 1 Braille, NATO phonetic and Roman numerals."""
from typing import Dict, List, Tuple

from ..domain.errors import DecodeError, RangeError

MORSE_WORD_SEPARATOR = "/"

MORSE_CODE: Dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    " ": MORSE_WORD_SEPARATOR,
}
MORSE_DECODE: Dict[str, str] = {code: char for char, code in MORSE_CODE.items()}

BRAILLE_NUMBER_SIGN = "⠼"

BRAILLE: Dict[str, str] = {
    "a": "⠁", "b": "⠃", "c": "⠉", "d": "⠙", "e": "⠑", "f": "⠋", "g": "⠛",
    "h": "⠓", "i": "⠊", "j": "⠚", "k": "⠅", "l": "⠇", "m": "⠍", "n": "⠝",
    "o": "⠕", "p": "⠏", "q": "⠟", "r": "⠗", "s": "⠎", "t": "⠞", "u": "⠥",
    "v": "⠧", "w": "⠺", "x": "⠭", "y": "⠽", "z": "⠵",
    "1": "⠼⠁", "2": "⠼⠃", "3": "⠼⠉", "4": "⠼⠙", "5": "⠼⠑",
    "6": "⠼⠋", "7": "⠼⠛", "8": "⠼⠓", "9": "⠼⠊", "0": "⠼⠚",
    " ": " ", ".": "⠲", ",": "⠂", "?": "⠦", "!": "⠖", ";": "⠆", ":": "⠒",
    "-": "⠤", "'": "⠄", '"': "⠦", "/": "⠌", "(": "⠐⠣", ")": "⠐⠜",
}
# '?' and '"' share a cell; the first entry wins on decode.
BRAILLE_DECODE: Dict[str, str] = {}
for _char, _cells in BRAILLE.items():
    BRAILLE_DECODE.setdefault(_cells, _char)

NATO_ALPHABET: Dict[str, str] = {
    "A": "Alfa", "B": "Bravo", "C": "Charlie", "D": "Delta", "E": "Echo",
    "F": "Foxtrot", "G": "Golf", "H": "Hotel", "I": "India", "J": "Juliet",
    "K": "Kilo", "L": "Lima", "M": "Mike", "N": "November", "O": "Oscar",
    "P": "Papa", "Q": "Quebec", "R": "Romeo", "S": "Sierra", "T": "Tango",
    "U": "Uniform", "V": "Victor", "W": "Whiskey", "X": "X-ray", "Y": "Yankee",
    "Z": "Zulu",
}
NATO_DECODE: Dict[str, str] = {word.lower(): letter for letter, word in NATO_ALPHABET.items()}
# Common spellings that are not the ICAO forms.
NATO_DECODE.update({"alpha": "A", "juliett": "J", "xray": "X"})

ROMAN_NUMERALS: List[Tuple[int, str]] = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]
ROMAN_SYMBOLS: Dict[str, int] = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
ROMAN_MIN = 1
ROMAN_MAX = 3999


# -------------------- Morse --------------------

def text_to_morse(text: str) -> str:
    """Encode text as Morse code, one code per character separated by spaces.

    Words are separated by ``/``. Characters without a code pass through.
    """
    return " ".join(MORSE_CODE.get(char, char) for char in text.upper())


def morse_to_text(text: str) -> str:
    """Decode Morse code.

    Decoding is lenient: unknown tokens are copied through unchanged.
    """
    return "".join(MORSE_DECODE.get(token, token) for token in text.split())


# -------------------- Braille --------------------

def text_to_braille(text: str) -> str:
    return "".join(BRAILLE.get(char, char) for char in text.lower())


def braille_to_text(text: str) -> str:
    """Decode Grade 1 Braille.

    Two-cell sequences (number sign + digit, parentheses) are tried before
    single cells at every position.
    """
    result = []
    position = 0
    while position < len(text):
        pair = text[position:position + 2]
        if len(pair) == 2 and pair in BRAILLE_DECODE:
            result.append(BRAILLE_DECODE[pair])
            position += 2
            continue
        char = text[position]
        result.append(BRAILLE_DECODE.get(char, char))
        position += 1
    return "".join(result)


# -------------------- NATO phonetic --------------------

def text_to_nato(text: str) -> str:
    words = []
    for char in text.upper():
        if char == " ":
            words.append(MORSE_WORD_SEPARATOR)
        else:
            words.append(NATO_ALPHABET.get(char, char))
    return " ".join(words)


def nato_to_text(text: str) -> str:
    letters = []
    for word in text.split():
        if word == MORSE_WORD_SEPARATOR:
            letters.append(" ")
        else:
            letters.append(NATO_DECODE.get(word.lower(), word))
    return "".join(letters)


# -------------------- Roman numerals --------------------

def int_to_roman(number: int) -> str:
    """Encode an integer by greedy subtraction against the numeral table.

    Raises:
        RangeError: If the number is outside 1-3999
    """
    if number < ROMAN_MIN or number > ROMAN_MAX:
        raise RangeError(f"Roman numerals cover {ROMAN_MIN}-{ROMAN_MAX}, got {number}")
    parts = []
    for value, symbol in ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(text: str) -> int:
    """Decode a Roman numeral with the subtractive-pair rule.

    Raises:
        DecodeError: On an empty string or a character that is not a numeral
    """
    numeral = text.strip().upper()
    if not numeral:
        raise DecodeError("Empty Roman numeral")
    values = []
    for position, symbol in enumerate(numeral):
        if symbol not in ROMAN_SYMBOLS:
            raise DecodeError(f"Invalid Roman numeral character {symbol!r} at position {position}")
        values.append(ROMAN_SYMBOLS[symbol])
    total = 0
    for index, value in enumerate(values):
        following = values[index + 1] if index + 1 < len(values) else 0
        total += -value if value < following else value
    return total

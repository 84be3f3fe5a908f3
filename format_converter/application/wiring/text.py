"""Text encodings, ciphers, case styles and markup."""
from ...domain.configuration import FormattingOptions
from ...domain.format_ids import FormatId as F
from ...infrastructure import byte_codecs as bc
from ...infrastructure import markup
from ...infrastructure import symbol_codecs as sc
from ...infrastructure import text_transforms as tt
from ..registry import RegistryBuilder

# (format, encode from text, decode to text)
TEXT_CODECS = (
    (F.BASE64, bc.text_to_base64, bc.base64_to_text),
    (F.BASE64URL, bc.text_to_base64url, bc.base64url_to_text),
    (F.BASE32, bc.text_to_base32, bc.base32_to_text),
    (F.BASE58, bc.text_to_base58, bc.base58_to_text),
    (F.HEX, bc.text_to_hex, bc.hex_to_text),
    (F.BINARY, bc.text_to_binary, bc.binary_to_text),
    (F.URL, bc.text_to_url, bc.url_to_text),
    (F.HTML_ENT, bc.text_to_html_entities, bc.html_entities_to_text),
    (F.UNICODE, bc.text_to_unicode_escapes, bc.unicode_escapes_to_text),
    (F.JSON_ESCAPED, bc.text_to_json_string, bc.json_string_to_text),
    (F.MORSE, sc.text_to_morse, sc.morse_to_text),
    (F.BRAILLE, sc.text_to_braille, sc.braille_to_text),
    (F.NATO, sc.text_to_nato, sc.nato_to_text),
    (F.ROT13, tt.rot13, tt.rot13),
    (F.ATBASH, tt.atbash, tt.atbash),
    (F.REVERSE, tt.reverse, tt.reverse),
    (F.LEETSPEAK, tt.to_leet, tt.from_leet),
    (F.PIGLATIN, tt.to_pig_latin, tt.from_pig_latin),
)

# Byte-level codecs: (format, bytes -> text, text -> bytes)
BYTE_CODECS = {
    F.BASE64: (bc.bytes_to_base64, bc.base64_to_bytes),
    F.BASE64URL: (bc.bytes_to_base64url, bc.base64url_to_bytes),
    F.BASE32: (bc.bytes_to_base32, bc.base32_to_bytes),
    F.BASE58: (bc.bytes_to_base58, bc.base58_to_bytes),
    F.HEX: (bc.bytes_to_hex, bc.hex_to_bytes),
    F.BINARY: (bc.bytes_to_binary, bc.binary_to_bytes),
    F.URL: (bc.bytes_to_url, bc.url_to_bytes),
}

# Re-encodings that go through the decoded byte sequence, so they work on
# payloads that are not valid UTF-8.
BYTE_EDGES = (
    (F.BASE64, F.HEX), (F.HEX, F.BASE64),
    (F.BASE64, F.BASE32), (F.BASE32, F.BASE64),
    (F.BASE64, F.BINARY), (F.BINARY, F.BASE64),
    (F.HEX, F.BINARY), (F.BINARY, F.HEX),
    (F.URL, F.BASE64), (F.BASE64, F.URL),
    (F.URL, F.HEX), (F.HEX, F.URL),
    (F.BASE32, F.HEX), (F.HEX, F.BASE32),
    (F.BASE58, F.BASE64), (F.BASE64, F.BASE58),
    (F.BASE58, F.HEX), (F.HEX, F.BASE58),
    (F.BASE64URL, F.HEX),
)

# Symbolic and cipher cross-conversions composed through plain text.
TEXT_EDGES = (
    (F.ATBASH, F.MORSE), (F.ATBASH, F.BRAILLE),
    (F.ROT13, F.ATBASH), (F.ATBASH, F.ROT13),
    (F.ROT13, F.MORSE), (F.ROT13, F.BRAILLE),
    (F.REVERSE, F.BASE64), (F.REVERSE, F.MORSE), (F.REVERSE, F.BRAILLE),
    (F.REVERSE, F.LEETSPEAK), (F.LEETSPEAK, F.REVERSE),
    (F.REVERSE, F.PIGLATIN), (F.PIGLATIN, F.REVERSE),
    (F.MORSE, F.BRAILLE), (F.BRAILLE, F.MORSE),
    (F.BASE64, F.BRAILLE), (F.BRAILLE, F.BASE64),
    (F.LEETSPEAK, F.MORSE), (F.LEETSPEAK, F.BRAILLE),
    (F.PIGLATIN, F.BRAILLE), (F.BRAILLE, F.PIGLATIN),
    (F.MORSE, F.BINARY), (F.BINARY, F.MORSE),
    (F.MORSE, F.NATO), (F.NATO, F.MORSE),
    (F.BRAILLE, F.NATO), (F.NATO, F.BRAILLE),
)

CASE_STYLES = {
    F.UPPERCASE: tt.to_upper,
    F.LOWERCASE: tt.to_lower,
    F.TITLECASE: tt.to_title,
    F.CAMELCASE: tt.to_camel,
    F.SNAKECASE: tt.to_snake,
    F.KEBABCASE: tt.to_kebab,
}

CASE_EDGES = (
    (F.UPPERCASE, F.LOWERCASE), (F.LOWERCASE, F.UPPERCASE),
    (F.CAMELCASE, F.SNAKECASE), (F.SNAKECASE, F.CAMELCASE),
    (F.CAMELCASE, F.KEBABCASE), (F.KEBABCASE, F.CAMELCASE),
    (F.SNAKECASE, F.KEBABCASE), (F.KEBABCASE, F.SNAKECASE),
    (F.TITLECASE, F.CAMELCASE), (F.TITLECASE, F.SNAKECASE), (F.TITLECASE, F.KEBABCASE),
    (F.LOWERCASE, F.TITLECASE), (F.LOWERCASE, F.SNAKECASE),
    (F.LOWERCASE, F.KEBABCASE), (F.LOWERCASE, F.CAMELCASE),
    (F.UPPERCASE, F.TITLECASE), (F.UPPERCASE, F.SNAKECASE), (F.UPPERCASE, F.KEBABCASE),
    (F.SNAKECASE, F.UPPERCASE), (F.KEBABCASE, F.UPPERCASE),
)


def _identity(text: str) -> str:
    return text


def _retitle(text: str) -> str:
    return tt.to_title(text.lower())


def _byte_edge(source: F, target: F):
    _, decode = BYTE_CODECS[source]
    encode, _ = BYTE_CODECS[target]

    def convert(text: str) -> str:
        return encode(decode(text))

    convert.__name__ = f"{source.value}_to_{target.value}"
    return convert


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    for format_id, encode, decode in TEXT_CODECS:
        builder.register(F.TEXT, format_id, encode)
        builder.register(format_id, F.TEXT, decode)

    builder.register(F.BASE64, F.BASE64URL, bc.base64_to_base64url)
    builder.register(F.BASE64URL, F.BASE64, bc.base64url_to_base64)
    for source, target in BYTE_EDGES:
        builder.register(source, target, _byte_edge(source, target))

    for source, target in TEXT_EDGES:
        builder.register_composed(source, F.TEXT, target)

    # Case styles. Upper, lower and title case are already readable text.
    for style, transform in CASE_STYLES.items():
        builder.register(F.TEXT, style, transform)
        builder.register(F.PLAIN, style, transform)
    for style in (F.UPPERCASE, F.LOWERCASE, F.TITLECASE):
        builder.register(style, F.TEXT, _identity)
    for style in (F.CAMELCASE, F.SNAKECASE, F.KEBABCASE):
        builder.register(style, F.TEXT, tt.words_to_text)
    for source, target in CASE_EDGES:
        builder.register(source, target, _retitle if target == F.TITLECASE else CASE_STYLES[target])

    builder.register(F.MARKDOWN, F.HTML_MARKUP, markup.markdown_to_html)
    builder.register(F.MARKDOWN, F.PLAIN, markup.markdown_to_plain)
    builder.register(F.MARKDOWN, F.TEXT, _identity)
    builder.register(F.HTML_MARKUP, F.MARKDOWN, markup.html_to_markdown)
    builder.register(F.HTML_MARKUP, F.PLAIN, markup.html_to_plain)
    builder.register(F.PLAIN, F.HTML_MARKUP, markup.plain_to_html)

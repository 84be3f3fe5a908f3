"""Integer radixes and Roman numerals."""
from functools import partial

from ...domain.configuration import FormattingOptions
from ...domain.format_ids import FormatId as F
from ...infrastructure import radix
from ..registry import RegistryBuilder

RADIX_BASES = {F.DECIMAL: 10, F.NUMHEX: 16, F.NUMBIN: 2, F.NUMOCT: 8}

RADIX_EDGES = (
    (F.DECIMAL, F.NUMHEX), (F.NUMHEX, F.DECIMAL),
    (F.DECIMAL, F.NUMBIN), (F.NUMBIN, F.DECIMAL),
    (F.DECIMAL, F.NUMOCT), (F.NUMOCT, F.DECIMAL),
    (F.NUMHEX, F.NUMBIN), (F.NUMBIN, F.NUMHEX),
    (F.NUMOCT, F.NUMHEX), (F.NUMHEX, F.NUMOCT),
    (F.NUMOCT, F.NUMBIN), (F.NUMBIN, F.NUMOCT),
)


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    for source, target in RADIX_EDGES:
        builder.register(
            source,
            target,
            partial(radix.convert_radix, from_base=RADIX_BASES[source], to_base=RADIX_BASES[target]),
            name=f"{source.value}_to_{target.value}",
        )

    builder.register(F.DECIMAL, F.ROMAN, partial(radix.int_text_to_roman, base=10), name="decimal_to_roman")
    builder.register(F.ROMAN, F.DECIMAL, partial(radix.roman_to_int_text, base=10), name="roman_to_decimal")
    builder.register(F.NUMHEX, F.ROMAN, partial(radix.int_text_to_roman, base=16), name="numhex_to_roman")
    builder.register(F.ROMAN, F.NUMHEX, partial(radix.roman_to_int_text, base=16), name="roman_to_numhex")
    # "binary" here is the bare base-2 digit string of the number.
    builder.register(F.BINARY, F.ROMAN, partial(radix.int_text_to_roman, base=2), name="binary_to_roman")
    builder.register(F.ROMAN, F.BINARY, radix.roman_to_bit_string, name="roman_to_binary")

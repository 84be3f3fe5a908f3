"""Unit families, temperature scales and the alias groups between them."""
from ...domain.configuration import FormattingOptions
from ...domain.format_ids import FormatId as F
from ...infrastructure import units
from ..registry import RegistryBuilder

# Spellings that two unit tables introduced independently for the same unit.
ALIAS_GROUPS = (
    (F.KG_FORCE, F.KGFORCE),
    (F.NEWTONS, F.NEWTON),
    (F.KILONEWTONS, F.KILONEWTON),
    (F.FOOT_CANDLE, F.FOOTCANDLE),
    (F.PT, F.PT_TYPE),
    (F.PX, F.SCREEN_PX),
    (F.GHZ, F.GIGAHERTZ),
    (F.BTUH, F.BTU_PER_HR),
    (F.GALLONS, F.GALLON_US),
)


def _aliased(source: F, target: F) -> bool:
    return any(source in group and target in group for group in ALIAS_GROUPS)


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    for group in ALIAS_GROUPS:
        builder.add_alias_group(*group)

    for family in units.FAMILIES:
        for source, target in family.pairs():
            # Conversions between two spellings of one unit would be identities.
            if _aliased(source, target):
                continue
            builder.register(source, target, family.converter(source, target, formatting.significant_digits))

    for source, target in units.temperature_pairs():
        builder.register(
            source, target, units.temperature_converter(source, target, formatting.temperature_decimals)
        )

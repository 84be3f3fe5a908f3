"""Default registry assembly.

Each wiring module exposes ``register(builder, formatting)``. Order matters:
later modules compose edges that ``text`` registers first.
"""
from functools import lru_cache
from typing import Optional

from ...domain.configuration import FormattingOptions
from ..registry import ConversionRegistry, RegistryBuilder
from . import color, data, digest, number, text, time, unit

WIRING_MODULES = (text, data, number, time, digest, unit, color)


def build_default_registry(formatting: Optional[FormattingOptions] = None) -> ConversionRegistry:
    """
    Build a fresh registry holding every built-in conversion.

    Args:
        formatting: Numeric output rules for unit and temperature conversions

    Returns:
        A frozen ConversionRegistry
    """
    formatting = formatting or FormattingOptions()
    builder = RegistryBuilder()
    for module in WIRING_MODULES:
        module.register(builder, formatting)
    return builder.build()


@lru_cache(maxsize=None)
def get_default_registry(formatting: FormattingOptions = FormattingOptions()) -> ConversionRegistry:
    """Process-wide registry, built on first use per formatting profile."""
    return build_default_registry(formatting)

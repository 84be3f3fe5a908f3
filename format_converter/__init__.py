"""Format converter package."""
from __future__ import annotations

from .application.service import (
    ConversionService,
    aconvert,
    convert,
    describe_format,
    list_formats,
    list_targets,
    lookup_converter,
)

__all__ = [
    "ConversionService",
    "aconvert",
    "convert",
    "describe_format",
    "list_formats",
    "list_targets",
    "lookup_converter",
]
__version__ = "0.1.0"

"""Conversion error taxonomy.

Codecs catch their own internal failures and raise one of the typed errors
below. The public query surface turns them into ``ConversionResult`` values,
so callers never see a crash for malformed input or an unknown pair.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    DECODE = "decode"
    RANGE = "range"


DEFAULT_ERROR_MARKER = "[error: {code}] {message}"


def id_text(value) -> str:
    """Render a format id (enum member or plain string) as its wire token."""
    return str(getattr(value, "value", value))


@dataclass(eq=False)
class ConversionError(Exception):
    message: str
    from_id: Optional[str] = None
    to_id: Optional[str] = None
    code: ErrorCode = ErrorCode.DECODE

    def __str__(self) -> str:
        return self.message

    def with_pair(self, from_id: str, to_id: str) -> "ConversionError":
        """Attach the conversion pair if the raising codec did not know it."""
        if self.from_id is None:
            self.from_id = id_text(from_id)
        if self.to_id is None:
            self.to_id = id_text(to_id)
        return self

    def describe(self, marker: str = DEFAULT_ERROR_MARKER) -> str:
        """Render the error as an inline marker for line-oriented output."""
        return marker.format(code=self.code.value, message=self.message)


@dataclass(eq=False)
class NotFoundError(ConversionError):
    """Unknown format id, or no conversion registered for a pair."""

    code: ErrorCode = ErrorCode.NOT_FOUND


@dataclass(eq=False)
class DecodeError(ConversionError):
    """Malformed input for the source format."""

    code: ErrorCode = ErrorCode.DECODE


@dataclass(eq=False)
class RangeError(ConversionError):
    """Value outside the representable domain of a format."""

    code: ErrorCode = ErrorCode.RANGE


def no_conversion(from_id: str, to_id: str) -> NotFoundError:
    return NotFoundError(
        f"No conversion registered from {id_text(from_id)} to {id_text(to_id)}",
        from_id=id_text(from_id),
        to_id=id_text(to_id),
    )


__all__ = [
    "ErrorCode",
    "ConversionError",
    "NotFoundError",
    "DecodeError",
    "RangeError",
    "DEFAULT_ERROR_MARKER",
    "no_conversion",
    "id_text",
]

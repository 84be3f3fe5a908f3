"""Converter interface and the wrappers registry entries are built from."""
from __future__ import annotations

import asyncio
import binascii
import csv
import hashlib
import json
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional
from xml.etree.ElementTree import ParseError

import yaml

from .errors import ConversionError, DecodeError

# Failures a pure codec may leak from the standard library or PyYAML. Anything
# else is a programming error and propagates.
CODEC_FAILURES = (
    ValueError,
    UnicodeError,
    binascii.Error,
    json.JSONDecodeError,
    yaml.YAMLError,
    tomllib.TOMLDecodeError,
    ParseError,
    KeyError,
    IndexError,
    OverflowError,
    RecursionError,
    csv.Error,
)


class Converter(ABC):
    """A single registry entry: converts text in one format to another."""

    is_async: bool = False
    name: str = "converter"

    @abstractmethod
    def convert(self, text: str) -> str:
        """
        Convert text.

        Args:
            text: Input in the source format

        Returns:
            Output in the target format

        Raises:
            ConversionError: If the input cannot be converted
        """

    async def aconvert(self, text: str) -> str:
        """Convert text from a coroutine. Synchronous converters never suspend."""
        return self.convert(text)

    def __call__(self, text: str) -> str:
        return self.convert(text)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class FunctionConverter(Converter):
    """Wraps a pure codec function and types its failures."""

    def __init__(self, fn: Callable[[str], str], name: Optional[str] = None):
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "converter")

    def convert(self, text: str) -> str:
        try:
            return self._fn(text)
        except ConversionError:
            raise
        except CODEC_FAILURES as exc:
            raise DecodeError(f"{self.name}: {exc}") from exc


class ComposedConverter(Converter):
    """Runs two converters back to back through a neutral intermediate form."""

    def __init__(self, first: Converter, second: Converter):
        self.first = first
        self.second = second
        self.name = f"{first.name} | {second.name}"
        self.is_async = first.is_async or second.is_async

    def convert(self, text: str) -> str:
        return self.second.convert(self.first.convert(text))

    async def aconvert(self, text: str) -> str:
        intermediate = await self.first.aconvert(text)
        return await self.second.aconvert(intermediate)


class DigestConverter(Converter):
    """Delegates a SHA-family digest to hashlib.

    These are the only registry entries allowed to suspend: ``aconvert`` runs
    the digest on a worker thread.
    """

    is_async = True

    def __init__(self, algorithm: str):
        hashlib.new(algorithm)
        self.algorithm = algorithm
        self.name = algorithm

    def convert(self, text: str) -> str:
        try:
            payload = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise DecodeError(f"{self.name}: input is not valid UTF-8 text: {exc}") from exc
        return hashlib.new(self.algorithm, payload).hexdigest()

    async def aconvert(self, text: str) -> str:
        return await asyncio.to_thread(self.convert, text)


def as_converter(value, name: Optional[str] = None) -> Converter:
    """Coerce a plain callable into a Converter."""
    if isinstance(value, Converter):
        return value
    if callable(value):
        return FunctionConverter(value, name=name)
    raise TypeError(f"Not a converter: {value!r}")


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a public conversion call."""
    ok: bool
    value: Optional[str] = None
    error: Optional[ConversionError] = None

    @classmethod
    def success(cls, value: str) -> "ConversionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ConversionError) -> "ConversionResult":
        return cls(ok=False, error=error)

    def unwrap(self) -> str:
        """Return the value or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value or ""

    def render(self, marker: Optional[str] = None) -> str:
        """Value on success, inline error marker on failure."""
        if self.ok:
            return self.value or ""
        if marker is None:
            return self.error.describe()
        return self.error.describe(marker)

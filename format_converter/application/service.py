"""Public query surface over the conversion registry."""
import logging
from typing import List, Optional, Union

from ..domain import catalog
from ..domain.catalog import FormatDescriptor
from ..domain.configuration import ConverterConfig
from ..domain.converter import ConversionResult, Converter
from ..domain.errors import ConversionError, NotFoundError, id_text
from ..domain.format_ids import FormatId
from .registry import ConversionRegistry
from .wiring import get_default_registry

logger = logging.getLogger(__name__)

FormatKey = Union[str, FormatId]


class ConversionService:
    """
    Conversion entry point used by the CLI and by embedding applications.

    Wraps a read-only registry; instances hold no mutable state and may be
    shared between threads.
    """

    def __init__(self, registry: Optional[ConversionRegistry] = None, config: Optional[ConverterConfig] = None):
        """
        Initialize the service.

        Args:
            registry: Registry to query. Defaults to the process-wide registry
                built with ``config.formatting``.
            config: Converter configuration
        """
        self.config = config or ConverterConfig()
        self.registry = registry or get_default_registry(self.config.formatting)

    def list_formats(self) -> List[FormatDescriptor]:
        return catalog.list_formats()

    def describe_format(self, format_id: FormatKey) -> Optional[FormatDescriptor]:
        return catalog.describe_format(format_id)

    def list_targets(self, from_id: FormatKey) -> List[str]:
        """Alias-expanded target ids reachable in one step from ``from_id``."""
        return [target.value for target in self.registry.targets(from_id)]

    def lookup_converter(self, from_id: FormatKey, to_id: FormatKey) -> Converter:
        """
        Return the converter registered for a pair.

        Raises:
            NotFoundError: If an id is unknown or no conversion is registered
        """
        return self.registry.lookup(from_id, to_id)

    def _resolve(self, from_id: FormatKey, to_id: FormatKey) -> Optional[Converter]:
        """Converter for the pair, or None when both ids name the same format."""
        source = FormatId.from_string(from_id)
        target = FormatId.from_string(to_id)
        if source == target or self.registry.index.are_aliases(source, target):
            return None
        return self.registry.lookup(source, target)

    def convert(self, from_id: FormatKey, to_id: FormatKey, text: str) -> ConversionResult:
        """
        Convert text between two formats.

        Converting a format to itself (or to one of its aliases) returns the
        input unchanged.

        Args:
            from_id: Source format id
            to_id: Target format id
            text: Input in the source format

        Returns:
            ConversionResult holding either the output or the typed error
        """
        try:
            converter = self._resolve(from_id, to_id)
            if converter is None:
                return ConversionResult.success(text)
            return ConversionResult.success(converter.convert(text))
        except NotFoundError as exc:
            logger.debug("No conversion: %s", exc.message)
            return ConversionResult.failure(exc.with_pair(from_id, to_id))
        except ConversionError as exc:
            logger.debug("Conversion %s -> %s failed: %s", id_text(from_id), id_text(to_id), exc.code.value)
            return ConversionResult.failure(exc.with_pair(from_id, to_id))

    async def aconvert(self, from_id: FormatKey, to_id: FormatKey, text: str) -> ConversionResult:
        """Coroutine form of ``convert``; suspends only for digest entries."""
        try:
            converter = self._resolve(from_id, to_id)
            if converter is None:
                return ConversionResult.success(text)
            return ConversionResult.success(await converter.aconvert(text))
        except NotFoundError as exc:
            logger.debug("No conversion: %s", exc.message)
            return ConversionResult.failure(exc.with_pair(from_id, to_id))
        except ConversionError as exc:
            logger.debug("Conversion %s -> %s failed: %s", id_text(from_id), id_text(to_id), exc.code.value)
            return ConversionResult.failure(exc.with_pair(from_id, to_id))


def _default_service() -> ConversionService:
    return ConversionService(get_default_registry())


def list_formats() -> List[FormatDescriptor]:
    return catalog.list_formats()


def describe_format(format_id: FormatKey) -> Optional[FormatDescriptor]:
    return catalog.describe_format(format_id)


def list_targets(from_id: FormatKey) -> List[str]:
    return _default_service().list_targets(from_id)


def lookup_converter(from_id: FormatKey, to_id: FormatKey) -> Converter:
    return _default_service().lookup_converter(from_id, to_id)


def convert(from_id: FormatKey, to_id: FormatKey, text: str) -> ConversionResult:
    return _default_service().convert(from_id, to_id, text)


async def aconvert(from_id: FormatKey, to_id: FormatKey, text: str) -> ConversionResult:
    return await _default_service().aconvert(from_id, to_id, text)

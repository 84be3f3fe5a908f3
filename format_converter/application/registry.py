"""Conversion registry: a read-only table keyed by ordered format-id pairs."""
import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..domain.converter import ComposedConverter, Converter, as_converter
from ..domain.errors import no_conversion
from ..domain.format_ids import FormatId
from .alias_index import AliasIndex

logger = logging.getLogger(__name__)

FormatKey = Union[str, FormatId]
ConversionKey = Tuple[FormatId, FormatId]


class ConversionRegistry:
    """
    Frozen dispatch table plus its alias and adjacency index.

    Lookups try the exact pair first, then every combination of the
    alias-expanded source and target ids.
    """

    def __init__(
        self,
        converters: Mapping[ConversionKey, Converter],
        alias_groups: Iterable[Iterable[FormatId]] = (),
    ):
        self._converters = MappingProxyType(dict(converters))
        self._index = AliasIndex(self._converters.keys(), alias_groups)

    @property
    def index(self) -> AliasIndex:
        return self._index

    @property
    def converters(self) -> Mapping[ConversionKey, Converter]:
        return self._converters

    def keys(self) -> Iterator[ConversionKey]:
        return iter(self._converters)

    def __len__(self) -> int:
        return len(self._converters)

    def __contains__(self, key) -> bool:
        return key in self._converters

    def find(self, from_id: FormatKey, to_id: FormatKey) -> Optional[Converter]:
        """
        Find the converter for a pair.

        Args:
            from_id: Source format id
            to_id: Target format id

        Returns:
            The converter, or None if no spelling of the pair is registered

        Raises:
            NotFoundError: If either id is not a known format
        """
        source = FormatId.from_string(from_id)
        target = FormatId.from_string(to_id)
        for from_variant in self._index.variants(source):
            for to_variant in self._index.variants(target):
                converter = self._converters.get((from_variant, to_variant))
                if converter is not None:
                    return converter
        return None

    def lookup(self, from_id: FormatKey, to_id: FormatKey) -> Converter:
        """Like ``find`` but raises ``NotFoundError`` when nothing is registered."""
        converter = self.find(from_id, to_id)
        if converter is None:
            raise no_conversion(FormatId.from_string(from_id), FormatId.from_string(to_id))
        return converter

    def targets(self, from_id: FormatKey) -> List[FormatId]:
        """Alias-expanded targets of a format, without duplicates."""
        source = FormatId.from_string(from_id)
        return sorted(self._index.targets(source), key=lambda member: member.value)

    @property
    def alias_groups(self) -> List[FrozenSet[FormatId]]:
        return self._index.groups


class RegistryBuilder:
    """Collects registrations at start-up and freezes them into a registry."""

    def __init__(self):
        self._converters: Dict[ConversionKey, Converter] = {}
        self._alias_groups: List[FrozenSet[FormatId]] = []

    def register(self, from_id: FormatKey, to_id: FormatKey, converter, name: Optional[str] = None) -> "RegistryBuilder":
        """
        Register a converter for an ordered pair.

        Args:
            from_id: Source format id
            to_id: Target format id
            converter: A ``Converter`` or a plain ``str -> str`` callable
            name: Optional display name for plain callables

        Raises:
            ValueError: If the pair is already registered
        """
        key = (FormatId.from_string(from_id), FormatId.from_string(to_id))
        if key[0] == key[1]:
            raise ValueError(f"Refusing identity conversion for {key[0].value}")
        if key in self._converters:
            raise ValueError(f"Duplicate conversion {key[0].value} -> {key[1].value}")
        self._converters[key] = as_converter(converter, name=name or f"{key[0].value}->{key[1].value}")
        return self

    def register_composed(self, from_id: FormatKey, via_id: FormatKey, to_id: FormatKey) -> "RegistryBuilder":
        """Register ``from -> to`` as ``from -> via`` followed by ``via -> to``."""
        source = FormatId.from_string(from_id)
        via = FormatId.from_string(via_id)
        target = FormatId.from_string(to_id)
        try:
            first = self._converters[(source, via)]
            second = self._converters[(via, target)]
        except KeyError as exc:
            raise ValueError(
                f"Cannot compose {source.value} -> {via.value} -> {target.value}: "
                f"missing edge {exc.args[0][0].value} -> {exc.args[0][1].value}"
            ) from None
        return self.register(source, target, ComposedConverter(first, second))

    def add_alias_group(self, *ids: FormatKey) -> "RegistryBuilder":
        members = frozenset(FormatId.from_string(format_id) for format_id in ids)
        if len(members) < 2:
            raise ValueError("An alias group needs at least two distinct ids")
        self._alias_groups.append(members)
        return self

    def has(self, from_id: FormatKey, to_id: FormatKey) -> bool:
        return (FormatId.from_string(from_id), FormatId.from_string(to_id)) in self._converters

    def build(self) -> ConversionRegistry:
        registry = ConversionRegistry(self._converters, self._alias_groups)
        logger.debug(
            "Built conversion registry: %d edges, %d alias groups, %d source formats",
            len(registry),
            len(registry.alias_groups),
            len(registry.index.sources()),
        )
        return registry

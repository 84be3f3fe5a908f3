"""Tests for RegistryBuilder, ConversionRegistry and AliasIndex."""
import pytest

from format_converter.application.alias_index import AliasIndex
from format_converter.application.registry import ConversionRegistry, RegistryBuilder
from format_converter.domain.converter import ComposedConverter, Converter
from format_converter.domain.errors import NotFoundError
from format_converter.domain.format_ids import FormatId as F


@pytest.fixture
def builder():
    """Builder with a tiny text/hex/upper graph and one alias group."""
    builder = RegistryBuilder()
    builder.register(F.TEXT, F.HEX, lambda text: text.encode().hex())
    builder.register(F.HEX, F.TEXT, lambda text: bytes.fromhex(text).decode())
    builder.register(F.TEXT, F.UPPERCASE, str.upper)
    builder.register("pt", "cm", lambda text: "converted")
    builder.add_alias_group(F.PT, F.PT_TYPE)
    return builder


class TestRegistryBuilder:
    """Test RegistryBuilder."""

    def test_duplicate_pair_rejected(self, builder):
        with pytest.raises(ValueError):
            builder.register("text", "hex", str.lower)

    def test_identity_pair_rejected(self, builder):
        with pytest.raises(ValueError):
            builder.register(F.TEXT, F.TEXT, str.lower)

    def test_unknown_id_rejected(self, builder):
        with pytest.raises(NotFoundError):
            builder.register("text", "klingon", str.lower)

    def test_register_composed(self, builder):
        builder.register_composed(F.HEX, F.TEXT, F.UPPERCASE)
        registry = builder.build()
        converter = registry.lookup(F.HEX, F.UPPERCASE)
        assert isinstance(converter, ComposedConverter)
        assert converter.convert("6869") == "HI"

    def test_register_composed_needs_both_edges(self, builder):
        with pytest.raises(ValueError):
            builder.register_composed(F.UPPERCASE, F.TEXT, F.HEX)

    def test_alias_group_needs_two_ids(self, builder):
        with pytest.raises(ValueError):
            builder.add_alias_group(F.PT)
        with pytest.raises(ValueError):
            builder.add_alias_group(F.PT, "pt")

    def test_has(self, builder):
        assert builder.has("text", "hex")
        assert not builder.has("hex", "uppercase")

    def test_build_is_frozen(self, builder):
        registry = builder.build()
        builder.register(F.UPPERCASE, F.TEXT, str.lower)
        assert (F.UPPERCASE, F.TEXT) not in registry
        with pytest.raises(TypeError):
            registry.converters[(F.UPPERCASE, F.TEXT)] = None


class TestConversionRegistry:
    """Test lookups and alias expansion."""

    @pytest.fixture
    def registry(self, builder):
        return builder.build()

    def test_exact_lookup(self, registry):
        converter = registry.lookup("text", "hex")
        assert isinstance(converter, Converter)
        assert converter.convert("hi") == "6869"

    def test_lookup_through_alias(self, registry):
        assert registry.lookup("pt-type", "cm").convert("1") == "converted"

    def test_missing_pair(self, registry):
        assert registry.find(F.HEX, F.UPPERCASE) is None
        with pytest.raises(NotFoundError) as excinfo:
            registry.lookup(F.HEX, F.UPPERCASE)
        assert str(excinfo.value) == "No conversion registered from hex to uppercase"

    def test_unknown_id(self, registry):
        with pytest.raises(NotFoundError):
            registry.find("klingon", "text")

    def test_targets(self, registry):
        assert registry.targets("text") == [F.HEX, F.UPPERCASE]
        assert registry.targets("pt-type") == [F.CM]
        assert registry.targets("cm") == []

    def test_len_and_keys(self, registry):
        assert len(registry) == 4
        assert set(registry.keys()) == {
            (F.TEXT, F.HEX),
            (F.HEX, F.TEXT),
            (F.TEXT, F.UPPERCASE),
            (F.PT, F.CM),
        }


class TestAliasIndex:
    """Test AliasIndex."""

    def test_overlapping_groups_merge(self):
        index = AliasIndex([], [(F.PT, F.PT_TYPE), (F.PT_TYPE, F.PICA)])
        assert index.groups == [frozenset({F.PT, F.PT_TYPE, F.PICA})]
        assert index.are_aliases(F.PT, F.PICA)

    def test_variants_start_with_self(self):
        index = AliasIndex([], [(F.NEWTONS, F.NEWTON)])
        assert index.variants(F.NEWTON) == (F.NEWTON, F.NEWTONS)
        assert index.variants(F.TEXT) == (F.TEXT,)

    def test_targets_expand_both_sides(self):
        index = AliasIndex([(F.DYNE, F.NEWTONS), (F.NEWTON, F.KILONEWTONS)], [(F.NEWTONS, F.NEWTON)])
        assert index.targets(F.DYNE) == frozenset({F.NEWTONS, F.NEWTON})
        assert index.targets(F.NEWTONS) == frozenset({F.KILONEWTONS})
        assert index.edge_count == 2
        assert index.sources() == [F.DYNE, F.NEWTON, F.NEWTONS]

    def test_empty(self):
        index = AliasIndex([])
        assert index.targets(F.TEXT) == frozenset()
        assert index.groups == []

    def test_registry_wraps_index(self):
        registry = ConversionRegistry({}, [(F.GHZ, F.GIGAHERTZ)])
        assert registry.alias_groups == [frozenset({F.GHZ, F.GIGAHERTZ})]

"""Invariants of the default registry."""
import asyncio
import concurrent.futures as cf
import copy
import json

import pytest

from format_converter.application.wiring import build_default_registry, get_default_registry
from format_converter.application.wiring.unit import ALIAS_GROUPS
from format_converter.domain.configuration import FormattingOptions
from format_converter.domain.errors import RangeError
from format_converter.domain.format_ids import FormatId as F
from format_converter.infrastructure import symbol_codecs
from format_converter.infrastructure.units import FAMILIES


@pytest.fixture(scope="module")
def registry():
    return build_default_registry()


class TestRegistryShape:
    """Test the assembled registry."""

    def test_size(self, registry):
        assert len(registry) > 500

    def test_get_default_registry_is_cached(self):
        assert get_default_registry() is get_default_registry()
        assert get_default_registry(FormattingOptions(significant_digits=4)) is not get_default_registry()

    def test_every_key_uses_catalog_ids(self, registry):
        for from_id, to_id in registry.keys():
            assert isinstance(from_id, F)
            assert isinstance(to_id, F)
            assert from_id != to_id

    def test_only_digest_entries_are_async(self, registry):
        async_keys = {key for key, converter in registry.converters.items() if converter.is_async}
        assert async_keys == {
            (F.TEXT, F.SHA1),
            (F.TEXT, F.SHA256),
            (F.TEXT, F.SHA384),
            (F.TEXT, F.SHA512),
            (F.BASE64, F.SHA256),
        }

    def test_every_family_pair_registered(self, registry):
        for family in FAMILIES:
            for source, target in family.pairs():
                if registry.index.are_aliases(source, target):
                    continue
                assert registry.find(source, target) is not None, (source, target)


class TestAdjacencyConsistency:
    """Every registered edge is discoverable from every spelling of its source."""

    def test_registered_targets_are_listed(self, registry):
        for from_id, to_id in registry.keys():
            for variant in registry.index.variants(from_id):
                assert to_id in registry.targets(variant), (variant, to_id)

    def test_listed_targets_resolve(self, registry):
        for source in registry.index.sources():
            for target in registry.targets(source):
                assert registry.find(source, target) is not None, (source, target)

    def test_targets_are_unique(self, registry):
        for source in registry.index.sources():
            targets = registry.targets(source)
            assert len(targets) == len(set(targets))
            assert source not in targets


class TestAliasSymmetry:
    """Any spelling of an aliased unit converts identically."""

    def test_alias_groups_registered(self, registry):
        assert {frozenset(group) for group in ALIAS_GROUPS} <= set(registry.alias_groups)

    @pytest.mark.parametrize("group", ALIAS_GROUPS, ids=lambda group: "/".join(member.value for member in group))
    def test_edges_visible_from_every_member(self, registry, group):
        for member in group:
            for from_id, to_id in list(registry.keys()):
                if from_id != member:
                    continue
                expected = registry.lookup(member, to_id).convert("12")
                for alias in group:
                    if alias == to_id or registry.index.are_aliases(alias, to_id):
                        continue
                    assert registry.lookup(alias, to_id).convert("12") == expected

    def test_lookup_by_alias_target(self, registry):
        assert registry.lookup("dyne", "kgforce").convert("980665") == registry.lookup("dyne", "kg-force").convert("980665")


class TestCoreConversions:
    """Representative conversions through the registry."""

    def test_roman(self, registry):
        assert registry.lookup("decimal", "roman").convert("1994") == "MCMXCIV"
        assert registry.lookup("roman", "decimal").convert("MCMXCIV") == "1994"
        for value in ("0", "4000"):
            with pytest.raises(RangeError):
                registry.lookup("decimal", "roman").convert(value)

    def test_inch_cm_round_trip(self, registry):
        there = registry.lookup("inches", "cm").convert("1.0")
        back = registry.lookup("cm", "inches").convert(there)
        assert abs(float(back) - 1.0) < 1e-4

    def test_md5(self, registry):
        assert registry.lookup("text", "md5").convert("") == "d41d8cd98f00b204e9800998ecf8427e"
        assert registry.lookup("text", "md5").convert("abc") == "900150983cd24fb0d6963f7d28e17f72"

    def test_sha_async(self, registry):
        converter = registry.lookup("text", "sha256")
        assert asyncio.run(converter.aconvert("abc")) == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_base64_hashes_decoded_text(self, registry):
        encoded = registry.lookup("text", "base64").convert("abc")
        assert registry.lookup("base64", "md5").convert(encoded) == "900150983cd24fb0d6963f7d28e17f72"
        assert registry.lookup("base64", "sha256").convert(encoded) == registry.lookup("text", "sha256").convert("abc")

    def test_braille_digit(self, registry):
        braille = registry.lookup("text", "braille").convert("5")
        assert registry.lookup("braille", "text").convert(braille) == "5"

    def test_temperature(self, registry):
        assert registry.lookup("celsius", "fahrenheit").convert("100") == "212.00 °F"

    def test_color(self, registry):
        assert registry.lookup("color-hex", "color-hsl").convert("#ff0000") == "hsl(0, 100%, 50%)"

    def test_timestamp(self, registry):
        assert registry.lookup("timestamp", "iso-date").convert("0") == "1970-01-01T00:00:00.000Z"
        assert registry.lookup("text", "timestamp").convert("1970-01-02T00:00:00Z") == "86400"

    def test_data_documents(self, registry):
        assert json.loads(registry.lookup("csv", "json").convert("a\n1")) == [{"a": "1"}]
        assert registry.lookup("json", "json-min").convert('{ "a": 1 }') == '{"a":1}'

    def test_case_styles(self, registry):
        assert registry.lookup("text", "snakecase").convert("Hello Big World") == "hello_big_world"
        assert registry.lookup("snakecase", "camelcase").convert("hello_big_world") == "helloBigWorld"
        assert registry.lookup("lowercase", "titlecase").convert("hello world") == "Hello World"
        assert registry.lookup("uppercase", "titlecase").convert("HELLO WORLD") == "Hello World"
        assert registry.lookup("kebabcase", "text").convert("hello-big-world") == "hello big world"

    def test_radix(self, registry):
        assert registry.lookup("decimal", "numhex").convert("255") == "0xFF"
        assert registry.lookup("numbin", "numoct").convert("0b111") == "0o7"
        assert registry.lookup("roman", "binary").convert("V") == "101"


class TestComposition:
    """A direct A->C entry agrees with A->B followed by B->C."""

    @pytest.mark.parametrize(
        "source, via, target, sample",
        [
            ("base64", "text", "braille", "SGkgNQ=="),
            ("base64", "text", "hex", "SGVsbG8="),
            ("hex", "text", "base64", "48 65 6c 6c 6f"),
            ("hex", "text", "binary", "48 69"),
            ("base32", "text", "hex", "JBSWY3DP"),
            ("base58", "text", "base64", "JxF12TrwUP45BMd"),
            ("url", "text", "base64", "a%20b"),
            ("morse", "text", "braille", "... --- ..."),
            ("rot13", "text", "atbash", "Uryyb"),
            ("reverse", "text", "base64", "olleh"),
            ("nato", "text", "morse", "Sierra Oscar Sierra"),
            ("base64", "text", "sha256", "YWJj"),
        ],
    )
    def test_composed_edge_matches_two_steps(self, registry, source, via, target, sample):
        direct = registry.lookup(source, target).convert(sample)
        two_step = registry.lookup(via, target).convert(registry.lookup(source, via).convert(sample))
        assert direct == two_step

    def test_byte_edges_accept_non_utf8_payloads(self, registry):
        assert registry.lookup("base64", "hex").convert("/w==") == "ff"
        assert registry.lookup("hex", "base64").convert("ff") == "/w=="


class TestPurity:
    """Conversions are deterministic and leave module tables untouched."""

    def test_repeated_calls_identical(self, registry):
        converter = registry.lookup("text", "morse")
        assert {converter.convert("Hello World") for _ in range(5)} == {".... . .-.. .-.. --- / .-- --- .-. .-.. -.."}

    def test_tables_unchanged(self, registry):
        morse = copy.deepcopy(symbol_codecs.MORSE_CODE)
        braille = copy.deepcopy(symbol_codecs.BRAILLE)
        for pair in [("text", "morse"), ("morse", "text"), ("text", "braille"), ("braille", "text")]:
            registry.lookup(*pair).convert("Hello 123")
        assert symbol_codecs.MORSE_CODE == morse
        assert symbol_codecs.BRAILLE == braille

    def test_concurrent_calls_identical(self, registry):
        pairs = [("text", "base58"), ("text", "sha512"), ("miles", "km"), ("color-hex", "color-cmyk")]
        samples = {"text": "Hello World", "miles": "26.2", "color-hex": "#336699"}

        def run(pair):
            return registry.lookup(*pair).convert(samples[pair[0]])

        expected = [run(pair) for pair in pairs]
        with cf.ThreadPoolExecutor(max_workers=8) as executor:
            for _ in range(5):
                assert list(executor.map(run, pairs)) == expected

"""Tests for the conversion service and its module-level shortcuts."""
import asyncio

import pytest

import format_converter
from format_converter.application.registry import RegistryBuilder
from format_converter.application.service import ConversionService
from format_converter.domain.catalog import FormatDescriptor
from format_converter.domain.configuration import ConverterConfig, FormattingOptions
from format_converter.domain.errors import ErrorCode, NotFoundError
from format_converter.domain.format_ids import FormatId as F


@pytest.fixture
def service():
    return ConversionService()


class TestConvert:
    """Test ConversionService.convert."""

    def test_success(self, service):
        result = service.convert("text", "base64", "Hello")
        assert result.ok
        assert result.value == "SGVsbG8="
        assert result.error is None

    def test_accepts_enum_members(self, service):
        assert service.convert(F.BASE64, F.TEXT, "SGVsbG8=").unwrap() == "Hello"

    def test_no_conversion_is_a_result(self, service):
        result = service.convert("hex", "celsius", "ff")
        assert not result.ok
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.message == "No conversion registered from hex to celsius"
        assert (result.error.from_id, result.error.to_id) == ("hex", "celsius")

    def test_unknown_id_is_a_result(self, service):
        result = service.convert("klingon", "text", "qapla")
        assert not result.ok
        assert result.error.code == ErrorCode.NOT_FOUND
        assert "klingon" in result.error.message
        assert result.error.from_id == "klingon"

    def test_decode_error_carries_pair(self, service):
        result = service.convert("base64", "text", "@@@")
        assert result.error.code == ErrorCode.DECODE
        assert (result.error.from_id, result.error.to_id) == ("base64", "text")

    def test_range_error(self, service):
        result = service.convert("decimal", "roman", "4000")
        assert result.error.code == ErrorCode.RANGE
        assert result.render() == f"[error: range] {result.error.message}"

    def test_unwrap_raises_captured_error(self, service):
        with pytest.raises(NotFoundError):
            service.convert("hex", "celsius", "ff").unwrap()

    def test_identity_returns_input(self, service):
        assert service.convert("text", "text", "as is").value == "as is"

    def test_alias_identity_returns_input(self, service):
        assert service.convert("newtons", "newton", "12").value == "12"

    def test_digest_entries_also_run_synchronously(self, service):
        assert service.convert("text", "sha1", "abc").value == "a9993e364706816aba3e25717850c26c9cd0d89d"


class TestAsyncConvert:
    """Test ConversionService.aconvert."""

    def test_sha256(self, service):
        result = asyncio.run(service.aconvert("text", "sha256", "abc"))
        assert result.value == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_sync_entry(self, service):
        assert asyncio.run(service.aconvert("text", "rot13", "Hello")).value == "Uryyb"

    def test_failure(self, service):
        result = asyncio.run(service.aconvert("sha256", "text", "ab"))
        assert result.error.code == ErrorCode.NOT_FOUND

    def test_concurrent_calls(self, service):
        async def run_all():
            return await asyncio.gather(*(service.aconvert("text", "sha512", word) for word in ("a", "b", "a")))

        first, second, third = asyncio.run(run_all())
        assert first.value == third.value
        assert first.value != second.value


class TestQueries:
    """Test the query surface."""

    def test_list_formats(self, service):
        formats = service.list_formats()
        assert len(formats) == len(F)
        assert all(isinstance(descriptor, FormatDescriptor) for descriptor in formats)

    def test_describe_format(self, service):
        descriptor = service.describe_format("base64")
        assert descriptor.display_name == "Base64"
        assert service.describe_format("klingon") is None

    def test_list_targets(self, service):
        assert service.list_targets("color-hex") == ["color-cmyk", "color-hsl", "color-hsv", "color-rgb"]

    def test_list_targets_includes_aliases(self, service):
        targets = service.list_targets("dyne")
        assert "newtons" in targets and "newton" in targets

    def test_list_targets_unknown_id(self, service):
        with pytest.raises(NotFoundError):
            service.list_targets("klingon")

    def test_lookup_converter(self, service):
        assert service.lookup_converter("text", "hex").convert("A") == "41"


class TestServiceConfiguration:
    """Test registries built from configuration."""

    def test_custom_registry(self):
        builder = RegistryBuilder()
        builder.register("text", "uppercase", str.upper)
        service = ConversionService(builder.build())
        assert service.convert("text", "uppercase", "abc").value == "ABC"
        assert service.convert("text", "base64", "abc").error.code == ErrorCode.NOT_FOUND

    def test_significant_digits(self):
        config = ConverterConfig(formatting=FormattingOptions(significant_digits=3))
        service = ConversionService(config=config)
        assert service.convert("miles", "km", "1").value == "1.61"

    def test_temperature_decimals(self):
        config = ConverterConfig(formatting=FormattingOptions(temperature_decimals=0))
        assert ConversionService(config=config).convert("celsius", "fahrenheit", "37").value == "99 °F"


class TestModuleFunctions:
    """Test the package-level shortcuts."""

    def test_convert(self):
        assert format_converter.convert("text", "hex", "Hi").value == "48 69"

    def test_aconvert(self):
        result = asyncio.run(format_converter.aconvert("text", "md5", "abc"))
        assert result.value == "900150983cd24fb0d6963f7d28e17f72"

    def test_queries(self):
        assert format_converter.describe_format("morse").group == "Text"
        assert len(format_converter.list_formats()) == len(F)
        assert "celsius" in format_converter.list_targets("kelvin")
        assert format_converter.lookup_converter("text", "morse").convert("E") == "."

"""Tests for line-oriented batch conversion."""
import logging

import pytest

from format_converter.application.batch import BatchResult, convert_batch
from format_converter.application.service import ConversionService
from format_converter.domain.configuration import BatchOptions, ConverterConfig


@pytest.fixture
def service():
    return ConversionService()


class TestConvertBatch:
    """Test convert_batch."""

    def test_each_line_converted(self, service):
        result = convert_batch(service, "text", "base64", "Hi\nthere")
        assert result == BatchResult(lines=["SGk=", "dGhlcmU="], failures=0)
        assert result.ok
        assert result.joined() == "SGk=\ndGhlcmU="

    def test_failing_line_is_isolated(self, service):
        result = convert_batch(service, "base64", "text", "SGk=\n@@@\nSGk=")
        assert result.failures == 1
        assert not result.ok
        assert result.lines[0] == "Hi"
        assert result.lines[1].startswith("[error: decode]")
        assert result.lines[2] == "Hi"

    def test_blank_lines_pass_through(self, service):
        result = convert_batch(service, "text", "uppercase", "a\n\n   \nb")
        assert result.lines == ["A", "", "", "B"]
        assert result.ok

    def test_unknown_pair_fails_every_line(self, service):
        result = convert_batch(service, "hex", "celsius", "ff\n00")
        assert result.failures == 2
        assert all(line.startswith("[error: not_found]") for line in result.lines)

    def test_order_preserved_with_threads(self, service):
        numbers = [str(value) for value in range(1, 60)]
        result = convert_batch(service, "decimal", "roman", "\n".join(numbers), max_workers=8)
        assert result.lines[0] == "I"
        assert result.lines[3] == "IV"
        assert result.lines[-1] == "LIX"
        assert len(result.lines) == len(numbers)

    def test_sequential(self, service):
        result = convert_batch(service, "decimal", "numhex", "255\n16", max_workers=1)
        assert result.lines == ["0xFF", "0x10"]

    def test_async_digest_pair(self, service):
        result = convert_batch(service, "text", "sha256", "abc\nabc")
        expected = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        assert result.lines == [expected, expected]

    def test_document_lines_fail_independently(self, service):
        result = convert_batch(service, "yaml", "toml", "1: a\n[[[\nname: x", max_workers=4)
        assert result.lines[0] == '1 = "a"'
        assert result.lines[1].startswith("[error: decode]")
        assert result.lines[2] == 'name = "x"'
        assert result.failures == 1

    def test_async_pair_with_unencodable_line(self, service):
        result = convert_batch(service, "text", "sha256", "abc\n\udcff")
        assert result.lines[0] == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        assert result.lines[1].startswith("[error: decode]")

    def test_custom_error_marker(self):
        config = ConverterConfig(batch=BatchOptions(max_workers=2, error_marker="!{code}"))
        result = convert_batch(ConversionService(config=config), "decimal", "roman", "0\n1")
        assert result.lines == ["!range", "I"]

    def test_failures_logged(self, service, caplog):
        with caplog.at_level(logging.WARNING, logger="format_converter"):
            convert_batch(service, "base64", "text", "@@@\nSGk=")
        assert "1 of 2 lines failed" in caplog.text

    def test_empty_input(self, service):
        assert convert_batch(service, "text", "hex", "") == BatchResult(lines=[], failures=0)

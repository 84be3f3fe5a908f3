"""Tests for the convert-format CLI."""
import io
import logging

import pytest

from format_converter.presentation.cli.main import build_parser, main
from format_converter.shared.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("FORMAT_CONVERTER_CONFIG", raising=False)
    for key in ("SIGNIFICANT_DIGITS", "TEMPERATURE_DECIMALS", "MAX_WORKERS", "ERROR_MARKER", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"FORMAT_CONVERTER_{key}", raising=False)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    handler = getattr(logger, "_format_converter_handler", None)
    if handler is not None:
        logger.removeHandler(handler)
        del logger._format_converter_handler
    logger.setLevel(logging.NOTSET)


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


class TestConvertCommand:
    """Test single conversions."""

    def test_text_to_base64(self, capsys):
        assert main(["--from", "text", "--to", "base64", "--input", "Hello"]) == 0
        assert capsys.readouterr().out == "SGVsbG8=\n"

    def test_reads_stdin(self, monkeypatch, capsys):
        _stdin(monkeypatch, "MCMXCIV\n")
        assert main(["--from", "roman", "--to", "decimal"]) == 0
        assert capsys.readouterr().out == "1994\n"

    def test_only_one_trailing_newline_stripped(self, monkeypatch, capsys):
        _stdin(monkeypatch, "a\n\n")
        assert main(["--from", "text", "--to", "hex"]) == 0
        assert capsys.readouterr().out == "61 0a\n"

    def test_async_digest(self, capsys):
        assert main(["--from", "text", "--to", "sha256", "--input", "abc"]) == 0
        assert capsys.readouterr().out.strip() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_unknown_format(self, capsys):
        assert main(["--from", "klingon", "--to", "text", "--input", "x"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Unknown format id: 'klingon'" in captured.err

    def test_no_conversion(self, capsys):
        assert main(["--from", "hex", "--to", "celsius", "--input", "ff"]) == 1
        assert "Error: No conversion registered from hex to celsius" in capsys.readouterr().err

    def test_decode_failure(self, capsys):
        assert main(["--from", "base64", "--to", "text", "--input", "@@@"]) == 1
        assert "Error: Invalid Base64" in capsys.readouterr().err

    def test_missing_pair(self, capsys):
        assert main(["--input", "x"]) == 1
        assert "Error: --from and --to are required" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "converter.yaml"
        path.write_text("formatting:\n  significant_digits: 3\n", encoding="utf-8")
        assert main(["--from", "miles", "--to", "km", "--input", "1", "--config", str(path)]) == 0
        assert capsys.readouterr().out == "1.61\n"


class TestBatchCommand:
    """Test --batch."""

    def test_batch(self, monkeypatch, capsys):
        _stdin(monkeypatch, "1\n4\n9\n")
        assert main(["--from", "decimal", "--to", "roman", "--batch"]) == 0
        assert capsys.readouterr().out == "I\nIV\nIX\n"

    def test_batch_with_failure(self, monkeypatch, capsys):
        _stdin(monkeypatch, "SGk=\n@@@\n")
        assert main(["--from", "base64", "--to", "text", "--batch"]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Hi"
        assert lines[1].startswith("[error: decode]")


class TestQueryCommands:
    """Test listing and describing formats."""

    def test_list_formats(self, capsys):
        assert main(["--list-formats"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 223
        assert lines[0].split()[0] == "text"

    def test_list_targets(self, capsys):
        assert main(["--list-targets", "color-hex"]) == 0
        assert capsys.readouterr().out.split() == ["color-cmyk", "color-hsl", "color-hsv", "color-rgb"]

    def test_list_targets_unknown(self, capsys):
        assert main(["--list-targets", "klingon"]) == 1
        assert "klingon" in capsys.readouterr().err

    def test_describe(self, capsys):
        assert main(["--describe", "base64"]) == 0
        out = capsys.readouterr().out
        assert "name:        Base64" in out
        assert "example:     SGVsbG8gV29ybGQ=" in out

    def test_describe_unknown(self, capsys):
        assert main(["--describe", "klingon"]) == 1
        assert "Unknown format id" in capsys.readouterr().err


class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.from_id is None
        assert args.batch is False
        assert args.verbose is False

    def test_verbose_enables_debug(self):
        main(["--verbose", "--describe", "text"])
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

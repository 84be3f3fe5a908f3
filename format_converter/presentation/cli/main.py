"""CLI entry point for the format converter."""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Iterable, Optional

from ...application.batch import convert_batch
from ...application.service import ConversionService
from ...config import load_config
from ...domain.errors import NotFoundError
from ...domain.format_ids import FormatId
from ...shared.logging import configure_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convert-format",
        description="Convert text between encodings, data formats, number bases, units and colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  convert-format --from text --to base64 --input "Hello"
  echo "MCMXCIV" | convert-format --from roman --to decimal
  convert-format --from celsius --to fahrenheit --batch < readings.txt
  convert-format --list-targets color-hex
        """,
    )
    parser.add_argument("--from", dest="from_id", help="Source format id")
    parser.add_argument("--to", dest="to_id", help="Target format id")
    parser.add_argument("--input", dest="input_text", help="Input text (default: read stdin)")
    parser.add_argument("--batch", action="store_true", help="Convert each input line separately")
    parser.add_argument("--list-formats", action="store_true", help="List every format id")
    parser.add_argument("--list-targets", metavar="ID", help="List the formats ID converts to")
    parser.add_argument("--describe", metavar="ID", help="Show the catalog entry for ID")
    parser.add_argument("--config", metavar="PATH", help="JSON or YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.input_text is not None:
        return args.input_text
    text = sys.stdin.read()
    # A single trailing newline is an artefact of the shell, not input.
    return text[:-1] if text.endswith("\n") else text


def _list_formats(service: ConversionService) -> int:
    for descriptor in service.list_formats():
        print(f"{descriptor.id.value:<20} {descriptor.group:<20} {descriptor.display_name}")
    return 0


def _list_targets(service: ConversionService, format_id: str) -> int:
    try:
        targets = service.list_targets(format_id)
    except NotFoundError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    for target in targets:
        print(target)
    return 0


def _describe(service: ConversionService, format_id: str) -> int:
    descriptor = service.describe_format(format_id)
    if descriptor is None:
        print(f"Error: Unknown format id: {format_id!r}", file=sys.stderr)
        return 1
    print(f"id:          {descriptor.id.value}")
    print(f"name:        {descriptor.display_name}")
    print(f"group:       {descriptor.group}")
    if descriptor.example_placeholder:
        print(f"example:     {descriptor.example_placeholder}")
    return 0


def _convert(service: ConversionService, args: argparse.Namespace) -> int:
    for value in (args.from_id, args.to_id):
        try:
            FormatId.from_string(value)
        except NotFoundError:
            print(f"Error: Unknown format id: {value!r}", file=sys.stderr)
            return 1

    text = _read_input(args)
    if args.batch:
        result = convert_batch(service, args.from_id, args.to_id, text)
        print(result.joined())
        return 0 if result.ok else 1

    outcome = asyncio.run(service.aconvert(args.from_id, args.to_id, text))
    if not outcome.ok:
        print(f"Error: {outcome.error.message}", file=sys.stderr)
        return 1
    print(outcome.value)
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    config = load_config(args.config, overrides={"log_level": "DEBUG"} if args.verbose else None)
    configure_logger(config.logging)
    service = ConversionService(config=config)

    if args.list_formats:
        return _list_formats(service)
    if args.list_targets:
        return _list_targets(service, args.list_targets)
    if args.describe:
        return _describe(service, args.describe)
    if not args.from_id or not args.to_id:
        print("Error: --from and --to are required", file=sys.stderr)
        return 1
    return _convert(service, args)


if __name__ == "__main__":
    sys.exit(main())

"""Main CLI entry point for bqnumeric."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .. import __version__
from ..cli.inspect import format_bytes, inspect_value, parse_bytes
from ..codec import decode, encode
from ..exceptions import NumericError
from ..models import NumericValue


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bqnumeric",
        description="bqnumeric: BigQuery NUMERIC byte-string codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bqnumeric --encode 1.2                 Print wire bytes as hex
  bqnumeric --encode -1.2 --format list  Print wire bytes as ints
  bqnumeric --decode 008c8647            Decode hex wire bytes
  bqnumeric --inspect 128                Show each encoding step
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="VALUE", type=str, help="Encode a decimal value")
    action.add_argument("--decode", metavar="BYTES", type=str, help="Decode wire bytes")
    action.add_argument(
        "--inspect",
        metavar="VALUE",
        type=str,
        help="Show the mantissa, two's complement and wire bytes of a value",
    )

    parser.add_argument(
        "--format",
        choices=["hex", "list"],
        default="hex",
        help="Byte rendering: hex string or comma-separated ints (default: hex)",
    )
    parser.add_argument("--json", action="store_true", help="Emit a JSON object")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"bqnumeric {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bqnumeric CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.encode is not None:
            wire = encode(args.encode)
            if args.json:
                record = NumericValue(value=args.encode)
                _print_json(record, wire, args.format)
            else:
                print(format_bytes(wire, args.format))
            return 0

        if args.decode is not None:
            try:
                wire = parse_bytes(args.decode, args.format)
            except ValueError as e:
                print(f"Error: invalid byte string: {e}", file=sys.stderr)
                return 1
            value = decode(wire)
            if args.json:
                _print_json(NumericValue(value=value), wire, args.format)
            else:
                print(format(value, "f"))
            return 0

        if args.inspect is not None:
            inspect_value(args.inspect, args.format)
            return 0
    except NumericError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


def _print_json(record: NumericValue, wire: bytes, style: str) -> None:
    payload = record.model_dump(mode="json")
    payload["wire"] = format_bytes(wire, style)
    print(json.dumps(payload))


if __name__ == "__main__":
    sys.exit(main())

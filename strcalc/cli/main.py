"""
strcalc CLI — Command-line interface for calculations.
"""

import argparse
import codecs
import sys
from pathlib import Path

from strcalc import __version__
from strcalc.calculator import DEFAULT_PIPELINE, get_engine
from strcalc.core.context import CalcRequest
from strcalc.ir.enums import CalcStatus
from strcalc.ir.serialization import save, to_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strcalc",
        description="String calculator: sum the numbers in a delimited string",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"strcalc {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    add_parser = subparsers.add_parser("add", help="Sum a delimited string")
    add_parser.add_argument(
        "input",
        type=str,
        help="Input text (use - for stdin)",
    )
    add_parser.add_argument(
        "-e",
        "--escapes",
        action="store_true",
        help="Interpret backslash escapes in the input (e.g. \\n)",
    )
    add_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    add_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json (full result with trace)",
    )
    add_parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Settings profile (default: STRCALC_PROFILE or 'default')",
    )

    # Logging configuration
    add_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: STRCALC_LOG_LEVEL or silent)",
    )
    add_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (pipeline,parse,validate,system). Default: all",
    )
    return parser


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "add":
        return run_add(args)

    return 0


def run_add(args: argparse.Namespace) -> int:
    """Run the add command."""
    from strcalc.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(level=args.log_level, channels=channels, force=True)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        text = args.input
    if args.escapes:
        try:
            text = codecs.decode(text, "unicode_escape")
        except UnicodeError as e:
            print(f"error: cannot decode escapes: {e}", file=sys.stderr)
            return 2

    request = CalcRequest(text=text, profile=args.profile)
    try:
        result = get_engine().calculate(request, DEFAULT_PIPELINE)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.format == "json":
        output = to_json(result)
    elif result.status == CalcStatus.SUCCESS:
        output = str(result.total)
    elif result.error is not None:
        output = f"error[{result.error.kind.value}]: {result.error.message}"
    else:
        output = "\n".join(f"[{d.level.value}] {d.code}: {d.message}" for d in result.diagnostics)

    if args.output and args.format == "json":
        save(result, args.output)
    elif args.output:
        Path(args.output).write_text(output + "\n")
    else:
        print(output)

    return 0 if result.status == CalcStatus.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""CLI entry point for diffengine.

Usage:
    python -m diffengine <command> [options]

Commands:
    compute-diff    Diff two versions of a file into structured chunks
    parse-diff      Parse unified diff text into structured chunks
"""

import argparse
import sys

from diffengine.commands.compute_diff import cmd_compute_diff
from diffengine.commands.parse_diff import cmd_parse_diff
from diffengine.infrastructure.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diffengine",
        description="Structured line diffs with per-line old/new line numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  compute-diff    Diff two versions of a file into structured chunks
  parse-diff      Parse unified diff text into structured chunks

Examples:
  diffengine compute-diff --old-file before.py --new-file after.py
  diffengine compute-diff --new-file added.py --format text
  git diff -- src/app.py | diffengine parse-diff --file-id src/app.py
  diffengine parse-diff --input-file change.diff --format text
        """,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details (skipped lines, input sizes) to stderr",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # compute-diff command
    parser_compute = subparsers.add_parser(
        "compute-diff",
        help="Diff two versions of a file into structured chunks",
    )
    parser_compute.add_argument(
        "--old-file",
        help="Path to the previous version. Omit for a new file",
    )
    parser_compute.add_argument(
        "--new-file",
        help="Path to the current version. Omit for a deleted file",
    )
    parser_compute.add_argument(
        "--file-id",
        default="",
        help="Identifier recorded on the result (default: the file path)",
    )
    parser_compute.add_argument(
        "--format",
        choices=["json", "text", "unified"],
        default="json",
        help="Output format (default: json)",
    )

    # parse-diff command
    parser_parse = subparsers.add_parser(
        "parse-diff",
        help="Parse unified diff text into structured chunks",
    )
    parser_parse.add_argument(
        "--input-file",
        help="Path to diff file. If not provided, reads from stdin",
    )
    parser_parse.add_argument(
        "--file-id",
        default="",
        help="Identifier recorded on the result (default: the input path)",
    )
    parser_parse.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(verbose=args.verbose)

    # Route to command implementations with explicit parameters
    if args.command == "compute-diff":
        return cmd_compute_diff(
            old_file=args.old_file,
            new_file=args.new_file,
            file_id=args.file_id,
            output_format=args.format,
            config_file=args.config,
        )

    elif args.command == "parse-diff":
        return cmd_parse_diff(
            input_file=args.input_file,
            file_id=args.file_id,
            output_format=args.format,
            config_file=args.config,
        )

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for dyn-product (dynprod).

This package provides the 'dynprod' command-line tool with subcommands:
    product: Print every combination of the given rows
    count: Show how many combinations the rows produce

Rows are given inline, one argument per row with items separated by commas
(``dynprod product a,b,c x,y``), or read from a TOML/JSON file with --file.

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .commands import cmd_count, cmd_product
from .utils import ExitCode, setup_logging

__all__ = [
    "main",
    "cmd_count",
    "cmd_product",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def _add_rows_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the row source options shared by every command."""
    parser.add_argument(
        "rows",
        nargs="*",
        metavar="ROW",
        help="One row per argument, items separated by the input separator (default: ',')",
    )
    parser.add_argument("-f", "--file", help="Read rows from a TOML or JSON file")
    parser.add_argument("-s", "--separator", help="Separator between items of an inline row")
    parser.add_argument("-c", "--config", help="Path to configuration file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON output",
    )


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )

    parser = argparse.ArgumentParser(
        prog="dynprod",
        usage="dynprod <command> [options]",
        description=(
            "dyn-product - Cartesian product of rows known only at run time\n\n"
            "Example:\n"
            "  dynprod product GroupA-1,GroupA-2 GroupB-1,GroupB-2"
        ),
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # product
    # ──────────────────────────────
    product_parser = subparsers.add_parser(
        "product",
        help="Print every combination of the rows",
        usage="dynprod product [ROW ...] [options]",
        description="Enumerate the cartesian product, last row changing fastest",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    _add_rows_arguments(product_parser)
    product_parser.add_argument(
        "-n",
        "--limit",
        type=int,
        metavar="N",
        help="Stop after N combinations (default: from config, 0 = all)",
    )
    product_parser.add_argument(
        "-o",
        "--output-separator",
        help="String placed between items of a combination (default: ' ')",
    )
    product_parser.add_argument(
        "-t",
        "--table",
        action="store_true",
        help="Render combinations as a table",
    )
    product_parser.set_defaults(func=cmd_product)

    # ──────────────────────────────
    # count
    # ──────────────────────────────
    count_parser = subparsers.add_parser(
        "count",
        help="Count combinations without enumerating them",
        usage="dynprod count [ROW ...] [options]",
        description="Show the length of each row and the size of their product",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    _add_rows_arguments(count_parser)
    count_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print only the number of combinations",
    )
    count_parser.set_defaults(func=cmd_count)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.ERROR)

    # Logging setup
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()

"""Product command - Print every combination of the given rows."""

import argparse
import logging
from itertools import islice

from rich.console import Console
from rich.table import Table

from ...config import Config
from ...product import DynProduct
from ..schemas import ProductResponse
from ..utils import ExitCode, exit_invalid_input, json_output, quiet_for_json, resolve_rows


def cmd_product(args: argparse.Namespace) -> None:
    """Enumerate the cartesian product of the rows.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (bad rows, rows file or limit)
    """
    use_json = quiet_for_json(args)
    config = Config(getattr(args, "config", None))

    try:
        rows = resolve_rows(args, config)
    except (FileNotFoundError, ValueError) as e:
        exit_invalid_input(str(e), use_json)

    try:
        limit = args.limit if args.limit is not None else config.get_limit()
    except ValueError as e:
        exit_invalid_input(str(e), use_json)

    if limit < 0:
        exit_invalid_input(f"Limit must be 0 (unlimited) or positive, got {limit}", use_json)

    product = DynProduct(rows)
    lengths = [len(row) for row in rows]
    total = product.total
    logging.info("Enumerating %d combinations of %d rows", total, len(rows))

    combinations = islice(product, limit) if limit else product

    if use_json:
        items = list(combinations)
        json_output(
            ProductResponse(
                rows=len(rows),
                lengths=lengths,
                total=total,
                count=len(items),
                truncated=len(items) < total,
                combinations=items,
            ),
            ExitCode.SUCCESS,
        )

    if args.table:
        table = Table(title=f"Product of {len(rows)} rows ({total:,} combinations)")
        table.add_column("#", style="cyan", justify="right")
        for i in range(len(rows)):
            table.add_column(f"Row {i}", style="magenta")
        shown = 0
        for shown, combination in enumerate(combinations, start=1):
            table.add_row(str(shown), *(str(item) for item in combination))
        console = Console()
        console.print(table)
        if shown < total:
            console.print(f"[dim]... and {total - shown:,} more combinations[/dim]")
        return

    separator = args.output_separator if args.output_separator is not None else config.get_output_separator()
    for combination in combinations:
        print(separator.join(str(item) for item in combination))

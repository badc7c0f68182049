"""Count command - Show how many combinations the rows produce."""

import argparse

from rich.console import Console
from rich.table import Table

from ...config import Config
from ...product import DynProduct
from ..schemas import CountResponse
from ..utils import ExitCode, exit_invalid_input, json_output, quiet_for_json, resolve_rows


def cmd_count(args: argparse.Namespace) -> None:
    """Print the size of the cartesian product without enumerating it.

    Args:
        args: Parsed command-line arguments
    """
    use_json = quiet_for_json(args)
    config = Config(getattr(args, "config", None))

    try:
        rows = resolve_rows(args, config)
    except (FileNotFoundError, ValueError) as e:
        exit_invalid_input(str(e), use_json)

    product = DynProduct(rows)
    lengths = [len(row) for row in rows]

    if use_json:
        json_output(
            CountResponse(rows=len(rows), lengths=lengths, total=product.total),
            ExitCode.SUCCESS,
        )

    if args.quiet:
        print(product.total)
        return

    table = Table(title="Rows")
    table.add_column("Row", style="cyan", justify="right")
    table.add_column("Length", style="magenta", justify="right")
    for i, length in enumerate(lengths):
        table.add_row(str(i), str(length))

    console = Console()
    console.print(table)
    console.print(f"[cyan]Combinations:[/cyan] {product.total:,}")

"""CLI command implementations.

Each module in this package implements a specific dynprod subcommand:
    product.py: Print every combination of the given rows
    count.py: Show the number of combinations without enumerating them
"""

from .count import cmd_count
from .product import cmd_product

__all__ = [
    "cmd_count",
    "cmd_product",
]

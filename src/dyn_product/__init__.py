"""dyn-product.

Lazy cartesian product of a number of sequences only known at run time.
Combinations are produced one at a time in odometer order (last sequence
fastest) and hold references to the caller's elements rather than copies.

Main modules:
    product: DynProduct enumerator and dyn_product() helper
    counter: Mixed-radix counter advance
    sequence: AsSlice capability and SliceView
    cli: Command-line interface (dynprod command)

Core modules:
    config: Configuration management
    constants: Defaults
    rows: Reading rows from arguments and files
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dyn-product")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .counter import countup
from .product import DynProduct, dyn_product
from .sequence import AsSlice, SliceView, as_slice

__all__ = [
    "AsSlice",
    "DynProduct",
    "SliceView",
    "as_slice",
    "countup",
    "dyn_product",
    "__version__",
]

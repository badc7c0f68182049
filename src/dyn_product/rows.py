"""Reading rows from command-line arguments and rows files."""

import json
import tomllib
from pathlib import Path
from typing import Any, List, Sequence

from .constants import DEFAULT_INPUT_SEPARATOR, ROWS_FILE_SUFFIXES


class RowsFileError(ValueError):
    """A rows file could not be parsed into a list of rows."""


def parse_inline_rows(values: Sequence[str], separator: str = DEFAULT_INPUT_SEPARATOR) -> List[List[str]]:
    """Split each argument into the items of one row.

    An empty argument gives an empty row.

    >>> parse_inline_rows(["a,b", "x, y"])
    [['a', 'b'], ['x', 'y']]
    """
    if not separator:
        raise ValueError("Separator must not be empty")
    rows = []
    for value in values:
        if value.strip() == "":
            rows.append([])
        else:
            rows.append([item.strip() for item in value.split(separator)])
    return rows


def _validate_rows(rows: Any, filename: str) -> List[list]:
    if not isinstance(rows, list):
        raise RowsFileError(f"Error reading {filename}: rows must be an array, got {type(rows).__name__}")
    for i, row in enumerate(rows):
        if not isinstance(row, list):
            raise RowsFileError(
                f"Error reading {filename}: row {i} must be an array, got {type(row).__name__}"
            )
    return rows


def load_rows_file(filename) -> List[list]:
    """Return the rows stored in a TOML or JSON file.

    TOML files need a top-level ``rows`` array of arrays. JSON files may hold
    the array itself or an object with a ``rows`` key.

    Raises:
        FileNotFoundError: If file doesn't exist
        RowsFileError: If the file can't be parsed or has the wrong shape
    """
    path = Path(filename)
    suffix = path.suffix.lower()
    if suffix not in ROWS_FILE_SUFFIXES:
        raise RowsFileError(
            f"Unsupported rows file type '{suffix or path.name}'. "
            f"Supported: {', '.join(ROWS_FILE_SUFFIXES)}"
        )

    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Rows file not found: {filename}")
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RowsFileError(f"Error reading {filename}: {e}")

    if isinstance(data, dict):
        if "rows" not in data:
            raise RowsFileError(f"Error reading {filename}: missing 'rows' key")
        data = data["rows"]

    return _validate_rows(data, str(filename))

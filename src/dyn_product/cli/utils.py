"""Utility functions for CLI operations."""

import argparse
import json
import logging
import sys
from enum import IntEnum
from typing import Any, List, Union

from pydantic import BaseModel
from rich.console import Console

from ..config import Config
from ..rows import load_rows_file, parse_inline_rows
from .schemas import ErrorResponse


class ExitCode(IntEnum):
    """Process exit codes for dynprod commands."""

    SUCCESS = 0
    ERROR = 1
    INVALID_INPUT = 10
    INTERRUPTED = 130


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(numeric_level)


def json_output(response: Union[BaseModel, dict], exit_code: ExitCode) -> None:
    """Print a JSON response on stdout and exit.

    Args:
        response: Pydantic model or plain dict to serialize
        exit_code: Process exit code
    """
    if isinstance(response, BaseModel):
        print(response.model_dump_json(exclude_none=True))
    else:
        print(json.dumps(response))
    sys.exit(exit_code)


def quiet_for_json(args: argparse.Namespace) -> bool:
    """Return True in --json mode, after silencing INFO/DEBUG logs."""
    use_json = getattr(args, "json", False)
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)
    return use_json


def resolve_rows(args: argparse.Namespace, config: Config) -> List[List[Any]]:
    """Build the rows for a command from inline arguments or --file.

    Raises:
        ValueError: If both or conflicting sources are given, or rows are malformed
        FileNotFoundError: If the rows file doesn't exist
    """
    inline = getattr(args, "rows", None) or []
    rows_file = getattr(args, "file", None)

    if inline and rows_file:
        raise ValueError("Give rows either as arguments or with --file, not both")

    if rows_file:
        logging.info("Loading rows from: %s", rows_file)
        return load_rows_file(rows_file)

    separator = getattr(args, "separator", None) or config.get_input_separator()
    return parse_inline_rows(inline, separator)


def exit_invalid_input(message: str, use_json: bool) -> None:
    """Report invalid input and exit with ExitCode.INVALID_INPUT."""
    if use_json:
        json_output(ErrorResponse(error="invalid_input", message=message), ExitCode.INVALID_INPUT)
    logging.error(message)
    Console(stderr=True).print(f"Error: {message}", style="red", markup=False)
    sys.exit(ExitCode.INVALID_INPUT)

"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep Config() away from the real ~/.dynprod directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def group_rows():
    """Three rows of different lengths (3, 2, 4)."""
    return [
        ["GroupA-1", "GroupA-2", "GroupA-3"],
        ["GroupB-1", "GroupB-2"],
        ["GroupC-1", "GroupC-2", "GroupC-3", "GroupC-4"],
    ]


@pytest.fixture
def toml_rows_file(tmp_path):
    """TOML rows file with two rows."""
    path = tmp_path / "rows.toml"
    path.write_text('rows = [["a", "b"], ["x", "y"]]\n', encoding="utf-8")
    return path


@pytest.fixture
def json_rows_file(tmp_path):
    """JSON rows file holding a bare array of rows."""
    path = tmp_path / "rows.json"
    path.write_text(json.dumps([[1, 2, 3], [True, False]]), encoding="utf-8")
    return path

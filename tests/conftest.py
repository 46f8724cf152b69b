"""Shared pytest fixtures for perfectfour tests.

Provides a Typer CLI runner, an in-memory Rich console, and a helper for
writing JSON config files.
"""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from perfectfour.formatter import make_console


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def string_console(buffer: StringIO) -> Console:
    """Console writing to an in-memory buffer with the CLI's wrap settings."""
    return make_console(file=buffer)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a dict as JSON into tmp_path and return the file path."""

    def _write(data: object, name: str = "perfectfour.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write

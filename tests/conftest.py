"""Shared pytest fixtures for soliddemo tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from soliddemo.config.settings import DemoSettings
from soliddemo.services.demo import DemoService

_CLASSIC_OUTPUT = [
    "Title: Clean Code, Author: Robert C. Martin",
    "Regular Price: $100.00, Discounted Price: $90.00",
    "Square Area: 25.00",
    "Circle Area: 28.26",
    "Printing...",
    "Scanning...",
    "Saving data to the database: Data to save with Database storage",
    "Saving data to the filesystem: Data to save with Filesystem storage",
]


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """Undo handlers installed by configure_logging during CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    demo_level = logging.getLogger("soliddemo").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("soliddemo").setLevel(demo_level)


@pytest.fixture
def classic_output() -> list[str]:
    """The eight lines the demo prints with default settings."""
    return list(_CLASSIC_OUTPUT)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def lines() -> list[str]:
    """A list that doubles as a line sink via its ``append`` method."""
    return []


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run from an empty temp directory with no config env vars set.

    Keeps a soliddemo.toml further up the real tree from leaking in.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SOLIDDEMO_CONFIG", str(tmp_path / "absent.toml"))
    yield


@pytest.fixture
def settings(_isolated_cwd: None, tmp_path: Path) -> DemoSettings:
    """Default settings, no TOML file."""
    return DemoSettings.from_cli(start=tmp_path)


@pytest.fixture
def demo(settings: DemoSettings) -> DemoService:
    return DemoService(settings)

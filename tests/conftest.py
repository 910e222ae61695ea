from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from click.testing import CliRunner

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.config",
    "tests.fixtures.runners",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for the test environment.

    Runs for every test so log output goes to stderr at WARNING level and
    never mixes with stdout, where workflow commands are printed.
    """
    from querydeps.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also restores the current working directory afterwards so tests that
    use os.chdir() do not affect each other.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove QUERYDEPS_*, INPUT_* and GitHub file variables for clean testing."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith(("QUERYDEPS_", "INPUT_")) or key in (
            "GITHUB_OUTPUT",
            "GITHUB_STEP_SUMMARY",
        ):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_config_yaml() -> str:
    """Return sample query-deps.yaml content for testing."""
    return """
vlt_binary: "/opt/vlt/bin/vlt"
timeout_seconds: 60
max_retries: 2
retry_delay: 0.5
summary_title: "Dependency gates"
include_outputs: false
verbosity: "debug"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

"""GitHub Actions runtime binding.

Inputs arrive as ``INPUT_<NAME>`` environment variables (read by the CLI
options); outputs and the step summary are appended to the files named by
``GITHUB_OUTPUT`` and ``GITHUB_STEP_SUMMARY``; annotations are workflow
commands printed to stdout.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import IO

import click
from pydantic import BaseModel, ConfigDict

from querydeps.logging import get_logger
from querydeps.models import QueryResult

__all__ = [
    "ActionInputs",
    "ActionsContext",
    "escape_data",
    "escape_property",
]

logger = get_logger(__name__)

OUTPUT_FILE_ENV_VAR = "GITHUB_OUTPUT"
SUMMARY_FILE_ENV_VAR = "GITHUB_STEP_SUMMARY"


class ActionInputs(BaseModel):
    """Named inputs of the action.

    Attributes:
        query: A single selector, used with the separate parameters below.
        queries: Multi-line block of query lines with inline flags.
        expect_results: Expected result count expression for ``query``.
        view: Output format for ``query``.
        scope: Scope selector for ``query``.
        target: Selector that replaces ``query``.
        working_directory: Directory to run vlt in.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    query: str = ""
    queries: str = ""
    expect_results: str = ""
    view: str = ""
    scope: str = ""
    target: str = ""
    working_directory: str = ""

    @property
    def working_path(self) -> Path | None:
        return Path(self.working_directory) if self.working_directory else None


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsContext:
    """Write outputs, summaries and annotations for the current step.

    Args:
        environ: Environment to read file locations from; defaults to
            ``os.environ``.
        stream: Where workflow commands are printed; defaults to stdout.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self._stream = stream
        self.failed = False

    def _issue(self, command: str, message: str, **properties: str) -> None:
        props = ",".join(f"{k}={escape_property(v)}" for k, v in properties.items())
        head = f"{command} {props}" if props else command
        click.echo(f"::{head}::{escape_data(message)}", file=self._stream)

    def _file(self, env_var: str) -> Path | None:
        value = self._environ.get(env_var)
        return Path(value) if value else None

    def set_output(self, name: str, value: str) -> None:
        """Set a step output.

        Args:
            name: Output name.
            value: Output value; may span lines.
        """
        output_file = self._file(OUTPUT_FILE_ENV_VAR)
        if output_file is None:
            self._issue("set-output", value, name=name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with output_file.open("a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def append_summary(self, markdown: str) -> None:
        """Append markdown to the step summary, if the runner provides one."""
        summary_file = self._file(SUMMARY_FILE_ENV_VAR)
        if summary_file is None:
            logger.warning("step_summary_unavailable", env_var=SUMMARY_FILE_ENV_VAR)
            return

        with summary_file.open("a", encoding="utf-8") as f:
            f.write(markdown)
            if not markdown.endswith("\n"):
                f.write("\n")

    def debug(self, message: str) -> None:
        self._issue("debug", message)

    def warning(self, message: str) -> None:
        self._issue("warning", message)

    def error(self, message: str) -> None:
        self._issue("error", message)

    def set_failed(self, message: str) -> None:
        """Annotate an error and mark the step as failed."""
        self.error(message)
        self.failed = True

    def set_result_outputs(self, results: Sequence[QueryResult]) -> None:
        """Publish ``results``, ``passed`` and ``result-<index>`` outputs."""
        all_passed = all(r.passed for r in results)
        self.set_output(
            "results", "[" + ",".join(r.to_json() for r in results) + "]"
        )
        self.set_output("passed", "true" if all_passed else "false")
        for index, result in enumerate(results):
            self.set_output(f"result-{index}", result.to_json())

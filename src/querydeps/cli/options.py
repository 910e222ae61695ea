"""Click options shared by commands that take action inputs.

Each option falls back to the matching ``INPUT_*`` variable that GitHub
Actions sets for the step's ``with:`` block.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from querydeps.actions import ActionInputs

__all__ = ["action_input_options", "inputs_from_options"]

# (option name, environment variable, help)
_INPUT_OPTIONS: tuple[tuple[str, str, str], ...] = (
    ("--query", "INPUT_QUERY", "Single query selector."),
    ("--queries", "INPUT_QUERIES", "Multiple queries, one per line."),
    (
        "--expect-results",
        "INPUT_EXPECT-RESULTS",
        'Expected result count for --query, e.g. "0", ">5", "<=10".',
    ),
    ("--view", "INPUT_VIEW", "Output format for --query."),
    ("--scope", "INPUT_SCOPE", "Scope selector for --query."),
    ("--target", "INPUT_TARGET", "Selector that replaces --query."),
    (
        "--working-directory",
        "INPUT_WORKING-DIRECTORY",
        "Directory to run vlt in.",
    ),
)


def action_input_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with one option per action input."""
    for name, envvar, help_text in reversed(_INPUT_OPTIONS):
        f = click.option(
            name,
            envvar=envvar,
            default="",
            show_envvar=True,
            help=help_text,
        )(f)
    return f


def inputs_from_options(**options: str) -> ActionInputs:
    return ActionInputs(**{k: v or "" for k, v in options.items()})

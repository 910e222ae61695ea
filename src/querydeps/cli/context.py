"""CLI context, exit codes and the sync-to-async bridge for Click commands."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, TypeVar

from querydeps.config import QueryDepsConfig

__all__ = [
    "ExitCode",
    "CLIContext",
    "async_command",
]


class ExitCode(IntEnum):
    """Exit codes for the query-deps CLI."""

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration shared with subcommands.

    Attributes:
        config: Loaded configuration, after --config and the environment.
    """

    config: QueryDepsConfig


F = TypeVar("F", bound=Callable[..., Any])


def async_command(f: F) -> F:
    """Run an async Click command with asyncio.run()."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return wrapper  # type: ignore[return-value]

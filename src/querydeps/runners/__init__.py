"""Subprocess runners for invoking vlt."""

from __future__ import annotations

from querydeps.runners.command import CommandRunner
from querydeps.runners.models import CommandResult
from querydeps.runners.vlt import VltRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "VltRunner",
]

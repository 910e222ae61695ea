from __future__ import annotations

from pathlib import Path

from querydeps.exceptions.base import QueryDepsError


class RunnerError(QueryDepsError):
    """Base exception for runner failures.

    Attributes:
        message: Human-readable error message.
    """

    pass


class WorkingDirectoryError(RunnerError):
    """Working directory does not exist or is not accessible.

    Attributes:
        message: Human-readable error message.
        path: The path that was not found.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the WorkingDirectoryError.

        Args:
            message: Human-readable error message.
            path: The path that was not found.
        """
        self.path = path
        super().__init__(message)


class VltNotFoundError(RunnerError):
    """The vlt executable is missing or does not run.

    Attributes:
        message: Human-readable error message.
        binary: The executable that was probed.
        detail: stderr from the failed ``--version`` probe, if any.
    """

    def __init__(
        self,
        binary: str = "vlt",
        detail: str | None = None,
    ) -> None:
        """Initialize the VltNotFoundError.

        Args:
            binary: The executable that was probed.
            detail: stderr from the failed probe.
        """
        self.binary = binary
        self.detail = detail
        message = (
            f"{binary} is not installed or not in PATH. "
            "Please use vltpkg/setup-vlt@v1 before this action."
        )
        if detail:
            message = f"{message} Error: {detail}"
        super().__init__(message)

"""Runner for the vlt package manager's query command."""

from __future__ import annotations

from pathlib import Path

from querydeps.constants import DEFAULT_VLT_BINARY
from querydeps.exceptions import VltNotFoundError
from querydeps.logging import get_logger
from querydeps.models import ParsedQuery
from querydeps.runners.command import CommandRunner
from querydeps.runners.models import CommandResult

__all__ = ["VltRunner"]

logger = get_logger(__name__)


class VltRunner:
    """Execute ``vlt query`` commands.

    Args:
        binary: The vlt executable name or path.
        command_runner: Runner used for subprocess execution.
        max_retries: Retries for transient failures (network, rate limits).
        retry_delay: Initial delay between retries in seconds.
    """

    def __init__(
        self,
        binary: str = DEFAULT_VLT_BINARY,
        command_runner: CommandRunner | None = None,
        max_retries: int = 0,
        retry_delay: float = 1.0,
    ) -> None:
        self._binary = binary
        self._command_runner = command_runner or CommandRunner()
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self.version: str | None = None

    @property
    def binary(self) -> str:
        return self._binary

    async def check_installed(self) -> str:
        """Verify vlt runs, returning its version string.

        Raises:
            VltNotFoundError: If ``vlt --version`` fails for any reason.
        """
        result = await self._command_runner.run([self._binary, "--version"])
        if not result.success:
            raise VltNotFoundError(self._binary, result.stderr.strip() or None)

        self.version = result.stdout.strip()
        logger.debug("vlt_found", binary=self._binary, version=self.version)
        return self.version

    async def query(
        self,
        query: ParsedQuery,
        working_directory: Path | None = None,
    ) -> CommandResult:
        """Run ``vlt query <selector> <flags...>``.

        Args:
            query: The query to run.
            working_directory: Directory to run in; defaults to the runner's.

        Returns:
            The command result with stdout and stderr trimmed.

        Raises:
            WorkingDirectoryError: If the working directory does not exist.
        """
        command = [self._binary, "query", *query.args]
        logger.debug("vlt_query", command=" ".join(command))
        result = await self._command_runner.run(
            command,
            cwd=working_directory,
            max_retries=self._max_retries,
            retry_delay=self._retry_delay,
        )
        return result.stripped()

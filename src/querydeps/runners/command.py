"""Async subprocess execution for vlt invocations.

Each invocation gets a working directory check, a timeout that terminates
the process (and kills it if it lingers), and optional retries when the
failure looks transient.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from typing import TYPE_CHECKING

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from querydeps.exceptions import WorkingDirectoryError
from querydeps.logging import get_logger
from querydeps.runners.models import CommandResult

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["CommandRunner"]

logger = get_logger(__name__)

TERMINATION_GRACE_PERIOD: float = 2.0
MAX_RETRY_WAIT: float = 10.0

# Shell conventions for commands that could not be started
EXIT_NOT_FOUND = 127
EXIT_PERMISSION_DENIED = 126

_TRANSIENT_MARKERS = ("connection reset", "rate limit")


def _last_outcome(retry_state: RetryCallState) -> CommandResult:
    assert retry_state.outcome is not None
    return retry_state.outcome.result()


def _log_retry(retry_state: RetryCallState) -> None:
    result = _last_outcome(retry_state)
    logger.warning(
        "command_retrying",
        command=retry_state.args[0][0],
        attempt=retry_state.attempt_number,
        returncode=result.returncode,
        timed_out=result.timed_out,
    )


class CommandRunner:
    """Run a command as a subprocess and capture what it printed.

    Attributes:
        cwd: Default working directory.
        timeout: Default timeout in seconds (None waits forever).

    Example:
        ```python
        runner = CommandRunner(cwd=Path("/project"), timeout=30.0)
        result = await runner.run(["vlt", "query", ":malware"])
        if result.success:
            print(result.stdout)
        ```
    """

    def __init__(self, cwd: Path | None = None, timeout: float | None = 300.0) -> None:
        self._cwd = cwd
        self._timeout = timeout

    @property
    def cwd(self) -> Path | None:
        return self._cwd

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def is_retryable(self, result: CommandResult) -> bool:
        """Whether a failed run is worth another attempt.

        vlt may hit the npm registry, so timeouts, connection resets and
        rate limits are treated as transient.
        """
        if result.success:
            return False
        if result.timed_out:
            return True
        stderr = result.stderr.lower()
        return any(marker in stderr for marker in _TRANSIENT_MARKERS)

    async def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        timeout: float | None = None,
        max_retries: int = 0,
        retry_delay: float = 1.0,
    ) -> CommandResult:
        """Execute ``command`` and return its result.

        Failures are reported through the returned CommandResult, never
        raised. When retries run out the last failing result is returned.

        Args:
            command: Executable and arguments (no shell expansion).
            cwd: Working directory for this call, overriding the default.
            timeout: Timeout for this call. Zero or negative disables it.
            max_retries: Extra attempts for transient failures.
            retry_delay: First wait between attempts; doubles each time.

        Raises:
            WorkingDirectoryError: If the working directory does not exist.
        """
        workdir = cwd if cwd is not None else self._cwd
        if workdir is not None and not workdir.is_dir():
            raise WorkingDirectoryError(
                f"Working directory does not exist: {workdir}", path=workdir
            )

        limit = timeout if timeout is not None else self._timeout
        if limit is not None and limit <= 0:
            limit = None

        retrying = AsyncRetrying(
            retry=retry_if_result(self.is_retryable),
            stop=stop_after_attempt(max_retries + 1),
            wait=wait_exponential(
                multiplier=retry_delay, min=retry_delay, max=MAX_RETRY_WAIT
            ),
            before_sleep=_log_retry,
            retry_error_callback=_last_outcome,
        )
        return await retrying(self._execute_once, command, workdir, limit)

    async def _execute_once(
        self,
        command: Sequence[str],
        cwd: Path | None,
        timeout: float | None,
    ) -> CommandResult:
        started = time.monotonic()
        logger.debug("command_started", command=list(command), cwd=str(cwd or "."))

        def finish(
            returncode: int, stdout: str, stderr: str, timed_out: bool = False
        ) -> CommandResult:
            return CommandResult(
                returncode=returncode,
                stdout=stdout,
                stderr=stderr,
                duration_ms=int((time.monotonic() - started) * 1000),
                timed_out=timed_out,
            )

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
        except FileNotFoundError:
            return finish(EXIT_NOT_FOUND, "", f"Command not found: {command[0]}")
        except PermissionError:
            return finish(
                EXIT_PERMISSION_DENIED, "", f"Permission denied: {command[0]}"
            )

        try:
            out, err = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except TimeoutError:
            await self._stop(process)
            return finish(-1, "", f"Command timed out after {timeout}s", True)

        return finish(
            process.returncode or 0,
            out.decode("utf-8", errors="replace"),
            err.decode("utf-8", errors="replace"),
        )

    @staticmethod
    async def _stop(process: asyncio.subprocess.Process) -> None:
        """SIGTERM, then SIGKILL once the grace period has passed."""
        process.terminate()
        try:
            await asyncio.wait_for(process.wait(), timeout=TERMINATION_GRACE_PERIOD)
        except TimeoutError:
            process.kill()
            await process.wait()

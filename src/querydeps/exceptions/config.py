from __future__ import annotations

from typing import Any

from querydeps.exceptions.base import QueryDepsError


class ConfigError(QueryDepsError):
    """Exception for configuration and action input errors.

    Raised when configuration cannot be loaded, parsed, or validated, and when
    the action inputs are inconsistent (for example both ``query`` and
    ``queries`` were supplied).

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field name that caused the error (e.g., "timeout_seconds").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError(
            "Invalid configuration value",
            field="max_retries",
            value=-1,
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)

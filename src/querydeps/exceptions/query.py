from __future__ import annotations

from querydeps.exceptions.base import QueryDepsError

ACCEPTED_FORMS_HINT = 'Use formats like "0", ">5", "<=10", etc.'


class QueryError(QueryDepsError):
    """Base exception for query parsing, validation and evaluation failures."""

    pass


class InvalidComparatorError(QueryError):
    """An expect-results expression could not be compiled.

    Attributes:
        message: Human-readable error message.
        expression: The offending expression, as given.
    """

    def __init__(self, expression: str, message: str | None = None) -> None:
        """Initialize the InvalidComparatorError.

        Args:
            expression: The expression that failed to compile.
            message: Optional override for the default message.
        """
        self.expression = expression
        super().__init__(
            message
            or f"Invalid expect-results format: {expression}. {ACCEPTED_FORMS_HINT}"
        )


class QueryValidationError(QueryError):
    """One or more parsed queries failed validation.

    Attributes:
        message: Human-readable error message listing every problem.
        errors: One entry per invalid query, e.g. ``"Query 2: ..."``.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize the QueryValidationError.

        Args:
            errors: Per-query error lines.
        """
        self.errors = list(errors)
        super().__init__("Query validation failed:\n" + "\n".join(self.errors))


class NoQueriesError(QueryError):
    """The query input contained nothing but blank and comment lines."""

    def __init__(self, message: str = "No valid queries found") -> None:
        super().__init__(message)

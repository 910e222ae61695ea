from __future__ import annotations


class QueryDepsError(Exception):
    """Base exception class for all query-deps errors.

    All custom exceptions raised by query-deps inherit from this class so the
    CLI boundary can catch them in one place while system exceptions
    propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            results = await run_action(inputs, runner, actions, config)
        except QueryDepsError as e:
            actions.set_failed(f"Action failed: {e.message}")
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the QueryDepsError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)

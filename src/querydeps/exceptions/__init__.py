"""query-deps exception hierarchy.

All exceptions can be imported from this package:
    from querydeps.exceptions import ConfigError, InvalidComparatorError
"""

from __future__ import annotations

# Base exception
from querydeps.exceptions.base import QueryDepsError

# Configuration exceptions
from querydeps.exceptions.config import ConfigError

# Query-related exceptions
from querydeps.exceptions.query import (
    InvalidComparatorError,
    NoQueriesError,
    QueryError,
    QueryValidationError,
)

# Runner-related exceptions
from querydeps.exceptions.runner import (
    RunnerError,
    VltNotFoundError,
    WorkingDirectoryError,
)

__all__ = [
    # Base
    "QueryDepsError",
    # Config
    "ConfigError",
    # Query
    "InvalidComparatorError",
    "NoQueriesError",
    "QueryError",
    "QueryValidationError",
    # Runner
    "RunnerError",
    "VltNotFoundError",
    "WorkingDirectoryError",
]

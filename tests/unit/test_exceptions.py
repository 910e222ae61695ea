"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from querydeps.exceptions import (
    ConfigError,
    InvalidComparatorError,
    NoQueriesError,
    QueryDepsError,
    QueryError,
    QueryValidationError,
    RunnerError,
    VltNotFoundError,
    WorkingDirectoryError,
)


@pytest.mark.parametrize(
    "error",
    [
        ConfigError("bad"),
        InvalidComparatorError("~1"),
        NoQueriesError(),
        QueryValidationError(["Query 1: oops"]),
        VltNotFoundError(),
        WorkingDirectoryError("gone", path="/nope"),
    ],
)
def test_all_errors_share_base(error: QueryDepsError) -> None:
    assert isinstance(error, QueryDepsError)
    assert str(error) == error.message


class TestConfigError:
    def test_field_and_value(self) -> None:
        error = ConfigError("Invalid configuration", field="max_retries", value=-1)

        assert error.field == "max_retries"
        assert error.value == -1

    def test_defaults(self) -> None:
        error = ConfigError("bad")

        assert error.field is None
        assert error.value is None


class TestQueryErrors:
    def test_validation_error_lists_every_query(self) -> None:
        error = QueryValidationError(
            ["Query 1: Query selector cannot be empty", "Query 3: Invalid view"]
        )

        assert error.errors == [
            "Query 1: Query selector cannot be empty",
            "Query 3: Invalid view",
        ]
        assert error.message == (
            "Query validation failed:\n"
            "Query 1: Query selector cannot be empty\n"
            "Query 3: Invalid view"
        )
        assert isinstance(error, QueryError)

    def test_no_queries_default_message(self) -> None:
        assert NoQueriesError().message == "No valid queries found"

    def test_invalid_comparator_custom_message(self) -> None:
        error = InvalidComparatorError("x", message="custom")

        assert error.message == "custom"
        assert error.expression == "x"


class TestRunnerErrors:
    def test_vlt_not_found_message(self) -> None:
        error = VltNotFoundError()

        assert error.binary == "vlt"
        assert "vlt is not installed or not in PATH" in error.message
        assert "vltpkg/setup-vlt@v1" in error.message

    def test_vlt_not_found_with_detail(self) -> None:
        error = VltNotFoundError("/opt/vlt", detail="Command not found: /opt/vlt")

        assert error.message.startswith("/opt/vlt is not installed")
        assert error.message.endswith("Error: Command not found: /opt/vlt")

    def test_working_directory_path(self) -> None:
        error = WorkingDirectoryError("missing", path=Path("/nope"))

        assert error.path == Path("/nope")
        assert isinstance(error, RunnerError)

"""Execute parsed queries and evaluate their result expectations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from querydeps.comparator import compile_expect_results
from querydeps.constants import DEFAULT_VIEW
from querydeps.counting import count_results
from querydeps.exceptions import InvalidComparatorError
from querydeps.logging import get_logger
from querydeps.models import ParsedQuery, QueryResult
from querydeps.runners.vlt import VltRunner

__all__ = ["execute_query", "execute_queries"]

logger = get_logger(__name__)


def _failure_message(stderr: str, timed_out: bool) -> str:
    if stderr:
        return stderr
    return "Query timed out" if timed_out else "Query execution failed"


async def execute_query(
    query: ParsedQuery,
    runner: VltRunner,
    working_directory: Path | None = None,
) -> QueryResult:
    """Run one query and decide whether it passed.

    A query that exits non-zero fails outright. Otherwise, if it carries an
    expect-results expression, its output is counted according to its view
    and checked against the expression; without one it passes.

    Args:
        query: The query to run.
        runner: Runner that invokes vlt.
        working_directory: Directory to run the query in.

    Returns:
        The query result.
    """
    result = await runner.query(query, working_directory)

    base = {
        "query": query.display,
        "selector": query.selector,
        "flags": list(query.flags),
        "output": result.stdout,
        "stderr": result.stderr,
        "exit_code": result.returncode,
        "success": result.success,
        "duration": result.duration_ms,
    }

    if not result.success:
        return QueryResult(
            **base,
            error=_failure_message(result.stderr, result.timed_out),
            passed=False,
        )

    if not query.expect_results:
        return QueryResult(**base, passed=True)

    actual = count_results(result.stdout, query.view or DEFAULT_VIEW)
    try:
        predicate = compile_expect_results(query.expect_results)
    except InvalidComparatorError as e:
        return QueryResult(
            **base,
            expected_results=query.expect_results,
            actual_result_count=actual,
            error=f"Failed to parse expect-results: {e.message}",
            passed=False,
        )

    passed = predicate(actual)
    return QueryResult(
        **base,
        expected_results=query.expect_results,
        actual_result_count=actual,
        error=None
        if passed
        else f"Expected {query.expect_results} results, but got {actual}",
        passed=passed,
    )


async def execute_queries(
    queries: Sequence[ParsedQuery],
    runner: VltRunner,
    working_directory: Path | None = None,
) -> list[QueryResult]:
    """Run queries one after another, in order.

    Args:
        queries: Queries to run.
        runner: Runner that invokes vlt.
        working_directory: Directory to run the queries in.

    Returns:
        One result per query, in the same order.
    """
    results: list[QueryResult] = []
    for query in queries:
        result = await execute_query(query, runner, working_directory)
        results.append(result)

        if result.passed:
            logger.info("query_passed", query=result.query, duration_ms=result.duration)
        else:
            logger.error("query_failed", query=result.query, error=result.error)

    return results

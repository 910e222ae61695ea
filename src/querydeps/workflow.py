"""The query-deps action: parse, validate, execute and report."""

from __future__ import annotations

from querydeps.actions import ActionInputs, ActionsContext
from querydeps.config import QueryDepsConfig
from querydeps.exceptions import ConfigError, NoQueriesError, QueryValidationError
from querydeps.executor import execute_queries
from querydeps.logging import get_logger
from querydeps.models import ParsedQuery, QueryResult
from querydeps.parser import parse_queries, parse_single_query, validate_query
from querydeps.report import FAIL_MARK, PASS_MARK, generate_summary_table
from querydeps.runners.vlt import VltRunner

__all__ = [
    "check_inputs",
    "parse_inputs",
    "collect_validation_errors",
    "run_action",
]

logger = get_logger(__name__)


def check_inputs(inputs: ActionInputs) -> None:
    """Require exactly one of ``query`` and ``queries``.

    Raises:
        ConfigError: If neither or both are given.
    """
    if not inputs.query and not inputs.queries:
        raise ConfigError('Either "query" or "queries" input must be provided')
    if inputs.query and inputs.queries:
        raise ConfigError(
            'Cannot specify both "query" and "queries" inputs. Use one or the other.'
        )


def parse_inputs(inputs: ActionInputs) -> list[ParsedQuery]:
    """Turn the action inputs into parsed queries.

    Raises:
        ConfigError: If the inputs are inconsistent.
        NoQueriesError: If nothing but blank and comment lines was given.
    """
    check_inputs(inputs)

    if inputs.queries:
        parsed = parse_queries(inputs.queries)
    else:
        parsed = [
            parse_single_query(
                inputs.query,
                inputs.expect_results,
                inputs.view,
                inputs.scope,
                inputs.target,
            )
        ]

    if not parsed:
        raise NoQueriesError()
    return parsed


def collect_validation_errors(queries: list[ParsedQuery]) -> list[str]:
    """Validate every query, numbering errors from 1."""
    all_errors: list[str] = []
    for index, query in enumerate(queries, start=1):
        errors = validate_query(query)
        if errors:
            all_errors.append(f"Query {index}: {', '.join(errors)}")
    return all_errors


async def run_action(
    inputs: ActionInputs,
    runner: VltRunner,
    actions: ActionsContext,
    config: QueryDepsConfig,
) -> list[QueryResult]:
    """Run the action end to end.

    Writes the step summary and outputs, and marks the step failed if any
    query did not pass.

    Args:
        inputs: The action inputs.
        runner: Runner that invokes vlt.
        actions: GitHub Actions binding for outputs and annotations.
        config: Runtime configuration.

    Returns:
        Results of every executed query.

    Raises:
        ConfigError: If the inputs are inconsistent.
        VltNotFoundError: If vlt is not installed.
        NoQueriesError: If there is nothing to run.
        QueryValidationError: If any query is invalid.
        WorkingDirectoryError: If the working directory does not exist.
    """
    check_inputs(inputs)
    await runner.check_installed()

    queries = parse_inputs(inputs)
    errors = collect_validation_errors(queries)
    if errors:
        raise QueryValidationError(errors)

    logger.info("executing_queries", count=len(queries), binary=runner.binary)
    results = await execute_queries(queries, runner, inputs.working_path)

    for result in results:
        if not result.passed:
            actions.error(f"{result.query}: {result.error}")

    actions.append_summary(
        generate_summary_table(
            results,
            title=config.summary_title,
            include_outputs=config.include_outputs,
        )
    )
    actions.set_result_outputs(results)

    failed_count = sum(1 for r in results if not r.passed)
    if failed_count:
        actions.set_failed(
            f"{FAIL_MARK} {failed_count} of {len(results)} queries failed"
        )
    else:
        logger.info("all_queries_passed", summary=f"{PASS_MARK} {len(results)}")

    return results

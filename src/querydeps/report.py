"""Markdown rendering of query results for the GitHub step summary."""

from __future__ import annotations

import re
from collections.abc import Sequence

from querydeps.constants import DEFAULT_SUMMARY_TITLE
from querydeps.models import QueryResult

__all__ = [
    "create_table_row",
    "escape_markdown",
    "generate_summary_table",
]

_MARKDOWN_SPECIAL = re.compile(r"([|\\`*_{}\[\]()#+\-.!])")

PASS_MARK = "✅"
FAIL_MARK = "❌"


def create_table_row(cells: Sequence[str]) -> str:
    """Render one markdown table row."""
    return f"| {' | '.join(cells)} |"


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that markdown would interpret."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def _results_table(results: Sequence[QueryResult]) -> list[str]:
    lines = [
        create_table_row(["Status", "Query", "Expected", "Actual", "Duration"]),
        create_table_row(["---"] * 5),
    ]
    for result in results:
        lines.append(
            create_table_row(
                [
                    PASS_MARK if result.passed else FAIL_MARK,
                    escape_markdown(result.query),
                    escape_markdown(result.expected_results)
                    if result.expected_results
                    else "-",
                    str(result.actual_result_count)
                    if result.actual_result_count is not None
                    else "-",
                    f"{result.duration}ms",
                ]
            )
        )
    return lines


def _failed_section(failed: Sequence[QueryResult]) -> list[str]:
    lines = ["### Failed Queries", ""]
    for result in failed:
        lines.append(f"**{escape_markdown(result.query)}**")
        if result.error:
            lines.append(f"- Error: {escape_markdown(result.error)}")
        if result.stderr:
            lines.append(f"- stderr: `{escape_markdown(result.stderr)}`")
        lines.append("")
    return lines


def _outputs_section(passed: Sequence[QueryResult]) -> list[str]:
    lines = ["### Query Outputs", ""]
    for result in passed:
        lines.extend(
            [
                f"**{escape_markdown(result.query)}**",
                "",
                "```",
                result.output,
                "```",
                "",
            ]
        )
    return lines


def generate_summary_table(
    results: Sequence[QueryResult],
    title: str = DEFAULT_SUMMARY_TITLE,
    include_outputs: bool = True,
) -> str:
    """Render results as a markdown step summary.

    Args:
        results: Executed query results.
        title: Heading for the summary.
        include_outputs: Whether to append the output of passed queries.

    Returns:
        Markdown text: a results table, details for failed queries and,
        optionally, the raw output of passed queries.
    """
    lines = [f"## {title}", ""]
    lines.extend(_results_table(results))
    lines.append("")

    failed = [r for r in results if not r.passed]
    if failed:
        lines.extend(_failed_section(failed))

    with_output = [r for r in results if r.passed and r.output.strip()]
    if include_outputs and with_output:
        lines.extend(_outputs_section(with_output))

    return "\n".join(lines)

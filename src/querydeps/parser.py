"""Parse vlt query inputs into ParsedQuery values.

A query line is a selector followed by flags::

    *:license(copyleft) --scope=":root > *" --expect-results=0

Blank lines and lines starting with ``#`` are skipped, which is how
comments and separators are written in a multi-line ``queries`` input.
"""

from __future__ import annotations

import re

from querydeps.comparator import compile_expect_results
from querydeps.constants import (
    COMMENT_PREFIX,
    EXPECT_RESULTS_FLAG,
    SCOPE_FLAG,
    TARGET_FLAG,
    VIEW_FLAG,
    VIEW_FORMATS,
)
from querydeps.exceptions import InvalidComparatorError
from querydeps.models import ParsedQuery

__all__ = [
    "tokenize",
    "parse_query_line",
    "parse_queries",
    "parse_single_query",
    "validate_query",
]

# A token is a run of non-whitespace where a "..." or '...' span counts as
# part of the token, quotes included. No escapes, no nesting.
_TOKEN_PATTERN = re.compile(r"""(?:[^\s"']+|"[^"]*"|'[^']*')+""")

_FIELD_FLAGS: tuple[tuple[str, str], ...] = (
    (EXPECT_RESULTS_FLAG, "expect_results"),
    (VIEW_FLAG, "view"),
    (SCOPE_FLAG, "scope"),
    (TARGET_FLAG, "target"),
)


def tokenize(text: str) -> list[str]:
    """Split text on whitespace, keeping quoted spans inside their token."""
    return _TOKEN_PATTERN.findall(text)


def parse_query_line(line: str) -> ParsedQuery | None:
    """Parse a single query line into selector and flags.

    Args:
        line: One line of query text.

    Returns:
        The parsed query, or None for blank and comment lines.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_PREFIX):
        return None

    parts = tokenize(trimmed)
    if not parts or not parts[0]:
        return None

    selector, *flags = parts
    fields: dict[str, str] = {}
    for flag in flags:
        for prefix, name in _FIELD_FLAGS:
            if flag.startswith(prefix):
                # Last occurrence wins
                fields[name] = flag[len(prefix) :]
                break

    return ParsedQuery(selector=selector, flags=tuple(flags), **fields)


def parse_queries(queries_input: str) -> list[ParsedQuery]:
    """Parse a multi-line queries input, one query per line.

    Args:
        queries_input: Block of text; any line-break convention.

    Returns:
        Parsed queries in input order, blank and comment lines dropped.
    """
    queries: list[ParsedQuery] = []
    for line in queries_input.splitlines():
        parsed = parse_query_line(line)
        if parsed is not None:
            queries.append(parsed)
    return queries


def parse_single_query(
    query: str,
    expect_results: str | None = None,
    view: str | None = None,
    scope: str | None = None,
    target: str | None = None,
) -> ParsedQuery:
    """Build a query from a selector and separate parameters.

    A non-empty ``target`` replaces the selector and is not repeated as a
    flag. The other parameters are recorded and appended as
    ``--name=value`` flags in the order expect-results, view, scope.

    Args:
        query: The selector.
        expect_results: Expected result count expression.
        view: Output format.
        scope: Scope selector.
        target: Selector overriding ``query``.

    Returns:
        The parsed query. No tokenization is performed.
    """
    flags: list[str] = []
    if expect_results:
        flags.append(f"{EXPECT_RESULTS_FLAG}{expect_results}")
    if view:
        flags.append(f"{VIEW_FLAG}{view}")
    if scope:
        flags.append(f"{SCOPE_FLAG}{scope}")

    return ParsedQuery(
        selector=target or query,
        flags=tuple(flags),
        expect_results=expect_results or None,
        view=view or None,
        scope=scope or None,
    )


def validate_query(query: ParsedQuery) -> list[str]:
    """Check a parsed query, collecting every problem found.

    Args:
        query: The query to check.

    Returns:
        Human-readable error messages; empty if the query is valid.
    """
    errors: list[str] = []

    if not query.selector:
        errors.append("Query selector cannot be empty")

    if query.view and query.view not in VIEW_FORMATS:
        errors.append(
            f"Invalid view format: {query.view}. "
            f"Must be one of: {', '.join(VIEW_FORMATS)}"
        )

    if query.expect_results:
        try:
            compile_expect_results(query.expect_results)
        except InvalidComparatorError:
            errors.append(f"Invalid expect-results format: {query.expect_results}")

    return errors

"""Unit tests for the query parser."""

from __future__ import annotations

import pytest

from querydeps.models import ParsedQuery
from querydeps.parser import (
    parse_queries,
    parse_query_line,
    parse_single_query,
    tokenize,
    validate_query,
)


class TestParseQueryLine:
    """Tests for parse_query_line."""

    def test_simple_selector(self) -> None:
        assert parse_query_line(":malware") == ParsedQuery(selector=":malware")

    def test_selector_only_has_no_flags_or_fields(self) -> None:
        result = parse_query_line(":malware")

        assert result is not None
        assert result.flags == ()
        assert result.expect_results is None
        assert result.view is None
        assert result.scope is None
        assert result.target is None

    def test_selector_with_flags(self) -> None:
        result = parse_query_line(":malware --expect-results=0 --view=json")

        assert result == ParsedQuery(
            selector=":malware",
            flags=("--expect-results=0", "--view=json"),
            expect_results="0",
            view="json",
        )

    def test_quoted_scope_is_one_token_with_quotes_kept(self) -> None:
        result = parse_query_line(
            '*:license(copyleft) --scope=":root > *" --expect-results=0'
        )

        assert result == ParsedQuery(
            selector="*:license(copyleft)",
            flags=('--scope=":root > *"', "--expect-results=0"),
            scope='":root > *"',
            expect_results="0",
        )

    def test_single_quoted_span(self) -> None:
        result = parse_query_line(":root --scope=':root > *'")

        assert result is not None
        assert result.flags == ("--scope=':root > *'",)
        assert result.scope == "':root > *'"

    def test_extract_target_flag(self) -> None:
        result = parse_query_line(":base --target=:outdated --view=count")

        assert result == ParsedQuery(
            selector=":base",
            flags=("--target=:outdated", "--view=count"),
            target=":outdated",
            view="count",
        )

    @pytest.mark.parametrize("line", ["", "   ", "\t \t"])
    def test_skip_blank_lines(self, line: str) -> None:
        assert parse_query_line(line) is None

    @pytest.mark.parametrize("line", ["# This is a comment", "  # Another comment"])
    def test_skip_comment_lines(self, line: str) -> None:
        assert parse_query_line(line) is None

    def test_value_keeps_everything_after_first_equals(self) -> None:
        result = parse_query_line(':root --scope="a=b"')

        assert result is not None
        assert result.scope == '"a=b"'

    def test_last_duplicate_flag_wins(self) -> None:
        result = parse_query_line(":root --view=json --view=count")

        assert result is not None
        assert result.view == "count"
        assert result.flags == ("--view=json", "--view=count")

    def test_unrecognized_flags_only_kept_in_flags(self) -> None:
        result = parse_query_line(":root --expect-results --verbose --foo=bar")

        assert result == ParsedQuery(
            selector=":root",
            flags=("--expect-results", "--verbose", "--foo=bar"),
        )

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_query_line("   :malware   ") == parse_query_line(":malware")

    def test_parsing_is_idempotent(self) -> None:
        line = '*:license(copyleft) --scope=":root > *" --expect-results=0'

        assert parse_query_line(line) == parse_query_line(line)


class TestTokenize:
    """Tests for the quote-aware tokenizer."""

    def test_splits_on_runs_of_whitespace(self) -> None:
        assert tokenize("a   b\tc") == ["a", "b", "c"]

    def test_quoted_span_inside_token(self) -> None:
        assert tokenize('x --a="1 2" y') == ["x", '--a="1 2"', "y"]

    def test_adjacent_quoted_spans_join(self) -> None:
        assert tokenize("""'a b'"c d"e""") == ["""'a b'"c d"e"""]


class TestParseQueries:
    """Tests for parse_queries."""

    def test_multi_line_queries(self) -> None:
        text = """
            :malware --expect-results=0
            :outdated --view=json
            # This is a comment

            *:license(copyleft) --expect-results=0
        """

        result = parse_queries(text)

        assert [q.selector for q in result] == [
            ":malware",
            ":outdated",
            "*:license(copyleft)",
        ]

    @pytest.mark.parametrize("text", ["", "   \n\n   "])
    def test_empty_input(self, text: str) -> None:
        assert parse_queries(text) == []

    def test_comments_and_blank_lines_dropped_in_order(self) -> None:
        text = "# one\n:malware --expect-results=0\n\n# two\n:outdated --view=json"

        result = parse_queries(text)

        assert len(result) == 2
        assert result[0].selector == ":malware"
        assert result[1].selector == ":outdated"

    def test_windows_line_endings(self) -> None:
        result = parse_queries(":malware\r\n:outdated\r\n")

        assert [q.selector for q in result] == [":malware", ":outdated"]


class TestParseSingleQuery:
    """Tests for parse_single_query."""

    def test_all_parameters(self) -> None:
        result = parse_single_query(":malware", "0", "json", ":root > *")

        assert result == ParsedQuery(
            selector=":malware",
            flags=("--expect-results=0", "--view=json", "--scope=:root > *"),
            expect_results="0",
            view="json",
            scope=":root > *",
        )

    def test_target_replaces_selector(self) -> None:
        result = parse_single_query(":malware", target=":outdated")

        assert result == ParsedQuery(selector=":outdated")

    def test_target_is_not_appended_as_flag(self) -> None:
        result = parse_single_query(":malware", "0", target=":outdated")

        assert result.selector == ":outdated"
        assert result.flags == ("--expect-results=0",)
        assert result.target is None

    def test_minimal_input(self) -> None:
        assert parse_single_query(":malware") == ParsedQuery(selector=":malware")

    def test_empty_parameters_contribute_nothing(self) -> None:
        result = parse_single_query(":malware", "", "", "", "")

        assert result == ParsedQuery(selector=":malware")


class TestValidateQuery:
    """Tests for validate_query."""

    def test_valid_query(self) -> None:
        query = ParsedQuery(
            selector=":malware",
            flags=("--expect-results=0",),
            expect_results="0",
        )

        assert validate_query(query) == []

    def test_empty_selector(self) -> None:
        errors = validate_query(ParsedQuery(selector=""))

        assert "Query selector cannot be empty" in errors

    def test_invalid_view(self) -> None:
        query = ParsedQuery(
            selector=":malware", flags=("--view=invalid",), view="invalid"
        )

        assert validate_query(query) == [
            "Invalid view format: invalid. Must be one of: human, json, mermaid, count"
        ]

    @pytest.mark.parametrize("view", ["human", "json", "mermaid", "count"])
    def test_allowed_views(self, view: str) -> None:
        assert validate_query(ParsedQuery(selector=":root", view=view)) == []

    def test_invalid_expect_results(self) -> None:
        query = ParsedQuery(selector=":malware", expect_results="lots")

        assert validate_query(query) == ["Invalid expect-results format: lots"]

    def test_non_ascii_digits_rejected(self) -> None:
        query = ParsedQuery(selector=":malware", expect_results="\u0665")

        assert validate_query(query) == ["Invalid expect-results format: \u0665"]

    def test_reports_every_problem(self) -> None:
        query = ParsedQuery(selector="", view="table", expect_results="~3")

        errors = validate_query(query)

        assert len(errors) == 3

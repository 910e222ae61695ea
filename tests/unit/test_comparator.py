"""Unit tests for expect-results compilation."""

from __future__ import annotations

import pytest

from querydeps.comparator import compile_expect_results
from querydeps.exceptions import InvalidComparatorError, QueryError


class TestCompileExpectResults:
    """Tests for compile_expect_results."""

    def test_exact_count(self) -> None:
        predicate = compile_expect_results("0")

        assert predicate(0) is True
        assert predicate(1) is False

    def test_greater_or_equal(self) -> None:
        predicate = compile_expect_results(">=1")

        assert predicate(1) is True
        assert predicate(5) is True
        assert predicate(0) is False

    def test_less_or_equal(self) -> None:
        predicate = compile_expect_results("<=10")

        assert predicate(10) is True
        assert predicate(0) is True
        assert predicate(11) is False

    def test_greater_than(self) -> None:
        predicate = compile_expect_results(">5")

        assert predicate(6) is True
        assert predicate(5) is False

    def test_less_than(self) -> None:
        predicate = compile_expect_results("<3")

        assert predicate(2) is True
        assert predicate(3) is False

    def test_two_character_operator_wins_over_prefix(self) -> None:
        """">=5" means at least five, not ">" applied to "=5"."""
        predicate = compile_expect_results(">=5")

        assert predicate(5) is True
        assert predicate(4) is False

        predicate = compile_expect_results("<=5")
        assert predicate(5) is True
        assert predicate(6) is False

    def test_surrounding_whitespace_ignored(self) -> None:
        predicate = compile_expect_results("  >= 2 ")

        assert predicate(2) is True
        assert predicate(1) is False

    def test_compiled_predicate_is_reusable(self) -> None:
        predicate = compile_expect_results("<2")

        assert [predicate(n) for n in range(4)] == [True, True, False, False]

    @pytest.mark.parametrize(
        "expression",
        [
            "bogus",
            "",
            "=5",
            ">",
            ">=x",
            "<5abc",
            "-1",
            "1.5",
            "> -2",
            "\u0665",
            "\uff15",
            ">=\u0663",
        ],
    )
    def test_invalid_expressions(self, expression: str) -> None:
        with pytest.raises(InvalidComparatorError):
            compile_expect_results(expression)

    def test_error_names_input_and_accepted_forms(self) -> None:
        with pytest.raises(InvalidComparatorError) as exc_info:
            compile_expect_results("bogus")

        error = exc_info.value
        assert error.expression == "bogus"
        assert "bogus" in error.message
        assert '"0"' in error.message
        assert '">5"' in error.message
        assert '"<=10"' in error.message
        assert isinstance(error, QueryError)

"""Compile expect-results expressions into count predicates.

Accepted forms, after trimming surrounding whitespace:

    ``N``    count == N
    ``>=N``  count >= N
    ``<=N``  count <= N
    ``>N``   count >  N
    ``<N``   count <  N

``N`` is a non-negative integer. Two-character operators are matched before
their one-character prefixes, so ``>=5`` is "at least five" and never
``>`` applied to ``=5``.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable

from querydeps.exceptions import InvalidComparatorError

__all__ = ["compile_expect_results", "ComparisonPredicate"]

ComparisonPredicate = Callable[[int], bool]

_EXACT_PATTERN = re.compile(r"^[0-9]+$")
_OPERAND_PATTERN = re.compile(r"^\s*([0-9]+)$")

# Order matters: ">=" must be tried before ">" and "<=" before "<".
_OPERATORS: tuple[tuple[str, Callable[[int, int], bool]], ...] = (
    (">=", operator.ge),
    ("<=", operator.le),
    (">", operator.gt),
    ("<", operator.lt),
)


def _bind(op: Callable[[int, int], bool], expected: int) -> ComparisonPredicate:
    def predicate(count: int) -> bool:
        return op(count, expected)

    return predicate


def compile_expect_results(expression: str) -> ComparisonPredicate:
    """Compile an expect-results expression into a predicate.

    Args:
        expression: Comparison text such as ``"0"``, ``">5"`` or ``"<=10"``.

    Returns:
        A pure function from an actual result count to pass/fail.

    Raises:
        InvalidComparatorError: If the expression matches none of the
            accepted forms, or its operand is not a non-negative integer.

    Example:
        >>> at_most_ten = compile_expect_results("<=10")
        >>> at_most_ten(10), at_most_ten(11)
        (True, False)
    """
    text = expression.strip()

    if _EXACT_PATTERN.match(text):
        return _bind(operator.eq, int(text))

    for symbol, op in _OPERATORS:
        if text.startswith(symbol):
            match = _OPERAND_PATTERN.match(text[len(symbol) :])
            if match is None:
                raise InvalidComparatorError(text)
            return _bind(op, int(match.group(1)))

    raise InvalidComparatorError(text)

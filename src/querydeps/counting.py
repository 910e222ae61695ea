"""Count results in vlt query output according to its view format."""

from __future__ import annotations

import json
import re
from typing import NoReturn

__all__ = ["count_results"]

_COUNT_PATTERN = re.compile(r"^[0-9]+$")


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"not a JSON value: {name}")


def _non_blank_lines(text: str) -> int:
    return sum(1 for line in text.splitlines() if line.strip())


def count_results(output: str, view: str) -> int:
    """Count the results reported by ``vlt query``.

    Args:
        output: stdout of the query.
        view: The ``--view`` the query ran with.

    Returns:
        For ``count``, the bare integer printed (0 if the output is anything
        else). For ``json``, the array length or the number of object keys,
        falling back to the number of lines when the output is not JSON.
        For ``human``, ``mermaid`` and anything else, non-blank lines.
    """
    text = output.strip()

    if view == "count":
        return int(text) if _COUNT_PATTERN.match(text) else 0

    if view == "json":
        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except ValueError:
            return len(text.split("\n")) if text else 0
        if isinstance(parsed, (list, dict)):
            return len(parsed)
        return 0

    return _non_blank_lines(text)

"""Query models.

``ParsedQuery`` is the immutable output of the tokenizer; ``QueryResult`` is
the serializable record produced by executing one query.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = ["ParsedQuery", "QueryResult"]


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """A query selector plus the flags passed along with it.

    Attributes:
        selector: The first token of the query line. Never empty when
            produced by the tokenizer.
        flags: Remaining tokens in their original order.
        expect_results: Raw value of ``--expect-results=``, unparsed.
        view: Raw value of ``--view=``.
        scope: Raw value of ``--scope=``.
        target: Raw value of ``--target=``.
    """

    selector: str
    flags: tuple[str, ...] = ()
    expect_results: str | None = None
    view: str | None = None
    scope: str | None = None
    target: str | None = None

    @property
    def args(self) -> tuple[str, ...]:
        """Arguments for ``vlt query``: the selector followed by the flags."""
        return (self.selector, *self.flags)

    @property
    def display(self) -> str:
        """The query as shown in logs and reports."""
        return " ".join(self.args).strip()


class QueryResult(BaseModel):
    """Outcome of running a single query.

    Serializes with camelCase keys (``exitCode``, ``actualResultCount``)
    so the ``results`` action output keeps the shape downstream workflows
    read with ``fromJSON``.

    Attributes:
        query: Selector and flags joined for display.
        selector: The selector that was executed.
        flags: Flags passed to ``vlt query``.
        output: Trimmed stdout of the query.
        stderr: Trimmed stderr of the query.
        exit_code: Process exit code.
        success: True if the process exited 0 without timing out.
        error: Why the query did not pass, if it did not.
        expected_results: The expect-results expression, if any.
        actual_result_count: Counted results, when an expectation was checked.
        passed: Whether the query passed its gate.
        duration: Wall-clock execution time in milliseconds.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    query: str
    selector: str
    flags: list[str] = Field(default_factory=list)
    output: str = ""
    stderr: str = ""
    exit_code: int = 0
    success: bool = True
    error: str | None = None
    expected_results: str | None = None
    actual_result_count: int | None = None
    passed: bool = False
    duration: int = Field(default=0, ge=0)

    def to_json(self) -> str:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)

"""Shared constants for query-deps."""

from __future__ import annotations

from typing import Final

__all__ = [
    "VIEW_FORMATS",
    "DEFAULT_VIEW",
    "EXPECT_RESULTS_FLAG",
    "VIEW_FLAG",
    "SCOPE_FLAG",
    "TARGET_FLAG",
    "COMMENT_PREFIX",
    "DEFAULT_VLT_BINARY",
    "DEFAULT_SUMMARY_TITLE",
]

# Output formats understood by `vlt query --view=...`
VIEW_FORMATS: Final[tuple[str, ...]] = ("human", "json", "mermaid", "count")
DEFAULT_VIEW: Final[str] = "human"

# Recognized `--name=value` flags
EXPECT_RESULTS_FLAG: Final[str] = "--expect-results="
VIEW_FLAG: Final[str] = "--view="
SCOPE_FLAG: Final[str] = "--scope="
TARGET_FLAG: Final[str] = "--target="

COMMENT_PREFIX: Final[str] = "#"

DEFAULT_VLT_BINARY: Final[str] = "vlt"
DEFAULT_SUMMARY_TITLE: Final[str] = "Query Deps Results"

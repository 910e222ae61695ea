"""Data models for parsed queries and query results."""

from __future__ import annotations

from querydeps.models.query import ParsedQuery, QueryResult

__all__ = [
    "ParsedQuery",
    "QueryResult",
]

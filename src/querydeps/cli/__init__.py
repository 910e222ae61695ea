"""Command-line interface for query-deps."""

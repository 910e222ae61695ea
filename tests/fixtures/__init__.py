"""Shared test fixtures for the query-deps test suite."""

"""query-deps: gate CI runs on vlt dependency query results."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def tmp_cwd(tmp_path: Path) -> Path:
    """Create a temporary working directory for tests."""
    return tmp_path

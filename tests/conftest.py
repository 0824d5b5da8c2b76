from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that build sample directory trees and input documents.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small project on disk.

    Structure:
    /project
      package.json
      /src
        index.js
        utils.js
      /test
        utils.test.js
    """
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "test").mkdir()

    (root / "package.json").write_text('{\n  "name": "dummy-project",\n  "version": "1.0.0"\n}', encoding="utf-8")
    (root / "src" / "index.js").write_text('console.log("Hello, World!");', encoding="utf-8")
    (root / "src" / "utils.js").write_text("const add = (a, b) => a + b;", encoding="utf-8")
    (root / "test" / "utils.test.js").write_text("// Test cases for utils.js", encoding="utf-8")
    return root


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a helper that dumps a value as JSON into a temporary file."""
    def _write(data: Any, name: str = "input.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write

from __future__ import annotations

"""
Execution Result Data Models.

Defines the immutable result objects and factory functions used to pass
execution outcomes from the reader and writer services to the CLI layer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from treejson.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReadResult:
    """
    Outcome of a directory scan.

    Attributes:
        ok: False only when the root itself could not be listed.
        error: Descriptive message in case of failure.
        root_path: Absolute directory that was scanned.
        tree: Captured tree (an ErrorNode when ok is False).
        file_count: Number of files captured with content.
        error_count: Number of error markers in the tree.
    """
    ok: bool
    error: str
    root_path: str
    tree: TreeNode
    file_count: int = 0
    error_count: int = 0


@dataclass(frozen=True)
class WriteResult:
    """
    Outcome of a project generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: One of "not_found", "malformed_json", "schema", "io".
        input_path: Absolute path of the JSON document.
        output_dir: Absolute root the project is written into.
        dry_run: Whether disk writes were simulated.
        created_dirs: Directories created (relative to output_dir).
        written_files: Files written (relative to output_dir).
        skipped_entries: Human-readable reasons of skipped entries.
    """
    ok: bool
    error: str
    error_kind: str
    input_path: str
    output_dir: str
    dry_run: bool = False
    created_dirs: List[str] = field(default_factory=list)
    written_files: List[str] = field(default_factory=list)
    skipped_entries: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_write_error_result(
        error: str,
        error_kind: str,
        input_path: str,
        output_dir: str,
        dry_run: bool = False,
        created_dirs: Optional[List[str]] = None,
        written_files: Optional[List[str]] = None,
        skipped_entries: Optional[List[str]] = None,
) -> WriteResult:
    """
    Create a failed generation result.

    Partial progress is kept so callers can report what was left on disk.
    """
    return WriteResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        input_path=input_path,
        output_dir=output_dir,
        dry_run=dry_run,
        created_dirs=list(created_dirs or []),
        written_files=list(written_files or []),
        skipped_entries=list(skipped_entries or []),
    )


def create_write_success_result(
        input_path: str,
        output_dir: str,
        dry_run: bool,
        created_dirs: List[str],
        written_files: List[str],
        skipped_entries: List[str],
) -> WriteResult:
    """Create a successful generation result."""
    return WriteResult(
        ok=True,
        error="",
        error_kind="",
        input_path=input_path,
        output_dir=output_dir,
        dry_run=dry_run,
        created_dirs=list(created_dirs),
        written_files=list(written_files),
        skipped_entries=list(skipped_entries),
    )

from __future__ import annotations

"""
Tool Configuration Domain.

Gathers the default names and formatting options into an immutable
configuration object that is passed explicitly to every entry point,
instead of relying on process-wide globals.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from treejson.domain.constants import (
    DEFAULT_OUTPUT_DIR,
    JSON_INDENT,
    PROJECT_FILES_KEY,
    STRUCTURE_FILE_NAME,
    TEXT_ENCODING,
)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ToolConfig:
    """
    Immutable runtime configuration for the reader and writer tools.

    Attributes:
        default_output_dir: Writer root used when none is given.
        structure_file_name: File name used to persist the reader output.
        structure_file_dir: Directory for the reader output file. None means
            the directory of the running tool.
        project_files_key: Top-level key of the writer input document.
        json_indent: Indentation width of the emitted JSON.
        encoding: Text encoding for every file read and write.
        follow_symlinks: Whether the reader descends into symlinked entries.
    """
    default_output_dir: str = DEFAULT_OUTPUT_DIR
    structure_file_name: str = STRUCTURE_FILE_NAME
    structure_file_dir: Optional[str] = None
    project_files_key: str = PROJECT_FILES_KEY
    json_indent: int = JSON_INDENT
    encoding: str = TEXT_ENCODING
    follow_symlinks: bool = True

    def with_overrides(self, **overrides: Any) -> "ToolConfig":
        """
        Return a copy with the given values applied.

        Unknown keys and None values are ignored, so raw CLI values can be
        passed through without pre-filtering.
        """
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        if not changes:
            return self
        return replace(self, **changes)


def get_default_config() -> ToolConfig:
    """Return the default tool configuration."""
    return ToolConfig()

from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, directory creation and path containment
helpers shared by the reader and writer tools.
"""

import os
import sys
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_tool_dir() -> str:
    """
    Resolve the directory holding the running entry script.

    Falls back to the current working directory when the interpreter was
    started without a script (e.g. embedded or interactive sessions).
    """
    script = sys.argv[0] if sys.argv else ""
    if not script or script == "-c":
        return os.getcwd()
    return os.path.dirname(os.path.abspath(script))


def is_within_root(root: str, target: str) -> bool:
    """
    Check that target lies inside root once both are made absolute.

    Symlinks are not resolved; only the lexical path is compared.
    """
    root_abs = os.path.abspath(root)
    target_abs = os.path.abspath(target)
    try:
        return os.path.commonpath([root_abs, target_abs]) == root_abs
    except ValueError:
        # Different drives on Windows
        return False

# -----------------------------------------------------------------------------
# DIRECTORY OPERATIONS
# -----------------------------------------------------------------------------

def ensure_directory(path: str) -> bool:
    """
    Recursively create a directory if it does not exist yet.

    Args:
        path: Target directory path.

    Returns:
        bool: True if the directory was created, False if it already existed.

    Raises:
        OSError: If the path exists as a file or cannot be created.
    """
    if os.path.isdir(path):
        return False
    os.makedirs(path, exist_ok=True)
    return True

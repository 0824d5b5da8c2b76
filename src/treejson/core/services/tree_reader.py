from __future__ import annotations

"""
Directory Tree Reader.

Walks a directory depth-first and captures every regular file as decoded
text inside a DirectoryNode tree. Failures are isolated per entry: an
unreadable file or subdirectory becomes an ErrorNode while its siblings
are still captured.

Entry policy:
- Directories are descended into; regular files are read.
- Symlinks are followed when ToolConfig.follow_symlinks is set, otherwise
  skipped. Broken or self-referencing symlinks are skipped.
- Sockets, FIFOs and device files are skipped, as are entries whose name
  cannot be encoded in ToolConfig.encoding.
- A symlink leading back to a directory on the current descent path raises
  SymlinkCycleError.
"""

import json
import logging
import os
from typing import FrozenSet, Optional

from treejson.core.components.reader import read_text_file
from treejson.core.components.writer import write_text_file
from treejson.domain.config import ToolConfig, get_default_config
from treejson.domain.constants import DIRECTORY_ERROR_PREFIX
from treejson.domain.result_models import ReadResult
from treejson.domain.tree_models import (
    DirectoryNode,
    ErrorNode,
    FileNode,
    TreeNode,
    count_errors,
    iter_files,
    to_json_obj,
)
from treejson.infra.fs import ensure_directory, normalize_path, resolve_tool_dir

logger = logging.getLogger(__name__)


class SymlinkCycleError(RuntimeError):
    """A symlink points back to a directory that is already being walked."""

    def __init__(self, link_path: str, target: str) -> None:
        super().__init__(f"Symlink cycle detected: '{link_path}' resolves to ancestor '{target}'")
        self.link_path = link_path
        self.target = target

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_directory_tree(root_path: str, config: Optional[ToolConfig] = None) -> TreeNode:
    """
    Capture a directory tree with the content of every file.

    Args:
        root_path: Directory to walk.
        config: Tool configuration (encoding, symlink policy).

    Returns:
        TreeNode: A DirectoryNode, or a directory ErrorNode if the root
        itself cannot be listed.

    Raises:
        SymlinkCycleError: If following symlinks would recurse forever.
    """
    cfg = config or get_default_config()
    return _read_directory(os.path.abspath(root_path), cfg, frozenset())


def scan_directory(root_path: str, config: Optional[ToolConfig] = None) -> ReadResult:
    """
    Run a full scan and summarize it.

    Never raises for filesystem problems: an unlistable root or a symlink
    cycle yields a result with ok=False.

    Args:
        root_path: Directory to walk (user and env shortcuts are expanded).
        config: Tool configuration.

    Returns:
        ReadResult: The captured tree and its counters.
    """
    cfg = config or get_default_config()
    root_abs = normalize_path(root_path, os.getcwd())
    logger.info(f"Scanning directory: {root_abs}")

    try:
        tree = read_directory_tree(root_abs, cfg)
    except SymlinkCycleError as e:
        logger.error(str(e))
        return ReadResult(ok=False, error=str(e), root_path=root_abs, tree=ErrorNode(str(e), "directory"))

    if isinstance(tree, ErrorNode):
        return ReadResult(
            ok=False,
            error=f"{DIRECTORY_ERROR_PREFIX}{tree.message}",
            root_path=root_abs,
            tree=tree,
            error_count=1,
        )

    file_count = sum(1 for _ in iter_files(tree))
    error_count = count_errors(tree)
    logger.info(f"Captured {file_count} files ({error_count} unreadable entries).")

    return ReadResult(
        ok=True,
        error="",
        root_path=root_abs,
        tree=tree,
        file_count=file_count,
        error_count=error_count,
    )


def render_tree_json(node: TreeNode, config: Optional[ToolConfig] = None) -> str:
    """
    Serialize a tree to pretty-printed JSON text.

    Non-ASCII characters are kept verbatim rather than escaped.
    """
    cfg = config or get_default_config()
    return json.dumps(to_json_obj(node), indent=cfg.json_indent, ensure_ascii=False)


def save_tree_json(
        text: str,
        config: Optional[ToolConfig] = None,
        output_file: Optional[str] = None,
) -> str:
    """
    Persist rendered JSON to the structure file.

    The default destination is ToolConfig.structure_file_name inside
    ToolConfig.structure_file_dir, or inside the directory of the running
    tool when no directory is configured.

    Args:
        text: Rendered JSON text.
        config: Tool configuration.
        output_file: Explicit destination overriding the configured one.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    cfg = config or get_default_config()
    if output_file:
        target = normalize_path(output_file, cfg.structure_file_name)
    else:
        base_dir = cfg.structure_file_dir or resolve_tool_dir()
        target = os.path.join(normalize_path(base_dir, os.getcwd()), cfg.structure_file_name)

    ensure_directory(os.path.dirname(target))
    write_text_file(target, text, cfg.encoding)
    logger.info(f"Saved JSON structure to {target}")
    return target

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_directory(dir_path: str, cfg: ToolConfig, ancestors: FrozenSet[str]) -> TreeNode:
    """Recursively capture one directory."""
    real = os.path.realpath(dir_path)
    if real in ancestors:
        raise SymlinkCycleError(dir_path, real)

    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError as e:
        logger.error(f"Could not read directory: {dir_path} ({e})")
        return ErrorNode(message=str(e), kind="directory")

    logger.debug(f"Listing {dir_path}: {len(entries)} entries")

    node = DirectoryNode()
    descent = ancestors | {real}
    for entry in entries:
        child = _read_entry(entry, cfg, descent)
        if child is not None:
            node.add(entry.name, child)
    return node


def _read_entry(entry: os.DirEntry, cfg: ToolConfig, ancestors: FrozenSet[str]) -> Optional[TreeNode]:
    """Capture a single directory entry, or return None to skip it."""
    if not _is_encodable(entry.name, cfg.encoding):
        logger.warning(f"Skipping entry with a name that is not valid {cfg.encoding}: {entry.path!r}")
        return None

    is_link = entry.is_symlink()
    if is_link and not cfg.follow_symlinks:
        logger.debug(f"Skipping symlink: {entry.path}")
        return None

    try:
        if entry.is_dir():
            return _read_directory(entry.path, cfg, ancestors)
        if entry.is_file():
            return _read_file(entry.path, cfg)
    except PermissionError as e:
        logger.error(f"Could not inspect entry: {entry.path} ({e})")
        return ErrorNode(message=str(e), kind="file")
    except OSError as e:
        # ELOOP on self-referencing links and similar stat failures
        logger.warning(f"Skipping unresolvable entry: {entry.path} ({e})")
        return None

    if is_link:
        logger.warning(f"Skipping broken symlink: {entry.path}")
    else:
        logger.warning(f"Skipping non-regular entry: {entry.path}")
    return None


def _read_file(file_path: str, cfg: ToolConfig) -> TreeNode:
    """Read one file, converting failures into an error marker."""
    try:
        content = read_text_file(file_path, cfg.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read file: {file_path} ({e})")
        return ErrorNode(message=str(e), kind="file")
    return FileNode(content=content)


def _is_encodable(name: str, encoding: str) -> bool:
    """Check that an entry name survives JSON output in the target encoding."""
    try:
        name.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True

from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive tagged union used by the directory reader to
represent a captured project, together with its conversion to and from
the nested JSON object schema.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple, Union

from treejson.domain.constants import (
    DIRECTORY_ERROR_KEY,
    DIRECTORY_ERROR_PREFIX,
    FILE_ERROR_PREFIX,
)

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        content: Complete decoded text of the file.
    """
    content: str


@dataclass(frozen=True)
class ErrorNode:
    """
    Marker left in place of an entry that could not be read.

    Attributes:
        message: Description of the underlying failure.
        kind: Either "file" or "directory".
    """
    message: str
    kind: str = "file"


@dataclass
class DirectoryNode:
    """
    Represents a directory and its immediate entries, keyed by name.
    """
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def add(self, name: str, node: "TreeNode") -> None:
        self.children[name] = node


TreeNode = Union[FileNode, DirectoryNode, ErrorNode]

# -----------------------------------------------------------------------------
# JSON CONVERSION
# -----------------------------------------------------------------------------

def to_json_obj(node: TreeNode) -> Any:
    """
    Convert a tree into its nested JSON representation.

    Files become strings and directories become objects. Error markers keep
    the shape of the entry they replace: a string for files and an object
    with a single "error" key for directories.

    Args:
        node: Root of the tree to convert.

    Returns:
        Any: A JSON-serializable value.
    """
    if isinstance(node, FileNode):
        return node.content
    if isinstance(node, ErrorNode):
        if node.kind == "directory":
            return {DIRECTORY_ERROR_KEY: f"{DIRECTORY_ERROR_PREFIX}{node.message}"}
        return f"{FILE_ERROR_PREFIX}{node.message}"
    if isinstance(node, DirectoryNode):
        return {name: to_json_obj(child) for name, child in node.children.items()}
    raise TypeError(f"Unsupported tree node: {type(node).__name__}")


def from_json_obj(value: Any) -> TreeNode:
    """
    Rebuild a tree from its nested JSON representation.

    The conversion is structural: error markers come back as ordinary files
    or directories since the serialized form carries no tag.

    Raises:
        TypeError: If a value is neither a string nor an object.
    """
    if isinstance(value, str):
        return FileNode(content=value)
    if isinstance(value, dict):
        directory = DirectoryNode()
        for name, child in value.items():
            directory.add(str(name), from_json_obj(child))
        return directory
    raise TypeError(f"Invalid tree value: expected str or object, received {type(value).__name__}.")

# -----------------------------------------------------------------------------
# TRAVERSAL HELPERS
# -----------------------------------------------------------------------------

def iter_files(node: TreeNode, prefix: str = "") -> Iterator[Tuple[str, FileNode]]:
    """
    Yield every file of the tree depth-first as (relative POSIX path, node).
    """
    if isinstance(node, FileNode):
        yield prefix, node
        return
    if isinstance(node, DirectoryNode):
        for name, child in node.children.items():
            rel = f"{prefix}/{name}" if prefix else name
            yield from iter_files(child, rel)


def count_errors(node: TreeNode) -> int:
    """Count the error markers present in the tree."""
    if isinstance(node, ErrorNode):
        return 1
    if isinstance(node, DirectoryNode):
        return sum(count_errors(child) for child in node.children.values())
    return 0

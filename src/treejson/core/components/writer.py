from __future__ import annotations

"""
Text Writing Component.

Persists generated file content verbatim, replacing any previous content.
"""

from treejson.domain.constants import TEXT_ENCODING


def write_text_file(file_path: str, content: str, encoding: str = TEXT_ENCODING) -> None:
    """
    Write content to a file, truncating it if it already exists.

    Newline translation is disabled so the bytes on disk match the
    document content exactly on every platform.

    Args:
        file_path: Target file path. Its parent directory must exist.
        content: Text to write.
        encoding: Text encoding used for encoding.

    Raises:
        OSError: If the file cannot be created or written.
    """
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(content)

from __future__ import annotations

"""
Strict Text Reading Component.

Reads whole files as decoded text. Decoding is strict: a file that is not
valid text in the configured encoding raises, so the caller can record an
error marker instead of capturing mangled content.
"""

from treejson.domain.constants import TEXT_ENCODING


def read_text_file(file_path: str, encoding: str = TEXT_ENCODING) -> str:
    """
    Read the complete content of a text file.

    Newlines are returned untranslated so that content survives a round
    trip byte for byte.

    Args:
        file_path: Path to the target file.
        encoding: Text encoding used for decoding.

    Returns:
        str: The decoded content.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the bytes are not valid in the given encoding.
    """
    with open(file_path, "r", encoding=encoding, newline="") as f:
        return f.read()

from __future__ import annotations

"""
Project Document Models.

Defines the flat input schema consumed by the project generator:

    {"project_files": [{"name": "<relative/path>", "content": "<text>"}, ...]}

Document-level problems are reported through the ProjectDocumentError
hierarchy. Individual entries are validated lazily so that one invalid
entry can be skipped without rejecting the whole document.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class ProjectDocumentError(ValueError):
    """Base error for an input document that cannot be used at all."""


class MalformedDocumentError(ProjectDocumentError):
    """The input is not well-formed JSON."""


class SchemaViolationError(ProjectDocumentError):
    """The input is JSON but does not have the expected top-level shape."""

# -----------------------------------------------------------------------------
# SCHEMA MODELS
# -----------------------------------------------------------------------------

class ProjectFile(BaseModel):
    """A single file entry: relative path plus its verbatim text content."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    content: str

    @field_validator("name")
    @classmethod
    def name_must_be_a_path(cls, v: str) -> str:
        """File names cannot carry NUL characters."""
        if "\x00" in v:
            raise ValueError("name contains a NUL character")
        return v

    @field_validator("name", "content")
    @classmethod
    def must_be_unicode_text(cls, v: str) -> str:
        """Lone surrogates (legal as JSON escapes) cannot be written as text."""
        if not _is_unicode_text(v):
            raise ValueError("text contains unpaired surrogates")
        return v


class ProjectDocument(BaseModel):
    """
    Top-level writer input.

    Entries are kept raw; use parse_entry() to validate each one.
    """
    project_files: List[Any] = Field(strict=True)


def build_document(data: Any, key: str) -> ProjectDocument:
    """
    Validate the top-level shape of a decoded JSON document.

    Args:
        data: Decoded JSON value.
        key: Name of the top-level list key.

    Returns:
        ProjectDocument: The validated document.

    Raises:
        SchemaViolationError: If the root is not an object or the key is
            missing or not a list.
    """
    if not isinstance(data, dict):
        raise SchemaViolationError(
            f"JSON root must be an object, received {type(data).__name__}."
        )
    if key not in data:
        raise SchemaViolationError(f'JSON file must have a root key "{key}" which is an array.')
    try:
        return ProjectDocument(project_files=data[key])
    except ValidationError:
        raise SchemaViolationError(
            f'JSON root key "{key}" must be an array, received {type(data[key]).__name__}.'
        ) from None


def parse_entry(raw: Any) -> Optional[ProjectFile]:
    """
    Validate one raw entry.

    Returns:
        Optional[ProjectFile]: The parsed entry, or None if it is invalid.
    """
    if not isinstance(raw, dict):
        return None
    try:
        return ProjectFile.model_validate(raw)
    except ValidationError:
        return None


def describe_invalid_entry(raw: Any) -> str:
    """Produce a short human-readable reason for a rejected entry."""
    if not isinstance(raw, dict):
        return f"entry is {type(raw).__name__}, expected object"
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        return "missing or empty 'name'"
    if "\x00" in name or not _is_unicode_text(name):
        return f"name {name!r} is not a valid file path"
    if "content" not in raw or raw["content"] is None:
        return f"'{name}' has no 'content'"
    if isinstance(raw["content"], str):
        return f"'{name}' has content that is not valid Unicode text"
    return f"'{name}' has non-text 'content' ({type(raw['content']).__name__})"


def _is_unicode_text(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True

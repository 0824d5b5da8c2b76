from __future__ import annotations

"""
Unit tests for the Project Tree Writer service.

Verifies:
1. Materialization of flat entries, including directory inference.
2. Idempotent overwrite semantics and reuse of an existing root.
3. Skipping of invalid and escaping entries without aborting.
4. Document-level rejection (missing file, malformed JSON, schema) with no
   side effects on disk.
5. Abort-without-rollback on filesystem failures, and dry runs.
"""

from pathlib import Path

import pytest

from treejson.core.services.tree_writer import (
    generate_project,
    load_project_document,
    materialize_project,
)
from treejson.domain.config import ToolConfig
from treejson.domain.project_models import MalformedDocumentError, SchemaViolationError, build_document


def _doc(*entries):
    return {"project_files": list(entries)}

# -----------------------------------------------------------------------------
# HAPPY PATH
# -----------------------------------------------------------------------------

def test_generate_project_concrete_scenario(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"name": "a.txt", "content": "hi"},
        {"name": "sub/b.txt", "content": "yo"},
    ))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is True
    assert (out / "a.txt").read_text(encoding="utf-8") == "hi"
    assert (out / "sub" / "b.txt").read_text(encoding="utf-8") == "yo"
    assert result.written_files == ["a.txt", "sub/b.txt"]
    assert result.created_dirs == ["sub"]
    assert result.skipped_entries == []


def test_directory_inference_creates_every_level(tmp_path: Path, write_document) -> None:
    src = write_document(_doc({"name": "a/b/c.txt", "content": "deep"}))
    out = tmp_path / "out"

    generate_project(str(src), str(out))

    assert (out / "a").is_dir()
    assert (out / "a" / "b").is_dir()
    assert (out / "a" / "b" / "c.txt").read_text(encoding="utf-8") == "deep"


def test_generate_project_is_idempotent(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"name": "a.txt", "content": "hi"},
        {"name": "sub/b.txt", "content": "yo"},
    ))
    out = tmp_path / "out"

    first = generate_project(str(src), str(out))
    second = generate_project(str(src), str(out))

    assert first.ok and second.ok
    assert second.created_dirs == []
    assert sorted(p.name for p in out.rglob("*")) == ["a.txt", "b.txt", "sub"]
    assert (out / "a.txt").read_text(encoding="utf-8") == "hi"


def test_existing_root_is_reused_not_cleared(tmp_path: Path, write_document) -> None:
    out = tmp_path / "out"
    out.mkdir()
    (out / "keep.txt").write_text("old", encoding="utf-8")
    (out / "a.txt").write_text("stale content", encoding="utf-8")
    src = write_document(_doc({"name": "a.txt", "content": "fresh"}))

    result = generate_project(str(src), str(out))

    assert result.ok is True
    assert (out / "keep.txt").read_text(encoding="utf-8") == "old"
    assert (out / "a.txt").read_text(encoding="utf-8") == "fresh"


def test_later_duplicate_entry_wins(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"name": "a.txt", "content": "one"},
        {"name": "a.txt", "content": "two"},
    ))
    out = tmp_path / "out"

    generate_project(str(src), str(out))

    assert (out / "a.txt").read_text(encoding="utf-8") == "two"


def test_default_output_dir_comes_from_config(tmp_path: Path, write_document, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    src = write_document(_doc({"name": "x.txt", "content": "1"}))

    result = generate_project(str(src), None, ToolConfig(default_output_dir="custom-out"))

    assert result.output_dir == str(tmp_path / "custom-out")
    assert (tmp_path / "custom-out" / "x.txt").exists()

# -----------------------------------------------------------------------------
# PER-ENTRY SKIPS
# -----------------------------------------------------------------------------

def test_invalid_entries_are_skipped(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"content": "x"},
        {"name": "f"},
        {"name": "ok.txt", "content": "fine"},
        "not-an-object",
    ))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is True
    assert result.written_files == ["ok.txt"]
    assert len(result.skipped_entries) == 3
    assert not (out / "f").exists()
    assert (out / "ok.txt").read_text(encoding="utf-8") == "fine"


def test_empty_content_is_not_skipped(tmp_path: Path, write_document) -> None:
    src = write_document(_doc({"name": "empty.txt", "content": ""}))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.written_files == ["empty.txt"]
    assert (out / "empty.txt").read_text(encoding="utf-8") == ""


@pytest.mark.parametrize("name", ["../escape.txt", "sub/../../escape.txt", ".", "sub/.."])
def test_entries_escaping_root_are_skipped(tmp_path: Path, write_document, name: str) -> None:
    src = write_document(_doc({"name": name, "content": "x"}, {"name": "in.txt", "content": "y"}))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is True
    assert result.written_files == ["in.txt"]
    assert "escapes the output directory" in result.skipped_entries[0]
    assert not (tmp_path / "escape.txt").exists()


def test_unpaired_surrogate_content_is_skipped(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"name": "a.txt", "content": "x\ud800y"},
        {"name": "b.txt", "content": "ok"},
    ))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is True
    assert result.written_files == ["b.txt"]
    assert "not valid Unicode text" in result.skipped_entries[0]
    assert not (out / "a.txt").exists()


def test_name_with_nul_is_skipped(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"name": "a\u0000b.txt", "content": "x"},
        {"name": "b.txt", "content": "ok"},
    ))

    result = generate_project(str(src), str(tmp_path / "out"))

    assert result.ok is True
    assert result.written_files == ["b.txt"]
    assert "not a valid file path" in result.skipped_entries[0]


def test_absolute_entry_is_skipped(tmp_path: Path, write_document) -> None:
    target = tmp_path / "abs.txt"
    src = write_document(_doc({"name": str(target), "content": "x"}))

    result = generate_project(str(src), str(tmp_path / "out"))

    assert result.written_files == []
    assert not target.exists()

# -----------------------------------------------------------------------------
# DOCUMENT-LEVEL FAILURES
# -----------------------------------------------------------------------------

def test_missing_input_file(tmp_path: Path) -> None:
    out = tmp_path / "out"

    result = generate_project(str(tmp_path / "missing.json"), str(out))

    assert result.ok is False
    assert result.error_kind == "not_found"
    assert "Input file not found" in result.error
    assert not out.exists()


def test_malformed_json_is_distinguished(tmp_path: Path) -> None:
    src = tmp_path / "bad.json"
    src.write_text('{"project_files": [', encoding="utf-8")
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is False
    assert result.error_kind == "malformed_json"
    assert not out.exists()


def test_non_utf8_input_is_malformed(tmp_path: Path) -> None:
    src = tmp_path / "latin1.json"
    src.write_bytes(b'{"project_files": ["\xe9"]}')

    result = generate_project(str(src), str(tmp_path / "out"))

    assert result.error_kind == "malformed_json"


@pytest.mark.parametrize("data", [
    {},
    {"project_files": {"name": "a.txt", "content": "x"}},
    {"project_files": "a.txt"},
    [],
])
def test_schema_violation_writes_nothing(tmp_path: Path, write_document, data) -> None:
    src = write_document(data)
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is False
    assert result.error_kind == "schema"
    assert not out.exists()


def test_load_project_document_raises_typed_errors(tmp_path: Path, write_document) -> None:
    with pytest.raises(FileNotFoundError):
        load_project_document(str(tmp_path / "nope.json"))

    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    with pytest.raises(MalformedDocumentError):
        load_project_document(str(bad))

    with pytest.raises(SchemaViolationError):
        load_project_document(str(write_document({"files": []})))

    doc = load_project_document(str(write_document({"files": []})), ToolConfig(project_files_key="files"))
    assert doc.project_files == []

# -----------------------------------------------------------------------------
# FILESYSTEM FAILURES AND DRY RUN
# -----------------------------------------------------------------------------

def test_io_failure_aborts_without_rollback(tmp_path: Path, write_document) -> None:
    """A file occupying a needed directory path stops the run; earlier files stay."""
    src = write_document(_doc(
        {"name": "a.txt", "content": "first"},
        {"name": "a.txt/b.txt", "content": "blocked"},
        {"name": "c.txt", "content": "never"},
    ))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out))

    assert result.ok is False
    assert result.error_kind == "io"
    assert result.written_files == ["a.txt"]
    assert (out / "a.txt").read_text(encoding="utf-8") == "first"
    assert not (out / "c.txt").exists()


def test_dry_run_touches_nothing(tmp_path: Path, write_document) -> None:
    src = write_document(_doc(
        {"name": "a/b.txt", "content": "1"},
        {"name": "a/c.txt", "content": "2"},
        {"name": "d.txt", "content": "3"},
    ))
    out = tmp_path / "out"

    result = generate_project(str(src), str(out), dry_run=True)

    assert result.ok is True
    assert result.dry_run is True
    assert result.created_dirs == ["a"]
    assert result.written_files == ["a/b.txt", "a/c.txt", "d.txt"]
    assert not out.exists()


def test_materialize_project_accepts_prebuilt_document(tmp_path: Path, write_document) -> None:
    doc = load_project_document(str(write_document(_doc({"name": "x/y.txt", "content": "z"}))))

    result = materialize_project(doc, str(tmp_path / "root"))

    assert result.ok is True
    assert (tmp_path / "root" / "x" / "y.txt").read_text(encoding="utf-8") == "z"


def test_content_unencodable_in_configured_encoding_aborts(tmp_path: Path) -> None:
    doc = build_document({"project_files": [{"name": "caf.txt", "content": "café"}]}, "project_files")

    result = materialize_project(doc, str(tmp_path / "root"), ToolConfig(encoding="ascii"))

    assert result.ok is False
    assert result.error_kind == "io"
    assert result.written_files == []

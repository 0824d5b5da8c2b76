from __future__ import annotations

"""
Project Tree Writer.

Materializes a flat list of {name, content} entries into a directory tree:
1. Loads and validates the whole input document before touching the disk.
2. Creates the output root if needed (an existing root is reused as is).
3. Writes each entry in list order, creating parent directories lazily.

Invalid entries are skipped with a warning. A filesystem failure stops the
run; files written before the failure stay on disk.
"""

import json
import logging
import os
from typing import List, Optional, Set

from treejson.core.components.reader import read_text_file
from treejson.core.components.writer import write_text_file
from treejson.domain.config import ToolConfig, get_default_config
from treejson.domain.project_models import (
    MalformedDocumentError,
    ProjectDocument,
    SchemaViolationError,
    build_document,
    describe_invalid_entry,
    parse_entry,
)
from treejson.domain.result_models import (
    WriteResult,
    create_write_error_result,
    create_write_success_result,
)
from treejson.infra.fs import ensure_directory, is_within_root, normalize_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_project(
        json_path: str,
        output_dir: Optional[str] = None,
        config: Optional[ToolConfig] = None,
        *,
        dry_run: bool = False,
) -> WriteResult:
    """
    Load a project document and write it under output_dir.

    Every document-level failure is returned as an error result before any
    directory is created.

    Args:
        json_path: Path to the JSON document.
        output_dir: Destination root. Defaults to ToolConfig.default_output_dir.
        config: Tool configuration.
        dry_run: If True, report planned actions without writing anything.

    Returns:
        WriteResult: Status, error classification and the actions performed.
    """
    cfg = config or get_default_config()
    input_abs = normalize_path(json_path, os.getcwd())
    output_abs = normalize_path(output_dir, cfg.default_output_dir)

    logger.info(f"Reading project structure from: {input_abs}")
    logger.info(f"Generating project in: {output_abs}")

    try:
        document = load_project_document(input_abs, cfg)
    except FileNotFoundError as e:
        return _fail(str(e), "not_found", input_abs, output_abs, dry_run)
    except MalformedDocumentError as e:
        return _fail(str(e), "malformed_json", input_abs, output_abs, dry_run)
    except SchemaViolationError as e:
        return _fail(str(e), "schema", input_abs, output_abs, dry_run)
    except OSError as e:
        return _fail(f"Cannot read input file: {e}", "io", input_abs, output_abs, dry_run)

    return materialize_project(document, output_abs, cfg, dry_run=dry_run, input_path=input_abs)


def load_project_document(json_path: str, config: Optional[ToolConfig] = None) -> ProjectDocument:
    """
    Read, decode and validate a project document.

    Args:
        json_path: Path to the JSON document.
        config: Tool configuration (encoding and top-level key).

    Returns:
        ProjectDocument: The validated document.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedDocumentError: If the content is not well-formed JSON text.
        SchemaViolationError: If the top-level shape is wrong.
        OSError: For any other read failure.
    """
    cfg = config or get_default_config()
    if not os.path.isfile(json_path):
        raise FileNotFoundError(f"Input file not found at: {json_path}")

    try:
        raw = read_text_file(json_path, cfg.encoding)
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"Input file is not valid {cfg.encoding} text: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"Invalid JSON in the input file: {e}") from e

    document = build_document(data, cfg.project_files_key)
    logger.debug(f"Loaded {len(document.project_files)} entries from {json_path}")
    return document


def materialize_project(
        document: ProjectDocument,
        output_dir: str,
        config: Optional[ToolConfig] = None,
        *,
        dry_run: bool = False,
        input_path: str = "",
) -> WriteResult:
    """
    Write the entries of a validated document under output_dir.

    Args:
        document: Validated project document.
        output_dir: Destination root.
        config: Tool configuration.
        dry_run: If True, only record what would be created.
        input_path: Source document path, for reporting.

    Returns:
        WriteResult: Created directories, written files and skipped entries.
    """
    cfg = config or get_default_config()
    root = normalize_path(output_dir, cfg.default_output_dir)

    created_dirs: List[str] = []
    written_files: List[str] = []
    skipped: List[str] = []
    planned_dirs: Set[str] = set()

    if not dry_run:
        try:
            if ensure_directory(root):
                logger.info(f"Created root directory: {root}")
        except OSError as e:
            return _fail(f"Failed to create output directory {root}: {e}", "io", input_path, root, dry_run)

    for index, raw in enumerate(document.project_files):
        entry = parse_entry(raw)
        if entry is None:
            reason = f"#{index}: {describe_invalid_entry(raw)}"
            logger.warning(f"Skipping invalid file entry {reason}")
            skipped.append(reason)
            continue

        target = os.path.normpath(os.path.join(root, entry.name))
        if target == root or not is_within_root(root, target):
            reason = f"#{index}: '{entry.name}' escapes the output directory"
            logger.warning(f"Skipping invalid file entry {reason}")
            skipped.append(reason)
            continue

        parent = os.path.dirname(target)
        rel_parent = os.path.relpath(parent, root)

        try:
            if dry_run:
                if rel_parent != "." and rel_parent not in planned_dirs and not os.path.isdir(parent):
                    planned_dirs.add(rel_parent)
                    created_dirs.append(rel_parent)
                    logger.info(f"[DRY] Would create directory: {rel_parent}")
                logger.info(f"[DRY] Would write file: {entry.name}")
            else:
                if ensure_directory(parent):
                    created_dirs.append(rel_parent)
                    logger.info(f"Created directory: {rel_parent}")
                write_text_file(target, entry.content, cfg.encoding)
                logger.info(f"Created file: {entry.name}")
        except (OSError, ValueError) as e:
            # ValueError covers content the configured encoding cannot represent
            msg = f"Failed to write '{entry.name}': {e}"
            logger.error(msg)
            return create_write_error_result(
                msg, "io", input_path, root, dry_run,
                created_dirs=created_dirs,
                written_files=written_files,
                skipped_entries=skipped,
            )

        written_files.append(entry.name)

    logger.info(
        f"Project generation complete: {len(written_files)} files, "
        f"{len(created_dirs)} directories, {len(skipped)} skipped."
    )
    return create_write_success_result(
        input_path=input_path,
        output_dir=root,
        dry_run=dry_run,
        created_dirs=created_dirs,
        written_files=written_files,
        skipped_entries=skipped,
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _fail(error: str, kind: str, input_path: str, output_dir: str, dry_run: bool) -> WriteResult:
    logger.error(error)
    return create_write_error_result(error, kind, input_path, output_dir, dry_run)

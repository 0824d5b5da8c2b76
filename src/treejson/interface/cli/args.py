from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the argument schema of both command line tools and translates the
parsed namespaces into ToolConfig overrides. Required positionals are
declared optional so the apps can report a missing argument with their
own message and exit code instead of argparse's.
"""

import argparse
from typing import Any, Dict

from treejson.domain.constants import DEFAULT_OUTPUT_DIR, STRUCTURE_FILE_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_reader_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser of the directory reader (tree2json).

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tree2json",
        description="Read a directory recursively and print it as a JSON document.",
    )
    p.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to scan.",
    )
    p.add_argument(
        "--output-file",
        dest="output_file",
        default=None,
        help=f"Where to save the JSON (default: {STRUCTURE_FILE_NAME} next to the tool).",
    )
    p.add_argument(
        "--no-save",
        action="store_true",
        help="Only print the JSON, do not save it to a file.",
    )
    p.add_argument(
        "--no-follow-symlinks",
        action="store_true",
        help="Skip symlinked files and directories instead of following them.",
    )
    _add_diagnostic_args(p)
    return p


def build_writer_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser of the project generator (json2tree).

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="json2tree",
        description="Generate project files and folders from a JSON document.",
        epilog="Example: json2tree project-structure.json my-new-app",
    )
    p.add_argument(
        "json_file",
        nargs="?",
        default=None,
        help="Path to the JSON document with a 'project_files' array.",
    )
    p.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help=f"Directory to generate the project in (default: {DEFAULT_OUTPUT_DIR}).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be created without writing anything.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the execution result as JSON.",
    )
    _add_diagnostic_args(p)
    return p


def _add_diagnostic_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def reader_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate reader arguments into ToolConfig overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None values mean "keep the default".
    """
    overrides: Dict[str, Any] = {}
    if args.no_follow_symlinks:
        overrides["follow_symlinks"] = False
    return overrides


def writer_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate writer arguments into ToolConfig overrides."""
    return {"default_output_dir": args.output_dir}

from __future__ import annotations

"""
Project Generator CLI (json2tree).

Reads a {"project_files": [...]} document and recreates the described
files under an output directory, then prints a human-readable report (or
the raw result as JSON with --json).
"""

import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from treejson.core.services.tree_writer import generate_project
from treejson.domain.config import get_default_config
from treejson.domain.result_models import WriteResult
from treejson.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from treejson.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the project generation workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on completion (skipped entries included), 1 on any fatal error.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    parser = cli_args.build_writer_parser()
    args = parser.parse_args(argv)

    if not args.json_file:
        print("Error: Please provide the path to the JSON structure file.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))
    try:
        cfg = get_default_config().with_overrides(**cli_args.writer_overrides(args))
        try:
            result = generate_project(args.json_file, cfg.default_output_dir, cfg, dry_run=args.dry_run)
        except KeyboardInterrupt:
            logger.warning("Generation interrupted by user.")
            return 130
    finally:
        shutdown_logging()

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: WriteResult) -> None:
    """
    Print the generation report.

    Errors go to stderr; malformed JSON gets its own wording so it is not
    mistaken for a generic I/O problem.
    """
    if not result.ok:
        if result.error_kind == "malformed_json":
            print(f"Error: Invalid JSON in the input file. {result.error}", file=sys.stderr)
        else:
            print(f"ERROR: {result.error}", file=sys.stderr)
        if result.written_files:
            print(
                f"{len(result.written_files)} files were written before the failure "
                f"and remain in {result.output_dir}.",
                file=sys.stderr,
            )
        return

    if result.dry_run:
        print("SIMULATION COMPLETE (no files were written)")
    print(f"Project root: {result.output_dir}")

    for d in result.created_dirs:
        print(f"  [dir]  {d}")
    for f in result.written_files:
        print(f"  [file] {f}")

    if result.skipped_entries:
        print(f"Skipped {len(result.skipped_entries)} invalid entries:")
        for reason in result.skipped_entries:
            print(f"  - {reason}")

    if not result.dry_run:
        print("Project generation complete!")


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

"""
Directory Reader CLI (tree2json).

Scans a directory, prints the captured tree as pretty JSON on stdout and
saves the same JSON to the structure file. Logs go to stderr so stdout
can be piped straight into another tool.
"""

import argparse
import logging
import sys
from typing import List, Optional

from treejson.core.services.tree_reader import render_tree_json, save_tree_json, scan_directory
from treejson.domain.config import get_default_config
from treejson.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from treejson.interface.cli import args as cli_args

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the directory reader workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on a missing argument or an unreadable root.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    parser = cli_args.build_reader_parser()
    args = parser.parse_args(argv)

    if not args.directory:
        print("Error: Please provide a directory path to scan.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))
    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    cfg = get_default_config().with_overrides(**cli_args.reader_overrides(args))

    result = scan_directory(args.directory, cfg)
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1

    text = render_tree_json(result.tree, cfg)
    print(text)

    if not args.no_save:
        try:
            save_tree_json(text, cfg, output_file=args.output_file)
        except OSError as e:
            logger.error(f"Error writing JSON to file: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

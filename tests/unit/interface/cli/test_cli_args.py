from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Positional arguments are optional at the parser level.
2. Mapping of CLI flags to ToolConfig overrides.
"""

from treejson.domain.config import get_default_config
from treejson.interface.cli.args import (
    build_reader_parser,
    build_writer_parser,
    reader_overrides,
    writer_overrides,
)


def test_reader_parser_defaults():
    args = build_reader_parser().parse_args([])

    assert args.directory is None
    assert args.no_save is False
    assert args.output_file is None
    assert args.debug is False
    assert reader_overrides(args) == {}


def test_reader_flags_mapping():
    args = build_reader_parser().parse_args([
        "some/dir", "--no-save", "--no-follow-symlinks", "--output-file", "tree.json", "--debug",
    ])

    assert args.directory == "some/dir"
    assert args.output_file == "tree.json"
    assert reader_overrides(args) == {"follow_symlinks": False}


def test_writer_positionals():
    args = build_writer_parser().parse_args(["in.json", "my-app", "--dry-run", "--json"])

    assert args.json_file == "in.json"
    assert args.output_dir == "my-app"
    assert args.dry_run is True
    assert args.json_output is True


def test_writer_output_dir_falls_back_to_default():
    args = build_writer_parser().parse_args(["in.json"])
    cfg = get_default_config().with_overrides(**writer_overrides(args))

    assert cfg.default_output_dir == "generated-project"


def test_writer_output_dir_override():
    args = build_writer_parser().parse_args(["in.json", "target"])
    cfg = get_default_config().with_overrides(**writer_overrides(args))

    assert cfg.default_output_dir == "target"

from __future__ import annotations

"""
Unit tests for the Tool Configuration domain.
"""

import dataclasses

import pytest

from treejson.domain.config import ToolConfig, get_default_config


def test_defaults_match_tool_contract():
    cfg = get_default_config()

    assert cfg.default_output_dir == "generated-project"
    assert cfg.structure_file_name == "project-structure.json"
    assert cfg.project_files_key == "project_files"
    assert cfg.json_indent == 2
    assert cfg.encoding == "utf-8"
    assert cfg.follow_symlinks is True
    assert cfg.structure_file_dir is None


def test_with_overrides_ignores_none_and_unknown_keys():
    cfg = get_default_config()
    new = cfg.with_overrides(default_output_dir=None, bogus="x", json_indent=4)

    assert new.json_indent == 4
    assert new.default_output_dir == "generated-project"
    assert not hasattr(new, "bogus")


def test_with_overrides_without_changes_returns_same_instance():
    cfg = ToolConfig()
    assert cfg.with_overrides(default_output_dir=None) is cfg


def test_config_is_immutable():
    cfg = ToolConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.json_indent = 8  # type: ignore[misc]

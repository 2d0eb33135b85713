"""Tests for compute policy merging and pyproject loading."""

import logging

import pytest

from graphspec import DEFAULT_POLICY, ComputePolicy, PolicyError, load_policy, resolve_policy
from graphspec.config import find_pyproject


class TestMerged:
    """Test ComputePolicy.merged and resolve_policy."""

    def test_none_returns_defaults(self):
        assert resolve_policy(None) is DEFAULT_POLICY

    def test_partial_override(self):
        policy = resolve_policy({"pos_key": "position"})
        assert policy.pos_key == "position"
        assert policy.root_key == "root"

    def test_policy_instance_passes_through(self):
        custom = ComputePolicy(layer_key="community")
        assert resolve_policy(custom) is custom

    def test_merged_does_not_mutate(self):
        DEFAULT_POLICY.merged({"time_key": "t"})
        assert DEFAULT_POLICY.time_key == "time"

    def test_unknown_key_raises(self):
        with pytest.raises(PolicyError) as exc_info:
            resolve_policy({"pos_key": "p", "colour_key": "c", "bogus": "b"})

        assert exc_info.value.unknown == ["bogus", "colour_key"]
        assert "'bogus'" in str(exc_info.value)
        assert "How to fix" in str(exc_info.value)

    def test_non_string_value_raises(self):
        with pytest.raises(PolicyError, match="must be a string"):
            resolve_policy({"pos_key": 3})


class TestLoadPolicy:
    """Test [tool.graphspec.policy] discovery."""

    def test_section_is_merged(self, tmp_path, caplog):
        (tmp_path / "pyproject.toml").write_text(
            '[tool.graphspec.policy]\npos_key = "position"\nroot_key = "is_root"\n'
        )
        with caplog.at_level(logging.DEBUG, logger="graphspec.config"):
            policy = load_policy(tmp_path)

        assert policy.pos_key == "position"
        assert policy.root_key == "is_root"
        assert policy.layer_key == "layer"
        assert "Loaded compute policy overrides" in caplog.text

    def test_walks_up_to_parent(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.graphspec.policy]\nlayer_key = "group"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_pyproject(nested) == (tmp_path / "pyproject.toml").resolve()
        assert load_policy(nested).layer_key == "group"

    def test_missing_section_gives_defaults(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert load_policy(tmp_path) is DEFAULT_POLICY

    def test_unknown_key_in_file_raises(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.graphspec.policy]\nnope = "x"\n')
        with pytest.raises(PolicyError):
            load_policy(tmp_path)

"""Tests for config loading and env var overrides."""

import os
from pathlib import Path

import pytest

from vsdiff.config.defaults import DEFAULT_TOML
from vsdiff.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.diff.staged is False
        assert cfg.diff.exclude == []
        assert cfg.viewer.command == ["code", "--diff"]
        assert cfg.git.timeout == 30

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".vsdiff.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.viewer.command == ["code", "--diff"]
        assert cfg.viewer.wait is False

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".vsdiff.toml").write_text(
            '[diff]\n'
            'staged = true\n'
            'exclude = ["node_modules", "dist/"]\n'
            '[viewer]\n'
            'command = "meld"\n'
            'unknown_key = 1\n'
            '[git]\n'
            'timeout = 5\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.diff.staged is True
        assert cfg.diff.exclude == ["node_modules", "dist/"]
        assert cfg.viewer.command == ["meld"]
        assert cfg.git.timeout == 5

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[viewer]\ncommand = ["idea", "diff"]\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.viewer.command == ["idea", "diff"]

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".vsdiff.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_non_table_section_raises(self, tmp_path: Path):
        (tmp_path / ".vsdiff.toml").write_text("diff = 1\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_empty_viewer_raises(self, tmp_path: Path):
        (tmp_path / ".vsdiff.toml").write_text("[viewer]\ncommand = []\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_staged_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VSD_STAGED", "1")
        assert load_config(tmp_path).diff.staged is True

    def test_exclude_appends(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".vsdiff.toml").write_text('[diff]\nexclude = ["a"]\n')
        monkeypatch.setenv("VSD_EXCLUDE", os.pathsep.join(["b", "c/d"]))
        assert load_config(tmp_path).diff.exclude == ["a", "b", "c/d"]

    def test_viewer_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VSD_VIEWER", "code --diff --new-window")
        assert load_config(tmp_path).viewer.command == ["code", "--diff", "--new-window"]

    def test_timeout_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VSD_GIT_TIMEOUT", "7")
        assert load_config(tmp_path).git.timeout == 7

    def test_invalid_timeout_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VSD_GIT_TIMEOUT", "soon")
        assert load_config(tmp_path).git.timeout == 30

"""Load and merge configuration from .vsdiff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import shlex
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from vsdiff.config.schema import DiffConfig, GitConfig, ViewerConfig, VsdConfig

CONFIG_NAME = ".vsdiff.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_NAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: VsdConfig) -> None:
    """Apply VSD_* environment variable overrides."""
    if os.environ.get("VSD_STAGED") == "1":
        cfg.diff.staged = True
    if val := os.environ.get("VSD_EXCLUDE"):
        cfg.diff.exclude.extend(p.strip() for p in val.split(os.pathsep) if p.strip())
    if val := os.environ.get("VSD_VIEWER"):
        cfg.viewer.command = shlex.split(val)
    if val := os.environ.get("VSD_GIT_TIMEOUT"):
        try:
            cfg.git.timeout = int(val)
        except ValueError:
            pass


def load_config(repo_root: Path, config_override: Optional[str] = None) -> VsdConfig:
    """Load, validate, and return a VsdConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = VsdConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = VsdConfig(
                diff=_build_section(raw, DiffConfig, "diff"),
                viewer=_build_section(raw, ViewerConfig, "viewer"),
                git=_build_section(raw, GitConfig, "git"),
            )
        except (AttributeError, TypeError) as exc:
            raise ConfigError(f"Invalid section in {config_path}: {exc}") from exc
        if isinstance(cfg.viewer.command, str):
            cfg.viewer.command = shlex.split(cfg.viewer.command)
        if not cfg.viewer.command:
            raise ConfigError(f"{config_path}: viewer.command must not be empty")

    _merge_env_overrides(cfg)
    return cfg

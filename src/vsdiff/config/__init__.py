"""Configuration loading, schema, and defaults."""

from vsdiff.config.loader import ConfigError, load_config
from vsdiff.config.schema import VsdConfig

__all__ = [
    "ConfigError",
    "VsdConfig",
    "load_config",
]

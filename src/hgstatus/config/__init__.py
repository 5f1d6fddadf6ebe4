"""Configuration loading, schema, and defaults."""

from hgstatus.config.loader import ConfigError, load_config
from hgstatus.config.schema import HgStatusConfig, OutputFormat

__all__ = [
    "ConfigError",
    "HgStatusConfig",
    "OutputFormat",
    "load_config",
]

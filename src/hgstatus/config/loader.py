"""Load and merge configuration from .hgstatus.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from hgstatus.config.schema import (
    OUTPUT_FORMATS,
    HgConfig,
    HgStatusConfig,
    OutputConfig,
    StagingConfig,
    StatusConfig,
)

CONFIG_FILENAME = ".hgstatus.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: HgStatusConfig) -> None:
    """Apply HGSTATUS_* environment variable overrides."""
    if val := os.environ.get("HGSTATUS_HG"):
        cfg.hg.executable = val
    if val := os.environ.get("HGSTATUS_TIMEOUT"):
        try:
            cfg.hg.timeout = int(val)
        except ValueError:
            raise ConfigError(f"HGSTATUS_TIMEOUT must be an integer, got {val!r}")
    if val := os.environ.get("HGSTATUS_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("HGSTATUS_SHOW_PARENT"):
        cfg.status.show_parent = val.lower() in ("1", "true", "yes")


def _build_section(data: dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: HgStatusConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    if not isinstance(cfg.hg.timeout, int) or cfg.hg.timeout <= 0:
        raise ConfigError(f"hg.timeout must be a positive integer, got {cfg.hg.timeout!r}")


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> HgStatusConfig:
    """Load, validate, and return an HgStatusConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = HgStatusConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = HgStatusConfig(
            version=raw.get("version", "1.0"),
            hg=_build_section(raw, HgConfig, "hg"),
            status=_build_section(raw, StatusConfig, "status"),
            output=_build_section(raw, OutputConfig, "output"),
            staging=_build_section(raw, StagingConfig, "staging"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg

"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class HgConfig:
    executable: str = "hg"
    timeout: int = 30  # seconds, per hg invocation


@dataclass
class StatusConfig:
    include_ignored: bool = False  # pass -i to hg status
    show_parent: bool = True  # query the parent revision's changes


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_empty_groups: bool = False
    show_summary: bool = True


@dataclass
class StagingConfig:
    state_file: str = ".hg/hgstatus-staging.json"  # relative to the repo root


@dataclass
class HgStatusConfig:
    version: str = "1.0"
    hg: HgConfig = field(default_factory=HgConfig)
    status: StatusConfig = field(default_factory=StatusConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    staging: StagingConfig = field(default_factory=StagingConfig)

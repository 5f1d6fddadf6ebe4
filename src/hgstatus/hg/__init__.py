"""Mercurial interface layer — adapter, status parsing, models."""

from hgstatus.hg.adapter import (
    HgError,
    get_parent_status,
    get_repo_root,
    get_resolve_list,
    get_status,
    is_merge_in_progress,
)
from hgstatus.hg.models import FileStatus
from hgstatus.hg.status_parser import parse_status_lines

__all__ = [
    "FileStatus",
    "HgError",
    "get_parent_status",
    "get_repo_root",
    "get_resolve_list",
    "get_status",
    "is_merge_in_progress",
    "parse_status_lines",
]

"""Raw status entries as reported by hg."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FileStatus:
    """One line of ``hg status`` / ``hg resolve --list`` output."""

    path: str  # repository-relative
    status: str  # raw one-letter code
    rename: Optional[str] = None  # copy/rename source, from `hg status -C`

"""Raw hg status codes → semantic enums."""

from __future__ import annotations

from typing import Optional

from hgstatus.groups.models import MergeStatus, Status


class ClassificationError(Exception):
    """Raised when status entries cannot be classified."""


class UnknownStatusError(ClassificationError):
    """Raised for a raw status code outside the known hg alphabet."""

    def __init__(self, code: str, path: Optional[str] = None) -> None:
        self.code = code
        self.path = path
        where = f" for {path}" if path is not None else ""
        super().__init__(f"Unknown raw status {code!r}{where}")


_STATUS_CODES = {
    "M": Status.MODIFIED,
    "R": Status.DELETED,
    "I": Status.IGNORED,
    "?": Status.UNTRACKED,
    "!": Status.MISSING,
    "C": Status.CLEAN,
}

_MERGE_CODES = {
    "R": MergeStatus.RESOLVED,
    "U": MergeStatus.UNRESOLVED,
}


def translate_status(raw: str, renamed: bool, path: Optional[str] = None) -> Status:
    """Map an ``hg status`` code to a Status. Raises UnknownStatusError."""
    if raw == "A":
        return Status.RENAMED if renamed else Status.ADDED
    try:
        return _STATUS_CODES[raw]
    except KeyError:
        raise UnknownStatusError(raw, path) from None


def translate_merge_status(raw: Optional[str]) -> MergeStatus:
    """Map an ``hg resolve --list`` code to a MergeStatus (never fails)."""
    return _MERGE_CODES.get(raw or "", MergeStatus.NONE)

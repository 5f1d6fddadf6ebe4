"""Data models for classified resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Status(str, Enum):
    MODIFIED = "modified"
    DELETED = "deleted"
    IGNORED = "ignored"
    UNTRACKED = "untracked"
    MISSING = "missing"
    ADDED = "added"
    RENAMED = "renamed"
    CLEAN = "clean"


class MergeStatus(str, Enum):
    NONE = "none"
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"


class GroupId(str, Enum):
    """Identity of one of the six fixed status groups."""

    CONFLICT = "conflict"
    STAGING = "staging"
    MERGE = "merge"
    WORKING = "working"
    UNTRACKED = "untracked"
    PARENT = "parent"

    @property
    def label(self) -> str:
        return _GROUP_LABELS[self]


_GROUP_LABELS = {
    GroupId.CONFLICT: "Unresolved Conflicts",
    GroupId.STAGING: "Staged Changes",
    GroupId.MERGE: "Merged Changes",
    GroupId.WORKING: "Changes",
    GroupId.UNTRACKED: "Untracked Files",
    GroupId.PARENT: "Parent Changes",
}

_STATUS_LETTERS = {
    Status.MODIFIED: "M",
    Status.ADDED: "A",
    Status.RENAMED: "A",
    Status.DELETED: "R",
    Status.MISSING: "!",
    Status.UNTRACKED: "?",
    Status.IGNORED: "I",
    Status.CLEAN: "C",
}

_STATUS_TOOLTIPS = {
    Status.MODIFIED: "Modified",
    Status.ADDED: "Added",
    Status.RENAMED: "Renamed",
    Status.DELETED: "Deleted",
    Status.MISSING: "Missing",
    Status.UNTRACKED: "Untracked",
    Status.IGNORED: "Ignored",
    Status.CLEAN: "Clean",
}


@dataclass(frozen=True)
class Resource:
    """One classified file, bound to the group it was placed in.

    ``uri`` is the absolute path of the reported file (the destination of a
    rename). ``rename_uri`` is the path it was renamed or copied from. The
    ``left_ref`` / ``right_ref`` / ``label_suffix`` fields label which
    revisions a diff compares and are only set for parent changes.
    """

    group: GroupId
    uri: Path
    status: Status
    merge_status: MergeStatus = MergeStatus.NONE
    rename_uri: Optional[Path] = None
    left_ref: Optional[str] = None
    right_ref: Optional[str] = None
    label_suffix: Optional[str] = None

    @property
    def original_uri(self) -> Path:
        """Left-hand side of a diff: the rename source if there is one."""
        return self.rename_uri if self.rename_uri is not None else self.uri

    @property
    def letter(self) -> str:
        return _STATUS_LETTERS[self.status]

    @property
    def tooltip(self) -> str:
        return _STATUS_TOOLTIPS[self.status]

    @property
    def strike_through(self) -> bool:
        return self.status in (Status.DELETED, Status.MISSING)

    @property
    def is_dirty(self) -> bool:
        return self.status not in (Status.UNTRACKED, Status.IGNORED, Status.CLEAN)

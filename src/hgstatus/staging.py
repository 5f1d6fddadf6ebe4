"""Staging snapshot — the Staging group carried between refreshes.

Stored as JSON with repository-relative paths::

    {"version": "1.0",
     "resources": [{"path": "a.txt", "status": "modified", "merge_status": "none"}]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from hgstatus.groups.classifier import relative_path
from hgstatus.groups.models import GroupId, MergeStatus, Resource, Status
from hgstatus.groups.resource_group import ResourceGroup

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"


class StagingError(Exception):
    """Raised when the staging snapshot cannot be read or written."""


class StagingStore:
    """Reads and writes the staging snapshot at *path*."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self, root: Path) -> ResourceGroup:
        """Return the stored Staging group; empty if nothing was stored."""
        if not self.path.is_file():
            return ResourceGroup(GroupId.STAGING)
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            resources = [self._from_dict(item, root) for item in data["resources"]]
            return ResourceGroup(GroupId.STAGING, resources)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise StagingError(f"Failed to read staging snapshot {self.path}: {exc}") from exc

    def save(self, group: ResourceGroup, root: Path) -> None:
        items: list[dict[str, Any]] = []
        for r in group:
            items.append({
                "path": relative_path(r.uri, root),
                "status": r.status.value,
                "merge_status": r.merge_status.value,
                **({"rename": relative_path(r.rename_uri, root)} if r.rename_uri else {}),
            })
        payload = {"version": SNAPSHOT_VERSION, "resources": items}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StagingError(f"Failed to write staging snapshot {self.path}: {exc}") from exc
        logger.debug("saved %d staged resources to %s", len(items), self.path)

    @staticmethod
    def _from_dict(item: dict[str, Any], root: Path) -> Resource:
        rename = item.get("rename")
        return Resource(
            group=GroupId.STAGING,
            uri=root / item["path"],
            status=Status(item["status"]),
            merge_status=MergeStatus(item.get("merge_status", MergeStatus.NONE.value)),
            rename_uri=root / rename if rename else None,
        )

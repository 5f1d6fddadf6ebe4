"""JSON reporter for scripts and editors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from hgstatus.groups.classifier import relative_path
from hgstatus.groups.models import Resource
from hgstatus.groups.resource_group import StatusGroups


def _resource_dict(resource: Resource, root: Path) -> dict[str, Any]:
    return {
        "path": relative_path(resource.uri, root),
        "status": resource.status.value,
        "merge_status": resource.merge_status.value,
        "letter": resource.letter,
        **({"rename": relative_path(resource.rename_uri, root)} if resource.rename_uri else {}),
    }


def to_dict(groups: StatusGroups, root: Path, *, is_merge: bool = False) -> dict[str, Any]:
    """Convert StatusGroups to a JSON-serialisable dict."""
    grouped: dict[str, list[dict[str, Any]]] = {}
    for group in groups:
        grouped[group.id.value] = [_resource_dict(r, root) for r in group]

    return {
        "version": "1.0",
        "root": str(root),
        "is_merge": is_merge,
        "groups": grouped,
    }


def render(groups: StatusGroups, root: Path, *, is_merge: bool = False) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(groups, root, is_merge=is_merge), indent=2)

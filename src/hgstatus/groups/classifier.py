"""Classification engine — raw hg statuses → six resource groups.

Two independent passes:

* parent pass: the parent revision's own changes, always in the Parent group;
* working-copy pass: working-copy entries plus resolve-list entries that the
  working-copy status did not mention (e.g. a clean local file the other
  merge side deleted).

Groups are only built once every entry has been translated, so an unknown
status code leaves no partial result behind.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from hgstatus.groups.models import GroupId, MergeStatus, Resource, Status
from hgstatus.groups.resource_group import ResourceGroup, StatusGroups
from hgstatus.groups.translate import translate_merge_status, translate_status
from hgstatus.hg.models import FileStatus

logger = logging.getLogger(__name__)

PARENT_LEFT_REF = ".^"
PARENT_RIGHT_REF = ""
PARENT_LABEL_SUFFIX = " (vs Parent)"

ExistsFn = Callable[[Path], bool]


def resource_uri(root: Union[str, Path], path: str) -> Path:
    """Absolute path of the repository-relative *path* under *root*."""
    return Path(root) / path


def relative_path(uri: Path, root: Union[str, Path]) -> str:
    """Inverse of resource_uri; falls back to the absolute path outside *root*."""
    try:
        return uri.relative_to(root).as_posix()
    except ValueError:
        return str(uri)


def _safe_exists(exists: ExistsFn, uri: Path) -> bool:
    try:
        return exists(uri)
    except OSError as exc:
        logger.debug("existence check failed for %s (%s); assuming removed", uri, exc)
        return False


def _choose_group(
    status: Status,
    merge_status: MergeStatus,
    uri: Path,
    is_merge: bool,
    previous_staging: ResourceGroup,
) -> GroupId:
    if status in (Status.IGNORED, Status.UNTRACKED):
        return GroupId.UNTRACKED

    if is_merge:
        if merge_status is MergeStatus.UNRESOLVED:
            return GroupId.CONFLICT
        return GroupId.MERGE

    if previous_staging.includes_uri(uri):
        return GroupId.STAGING
    return GroupId.WORKING


def classify(
    root: Union[str, Path],
    previous_staging: ResourceGroup,
    working_statuses: Sequence[FileStatus],
    parent_statuses: Sequence[FileStatus],
    is_merge: bool,
    resolve_statuses: Optional[Sequence[FileStatus]] = None,
    *,
    exists: ExistsFn = os.path.exists,
) -> StatusGroups:
    """Partition the given statuses into a fresh set of six groups.

    *previous_staging* is only read for membership. Raises
    UnknownStatusError on an unrecognised working-copy or parent code.
    """
    pending: dict[GroupId, list[Resource]] = {group_id: [] for group_id in GroupId}

    # --- Parent pass ---
    seen_parent: set[Path] = set()
    for raw in parent_statuses:
        uri = resource_uri(root, raw.path)
        if uri in seen_parent:
            logger.debug("duplicate parent status for %s skipped", raw.path)
            continue
        seen_parent.add(uri)
        rename_uri = resource_uri(root, raw.rename) if raw.rename else None
        status = translate_status(raw.status, bool(raw.rename), raw.path)
        pending[GroupId.PARENT].append(
            Resource(
                group=GroupId.PARENT,
                uri=uri,
                status=status,
                merge_status=MergeStatus.NONE,
                rename_uri=rename_uri,
                left_ref=PARENT_LEFT_REF,
                right_ref=PARENT_RIGHT_REF,
                label_suffix=PARENT_LABEL_SUFFIX,
            )
        )

    # --- Working-copy pass ---
    resolve_by_path: dict[str, FileStatus] = {}
    for raw in resolve_statuses or ():
        resolve_by_path.setdefault(raw.path, raw)

    seen: set[Path] = set()
    for raw in working_statuses:
        uri = resource_uri(root, raw.path)
        if uri in seen:
            logger.debug("duplicate working-copy status for %s skipped", raw.path)
            continue
        seen.add(uri)
        rename_uri = resource_uri(root, raw.rename) if raw.rename else None
        resolved = resolve_by_path.get(raw.path)
        merge_status = (
            translate_merge_status(resolved.status) if resolved else MergeStatus.NONE
        )
        status = translate_status(raw.status, bool(raw.rename), raw.path)
        group_id = _choose_group(status, merge_status, uri, is_merge, previous_staging)
        pending[group_id].append(
            Resource(
                group=group_id,
                uri=uri,
                status=status,
                merge_status=merge_status,
                rename_uri=rename_uri,
            )
        )

    # Files that still need resolving but are clean or absent in the status
    for raw in resolve_statuses or ():
        uri = resource_uri(root, raw.path)
        if uri in seen:
            continue
        seen.add(uri)
        merge_status = translate_merge_status(raw.status)
        inferred = "C" if _safe_exists(exists, uri) else "R"
        logger.debug("resolve-only entry %s inferred as %r", raw.path, inferred)
        status = translate_status(inferred, bool(raw.rename), raw.path)
        group_id = _choose_group(status, merge_status, uri, is_merge, previous_staging)
        pending[group_id].append(
            Resource(group=group_id, uri=uri, status=status, merge_status=merge_status)
        )

    return StatusGroups(**{
        group_id.value: ResourceGroup(group_id, resources)
        for group_id, resources in pending.items()
    })

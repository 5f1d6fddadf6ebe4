"""Resource groups — URI-indexed, immutable collections of Resources."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Iterator, Optional

from hgstatus.groups.models import GroupId, Resource


class ResourceGroup:
    """Ordered Resources for one group identity.

    Groups never change after construction; :meth:`union` and
    :meth:`difference` return new groups of the same identity.
    """

    def __init__(self, group_id: GroupId, resources: Iterable[Resource] = ()) -> None:
        self._id = group_id
        self._resources: tuple[Resource, ...] = tuple(resources)
        self._index: dict[Path, Resource] = {}
        for resource in self._resources:
            if resource.uri in self._index:
                raise ValueError(f"Duplicate resource in {group_id.value} group: {resource.uri}")
            self._index[resource.uri] = resource

    @property
    def id(self) -> GroupId:
        return self._id

    @property
    def label(self) -> str:
        return self._id.label

    @property
    def resources(self) -> tuple[Resource, ...]:
        return self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources)

    def __repr__(self) -> str:
        return f"ResourceGroup({self._id.value!r}, {len(self._resources)} resources)"

    def get_resource(self, uri: Path) -> Optional[Resource]:
        return self._index.get(uri)

    def includes(self, resource: Resource) -> bool:
        return self.includes_uri(resource.uri)

    def includes_uri(self, uri: Path) -> bool:
        return uri in self._index

    def union(self, incoming: Iterable[Resource]) -> "ResourceGroup":
        """Return a group with *incoming* resources appended, skipping known URIs.

        Existing entries are never replaced. Added resources are re-bound to
        this group's identity.
        """
        resources = list(self._resources)
        seen = set(self._index)
        for resource in incoming:
            if resource.uri in seen:
                continue
            seen.add(resource.uri)
            if resource.group is not self._id:
                resource = replace(resource, group=self._id)
            resources.append(resource)
        return ResourceGroup(self._id, resources)

    def difference(self, to_remove: Iterable[Resource]) -> "ResourceGroup":
        """Return a group without the resources whose URI is in *to_remove*."""
        excluded = {r.uri for r in to_remove}
        return ResourceGroup(self._id, (r for r in self._resources if r.uri not in excluded))


def _empty(group_id: GroupId):
    return field(default_factory=lambda: ResourceGroup(group_id))


@dataclass(frozen=True)
class StatusGroups:
    """The six groups produced by one classification pass."""

    conflict: ResourceGroup = _empty(GroupId.CONFLICT)
    staging: ResourceGroup = _empty(GroupId.STAGING)
    merge: ResourceGroup = _empty(GroupId.MERGE)
    working: ResourceGroup = _empty(GroupId.WORKING)
    untracked: ResourceGroup = _empty(GroupId.UNTRACKED)
    parent: ResourceGroup = _empty(GroupId.PARENT)

    def __iter__(self) -> Iterator[ResourceGroup]:
        return iter(
            (self.conflict, self.staging, self.merge, self.working, self.untracked, self.parent)
        )

    def get(self, group_id: GroupId) -> ResourceGroup:
        return getattr(self, group_id.value)

    def with_group(self, group: ResourceGroup) -> "StatusGroups":
        """Return a copy with *group* replacing the group of the same identity."""
        return replace(self, **{group.id.value: group})

    @property
    def is_empty(self) -> bool:
        return all(len(group) == 0 for group in self)

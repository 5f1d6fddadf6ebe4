"""Status groups — models, translation, set algebra, classification."""

from hgstatus.groups.classifier import classify, relative_path, resource_uri
from hgstatus.groups.models import GroupId, MergeStatus, Resource, Status
from hgstatus.groups.resource_group import ResourceGroup, StatusGroups
from hgstatus.groups.translate import (
    ClassificationError,
    UnknownStatusError,
    translate_merge_status,
    translate_status,
)

__all__ = [
    "ClassificationError",
    "GroupId",
    "MergeStatus",
    "Resource",
    "ResourceGroup",
    "Status",
    "StatusGroups",
    "UnknownStatusError",
    "classify",
    "relative_path",
    "resource_uri",
    "translate_merge_status",
    "translate_status",
]

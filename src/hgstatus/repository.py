"""Repository facade — serialized status refreshes, stage and unstage."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Iterable, Optional, Union

from hgstatus.config.schema import HgStatusConfig
from hgstatus.groups.classifier import classify
from hgstatus.groups.models import Resource
from hgstatus.groups.resource_group import ResourceGroup, StatusGroups
from hgstatus.hg.adapter import (
    get_parent_status,
    get_resolve_list,
    get_status,
    is_merge_in_progress,
)
from hgstatus.staging import StagingStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Repository:
    """Status view of one hg working copy.

    ``refresh``, ``stage`` and ``unstage`` hold a per-repository lock, so only
    one of them runs at a time. :attr:`groups` is replaced in one assignment
    and always holds a complete generation.
    """

    def __init__(
        self,
        root: Path,
        config: Optional[HgStatusConfig] = None,
        staging_store: Optional[StagingStore] = None,
    ) -> None:
        self.root = Path(os.path.normpath(root))
        self.config = config or HgStatusConfig()
        self._store = staging_store
        self._lock = threading.Lock()
        self._is_merge = False
        if staging_store is not None:
            self._groups = StatusGroups(staging=staging_store.load(root))
        else:
            self._groups = StatusGroups()

    @classmethod
    def open(cls, root: Path, config: HgStatusConfig) -> "Repository":
        """Create a Repository persisting staging where *config* says."""
        store = StagingStore(root / config.staging.state_file)
        return cls(root, config, store)

    @property
    def groups(self) -> StatusGroups:
        return self._groups

    @property
    def is_merge(self) -> bool:
        return self._is_merge

    def refresh(self) -> StatusGroups:
        """Query hg and publish a freshly classified generation of groups.

        On any error the previous generation stays published.
        """
        with self._lock:
            hg_opts = {"hg": self.config.hg.executable, "timeout": self.config.hg.timeout}
            working = get_status(
                self.root, include_ignored=self.config.status.include_ignored, **hg_opts
            )
            is_merge = is_merge_in_progress(self.root, **hg_opts)
            resolve = get_resolve_list(self.root, **hg_opts) if is_merge else None
            parent = get_parent_status(self.root, **hg_opts) if self.config.status.show_parent else []

            groups = classify(
                self.root, self._groups.staging, working, parent, is_merge, resolve
            )
            self._save_staging(groups.staging)
            self._groups = groups
            self._is_merge = is_merge
            logger.debug(
                "refreshed %s: %s",
                self.root,
                ", ".join(f"{g.id.value}={len(g)}" for g in groups),
            )
            return groups

    def stage(self, paths: Iterable[PathLike]) -> list[Resource]:
        """Move the named Working resources into Staging. Returns those moved."""
        with self._lock:
            return self._move(paths, to_staging=True)

    def unstage(self, paths: Iterable[PathLike]) -> list[Resource]:
        """Move the named Staging resources back into Working. Returns those moved."""
        with self._lock:
            return self._move(paths, to_staging=False)

    def _resolve(self, path: PathLike) -> Path:
        p = Path(path)
        if not p.is_absolute():
            p = self.root / p
        return Path(os.path.normpath(p))

    def _move(self, paths: Iterable[PathLike], *, to_staging: bool) -> list[Resource]:
        if self._is_merge:
            logger.debug("merge in progress; staging is not available")
            return []

        source: ResourceGroup = self._groups.working if to_staging else self._groups.staging
        target: ResourceGroup = self._groups.staging if to_staging else self._groups.working

        wanted = {self._resolve(p) for p in paths}
        selected = [r for r in source if r.uri in wanted]
        if not selected:
            return []

        target = target.union(selected)
        source = source.difference(selected)
        groups = self._groups.with_group(target).with_group(source)
        self._save_staging(groups.staging)
        self._groups = groups

        moved = [target.get_resource(r.uri) for r in selected]
        return [r for r in moved if r is not None]

    def _save_staging(self, staging: ResourceGroup) -> None:
        if self._store is not None:
            self._store.save(staging, self.root)

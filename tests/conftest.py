"""Shared test fixtures — sample hg output, resource builders, temp hg repos."""

from __future__ import annotations

import shutil
import subprocess
import textwrap
from pathlib import Path
from typing import Optional

import pytest

from hgstatus import repository as repository_module
from hgstatus.groups.models import GroupId, MergeStatus, Resource, Status
from hgstatus.groups.resource_group import ResourceGroup
from hgstatus.hg.models import FileStatus

ROOT = Path("/repo")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep HGSTATUS_* overrides from the developer's shell out of tests."""
    for name in ("HGSTATUS_HG", "HGSTATUS_TIMEOUT", "HGSTATUS_FORMAT", "HGSTATUS_SHOW_PARENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def root() -> Path:
    return ROOT


def make_resource(
    path: str,
    status: Status = Status.MODIFIED,
    group: GroupId = GroupId.WORKING,
    merge_status: MergeStatus = MergeStatus.NONE,
    root: Path = ROOT,
) -> Resource:
    return Resource(group=group, uri=root / path, status=status, merge_status=merge_status)


def make_group(group_id: GroupId, *paths: str, root: Path = ROOT) -> ResourceGroup:
    return ResourceGroup(group_id, [make_resource(p, group=group_id, root=root) for p in paths])


@pytest.fixture
def sample_status_output() -> str:
    """``hg status -C`` output with a rename, an add, and an untracked file."""
    return textwrap.dedent("""\
        M src/app.py
        A src/new_name.py
          src/old_name.py
        A docs/guide.md
        R src/old_name.py
        ! build.sh
        ? notes.txt
    """)


@pytest.fixture
def sample_resolve_output() -> str:
    """``hg resolve --list`` output mid-merge."""
    return textwrap.dedent("""\
        U src/app.py
        R README.md
    """)


def _hg(args, cwd: Path) -> str:
    return subprocess.run(
        ["hg", *args], cwd=cwd, capture_output=True, text=True, check=True,
    ).stdout


@pytest.fixture
def tmp_hg_repo(tmp_path: Path) -> Path:
    """Create a temporary hg repository with one commit (needs hg on PATH)."""
    if shutil.which("hg") is None:
        pytest.skip("hg is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    _hg(["init"], repo)
    (repo / ".hg" / "hgrc").write_text("[ui]\nusername = Test <test@test.com>\n")
    (repo / "README.md").write_text("# Test\n")
    _hg(["add", "README.md"], repo)
    _hg(["commit", "-m", "init"], repo)
    return repo


@pytest.fixture
def hg():
    """Run hg in a test repository."""
    return _hg


class FakeHg:
    """Canned hg answers patched over the adapter functions."""

    def __init__(
        self,
        working: Optional[list[FileStatus]] = None,
        parent: Optional[list[FileStatus]] = None,
        resolve: Optional[list[FileStatus]] = None,
        is_merge: bool = False,
    ) -> None:
        self.working = working or []
        self.parent = parent or []
        self.resolve = resolve or []
        self.is_merge = is_merge
        self.error: Optional[Exception] = None
        self.calls: list[str] = []

    def install(self, monkeypatch) -> "FakeHg":
        monkeypatch.setattr(repository_module, "get_status", self.get_status)
        monkeypatch.setattr(repository_module, "get_parent_status", self.get_parent_status)
        monkeypatch.setattr(repository_module, "get_resolve_list", self.get_resolve_list)
        monkeypatch.setattr(repository_module, "is_merge_in_progress", self.is_merge_in_progress)
        return self

    def get_status(self, root, *, include_ignored=False, hg="hg", timeout=30):
        self.calls.append("status")
        if self.error:
            raise self.error
        return self.working

    def get_parent_status(self, root, *, hg="hg", timeout=30):
        self.calls.append("parent")
        return self.parent

    def get_resolve_list(self, root, *, hg="hg", timeout=30):
        self.calls.append("resolve")
        return self.resolve

    def is_merge_in_progress(self, root, *, hg="hg", timeout=30):
        self.calls.append("merge")
        return self.is_merge

"""Tests for the staging snapshot store."""

import json
from pathlib import Path

import pytest

from hgstatus.groups.models import GroupId, MergeStatus, Resource, Status
from hgstatus.groups.resource_group import ResourceGroup
from hgstatus.staging import StagingError, StagingStore


class TestStagingStore:
    def test_missing_file_is_empty(self, tmp_path: Path):
        group = StagingStore(tmp_path / "none.json").load(tmp_path)
        assert group.id is GroupId.STAGING
        assert len(group) == 0

    def test_save_and_load(self, tmp_path: Path):
        store = StagingStore(tmp_path / ".hg" / "staging.json")
        group = ResourceGroup(GroupId.STAGING, [
            Resource(GroupId.STAGING, tmp_path / "a.py", Status.MODIFIED),
            Resource(
                GroupId.STAGING, tmp_path / "new.py", Status.RENAMED,
                rename_uri=tmp_path / "old.py",
            ),
        ])
        store.save(group, tmp_path)

        data = json.loads(store.path.read_text())
        assert data["resources"][0] == {"path": "a.py", "status": "modified", "merge_status": "none"}
        assert data["resources"][1]["rename"] == "old.py"

        loaded = store.load(tmp_path)
        assert list(loaded) == list(group)

    def test_merge_status_defaults_to_none(self, tmp_path: Path):
        path = tmp_path / "staging.json"
        path.write_text(json.dumps({"resources": [{"path": "a", "status": "added"}]}))
        r = StagingStore(path).load(tmp_path).resources[0]
        assert r.merge_status is MergeStatus.NONE
        assert r.status is Status.ADDED

    def test_malformed_json_raises(self, tmp_path: Path):
        path = tmp_path / "staging.json"
        path.write_text("{not json")
        with pytest.raises(StagingError):
            StagingStore(path).load(tmp_path)

    def test_unknown_status_raises(self, tmp_path: Path):
        path = tmp_path / "staging.json"
        path.write_text(json.dumps({"resources": [{"path": "a", "status": "weird"}]}))
        with pytest.raises(StagingError):
            StagingStore(path).load(tmp_path)

    def test_missing_resources_key_raises(self, tmp_path: Path):
        path = tmp_path / "staging.json"
        path.write_text("{}")
        with pytest.raises(StagingError):
            StagingStore(path).load(tmp_path)

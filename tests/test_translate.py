"""Tests for raw status code translation."""

import pytest

from hgstatus.groups.models import MergeStatus, Status
from hgstatus.groups.translate import (
    ClassificationError,
    UnknownStatusError,
    translate_merge_status,
    translate_status,
)


class TestTranslateStatus:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("M", Status.MODIFIED),
            ("R", Status.DELETED),
            ("I", Status.IGNORED),
            ("?", Status.UNTRACKED),
            ("!", Status.MISSING),
            ("C", Status.CLEAN),
            ("A", Status.ADDED),
        ],
    )
    def test_known_codes(self, raw, expected):
        assert translate_status(raw, renamed=False) is expected

    def test_added_with_rename_is_renamed(self):
        assert translate_status("A", renamed=True) is Status.RENAMED

    def test_rename_flag_only_affects_added(self):
        assert translate_status("M", renamed=True) is Status.MODIFIED
        assert translate_status("R", renamed=True) is Status.DELETED

    def test_unknown_code_raises(self):
        with pytest.raises(UnknownStatusError) as exc_info:
            translate_status("X", renamed=False, path="z")
        assert exc_info.value.code == "X"
        assert exc_info.value.path == "z"
        assert "'X'" in str(exc_info.value)
        assert "z" in str(exc_info.value)

    def test_unknown_is_classification_error(self):
        with pytest.raises(ClassificationError):
            translate_status("", renamed=False)

    def test_lowercase_is_unknown(self):
        with pytest.raises(UnknownStatusError):
            translate_status("m", renamed=False)


class TestTranslateMergeStatus:
    def test_resolved(self):
        assert translate_merge_status("R") is MergeStatus.RESOLVED

    def test_unresolved(self):
        assert translate_merge_status("U") is MergeStatus.UNRESOLVED

    @pytest.mark.parametrize("raw", ["M", "X", "", None])
    def test_anything_else_is_none(self, raw):
        assert translate_merge_status(raw) is MergeStatus.NONE

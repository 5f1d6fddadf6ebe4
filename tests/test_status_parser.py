"""Tests for the hg status output parser."""

from hgstatus.hg.models import FileStatus
from hgstatus.hg.status_parser import parse_status_lines


class TestBasicParsing:
    def test_status_entries(self, sample_status_output):
        entries = parse_status_lines(sample_status_output)
        assert [(e.status, e.path) for e in entries] == [
            ("M", "src/app.py"),
            ("A", "src/new_name.py"),
            ("A", "docs/guide.md"),
            ("R", "src/old_name.py"),
            ("!", "build.sh"),
            ("?", "notes.txt"),
        ]

    def test_copy_source_attached_to_previous_entry(self, sample_status_output):
        entries = parse_status_lines(sample_status_output)
        assert entries[1] == FileStatus("src/new_name.py", "A", rename="src/old_name.py")
        assert entries[2].rename is None

    def test_resolve_list(self, sample_resolve_output):
        entries = parse_status_lines(sample_resolve_output)
        assert entries == [FileStatus("src/app.py", "U"), FileStatus("README.md", "R")]


class TestEdgeCases:
    def test_empty_output(self):
        assert parse_status_lines("") == []

    def test_blank_lines_ignored(self):
        assert parse_status_lines("\nM a\n\n") == [FileStatus("a", "M")]

    def test_crlf(self):
        assert parse_status_lines("M a.txt\r\nA b.txt\r\n") == [
            FileStatus("a.txt", "M"), FileStatus("b.txt", "A"),
        ]

    def test_paths_with_spaces(self):
        assert parse_status_lines("M dir with space/file name.txt\n") == [
            FileStatus("dir with space/file name.txt", "M"),
        ]

    def test_orphan_source_line_ignored(self):
        assert parse_status_lines("  orphan.py\nM a\n") == [FileStatus("a", "M")]

    def test_unknown_codes_kept_for_classifier(self):
        # Validation happens during classification, not parsing
        assert parse_status_lines("X weird\n") == [FileStatus("weird", "X")]

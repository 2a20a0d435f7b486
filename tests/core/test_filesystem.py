"""
Unit tests for filesystem traversal.
"""

import os
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

from crossargs.core.filesystem import OsTreeWalker


class TestOsTreeWalker:
    """Tests for OsTreeWalker."""

    def test_yields_files_and_directories(self, tmp_path):
        """Test all entries below root are yielded, root excluded."""
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "file.txt").write_text("x")

        entries = set(OsTreeWalker().walk(tmp_path))

        assert entries == {
            tmp_path / "a",
            tmp_path / "a" / "b",
            tmp_path / "a" / "file.txt",
        }

    def test_order_is_stable(self, tmp_path):
        """Test repeated walks yield the same order."""
        for name in ["c", "a", "b"]:
            (tmp_path / name).mkdir()
            (tmp_path / name / "x.framework").mkdir()

        walker = OsTreeWalker()

        first = list(walker.walk(tmp_path))
        assert first == list(walker.walk(tmp_path))
        assert first[:3] == [tmp_path / "a", tmp_path / "b", tmp_path / "c"]

    def test_missing_root(self, tmp_path):
        """Test walking a missing directory yields nothing."""
        assert list(OsTreeWalker().walk(tmp_path / "missing")) == []

    def test_accepts_string_root(self, tmp_path):
        """Test root may be a string."""
        (tmp_path / "a").mkdir()

        assert list(OsTreeWalker().walk(str(tmp_path))) == [tmp_path / "a"]

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permissions are not enforced",
    )
    def test_unreadable_directory_skipped(self, tmp_path):
        """Test unreadable directories are skipped and the walk continues."""
        locked = tmp_path / "locked"
        (locked / "Hidden.framework").mkdir(parents=True)
        (tmp_path / "open" / "Seen.framework").mkdir(parents=True)
        locked.chmod(0)

        try:
            entries = list(OsTreeWalker().walk(tmp_path))
        finally:
            locked.chmod(0o755)

        assert tmp_path / "open" / "Seen.framework" in entries
        assert tmp_path / "locked" / "Hidden.framework" not in entries

    def test_walk_error_does_not_stop_walk(self, tmp_path):
        """Test an error reported by os.walk is logged and the walk continues."""

        def fake_walk(top, onerror=None, followlinks=False):
            onerror(PermissionError(13, "Permission denied", str(tmp_path / "locked")))
            yield str(tmp_path), ["open"], []
            yield str(tmp_path / "open"), [], ["Seen.framework"]

        with patch("crossargs.core.filesystem.os.walk", side_effect=fake_walk):
            entries = list(OsTreeWalker().walk(tmp_path))

        assert entries == [tmp_path / "open", tmp_path / "open" / "Seen.framework"]

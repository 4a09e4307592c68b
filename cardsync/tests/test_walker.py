#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for the directory walker.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from cardsync.errors import WalkError
from cardsync.scanning.walker import walk
from cardsync.tests.fixtures.media_tree import CARD_LAYOUT, create_media_tree

_real_scandir = os.scandir


def _deny(locked):
    """scandir stand-in that refuses to list one directory."""
    def scandir(path):
        if os.fspath(path) == locked:
            raise PermissionError(13, "Permission denied", locked)
        return _real_scandir(path)
    return scandir


class TestWalk:

    def test_root_comes_first(self, tmp_path):
        create_media_tree(tmp_path / "card", {"a.jpg": 1})
        entries = list(walk(str(tmp_path / "card")))

        assert entries[0].path == str(tmp_path / "card")
        assert entries[0].name == "card"
        assert entries[0].is_dir

    def test_depth_first_name_order(self, tmp_path):
        """Directories are entered as soon as they are seen, children sorted by name."""
        root = create_media_tree(tmp_path / "card", {
            "b/2.jpg": 1, "b/1.jpg": 1, "a.txt": 1, "c.txt": 1,
        })
        rel = [os.path.relpath(e.path, root) for e in walk(str(root))]

        assert rel == [".", "a.txt", "b", os.path.join("b", "1.jpg"), os.path.join("b", "2.jpg"), "c.txt"]

    def test_every_object_reported_once(self, tmp_path):
        root = create_media_tree(tmp_path / "card", CARD_LAYOUT)
        entries = list(walk(str(root)))

        files = [e for e in entries if not e.is_dir]
        dirs = [e for e in entries if e.is_dir]
        assert sorted(os.path.relpath(e.path, root) for e in files) == sorted(
            str(Path(p)) for p in CARD_LAYOUT
        )
        # card, DCIM, DCIM/100CANON, DCIM/101CANON, MISC
        assert len(dirs) == 5
        assert len({e.path for e in entries}) == len(entries)

    def test_empty_directory(self, tmp_path):
        entries = list(walk(str(tmp_path)))
        assert len(entries) == 1
        assert entries[0].is_dir

    def test_file_root(self, tmp_path):
        """A file given as root is reported as a single file entry."""
        path = tmp_path / "one.jpg"
        path.write_bytes(b"x")
        entries = list(walk(str(path)))

        assert len(entries) == 1
        assert not entries[0].is_dir
        assert entries[0].name == "one.jpg"

    def test_symlinked_directory_not_followed(self, tmp_path):
        root = create_media_tree(tmp_path / "card", {"real/a.jpg": 1})
        os.symlink(root / "real", root / "link")
        entries = {os.path.relpath(e.path, root): e for e in walk(str(root))}

        assert "link" in entries
        assert not entries["link"].is_dir
        assert os.path.join("link", "a.jpg") not in entries

    def test_unreadable_subdirectory(self, tmp_path):
        """A listing failure below the root aborts the walk at that directory."""
        root = create_media_tree(tmp_path / "card", CARD_LAYOUT)
        locked = str(root / "DCIM" / "101CANON")
        seen = []

        with patch("cardsync.scanning.walker.os.scandir", side_effect=_deny(locked)):
            with pytest.raises(WalkError) as exc:
                for entry in walk(str(root)):
                    seen.append(os.path.relpath(entry.path, root))

        assert exc.value.path == locked
        assert isinstance(exc.value.__cause__, PermissionError)
        assert os.path.join("DCIM", "100CANON", "IMG_0001.CR3") in seen
        # Nothing after the failing directory is reported
        assert "MISC" not in seen

    def test_vanished_entry(self, tmp_path):
        """An entry that cannot be typed mid-walk is fatal."""
        root = create_media_tree(tmp_path / "card", {"a.jpg": 1})
        ghost = MagicMock()
        ghost.name = "ghost"
        ghost.path = str(root / "ghost")
        ghost.is_dir.side_effect = FileNotFoundError(2, "No such file or directory")
        listing = MagicMock()
        listing.__enter__.return_value = iter([ghost])

        with patch("cardsync.scanning.walker.os.scandir", return_value=listing):
            with pytest.raises(WalkError) as exc:
                list(walk(str(root)))

        assert exc.value.path == str(root / "ghost")

    def test_missing_root(self, tmp_path):
        with pytest.raises(WalkError) as exc:
            list(walk(str(tmp_path / "nope")))
        assert exc.value.path == str(tmp_path / "nope")

    def test_is_lazy(self, tmp_path):
        """Nothing touches the filesystem until iteration starts."""
        gen = walk(str(tmp_path / "nope"))
        with pytest.raises(WalkError):
            next(gen)

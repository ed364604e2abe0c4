"""Tests for folder trees and the root/sibling enumerator with its TTL cache."""
import logging
import os
from unittest.mock import Mock

from iconocolor.engine.cache.enumeration import CachedListing, FolderEnumerator
from iconocolor.engine.tree.base import FolderTree
from iconocolor.engine.tree.filesystem import FilesystemFolderTree
from iconocolor.engine.tree.memory import InMemoryFolderTree


# ---------- Trees ----------


class TestInMemoryTree:
    def test_roots_sorted_case_insensitively(self):
        tree = InMemoryFolderTree(["beta", "Alpha", "gamma/x"])
        assert tree.list_root_folders() == ["Alpha", "beta", "gamma"]

    def test_adding_nested_path_adds_ancestors(self):
        tree = InMemoryFolderTree(["a/b/c"])
        assert tree.folder_exists("a")
        assert tree.folder_exists("a/b")
        assert tree.list_direct_children("a") == ["b"]

    def test_direct_children(self, tree):
        assert tree.list_direct_children("Projects") == ["Alpha", "Beta", "Gamma"]
        assert tree.list_direct_children("Projects/Beta") == ["Notes"]
        assert tree.list_direct_children("Zeta") == []

    def test_remove_subtree(self, tree):
        tree.remove("Projects/Beta")
        assert not tree.folder_exists("Projects/Beta/Notes")
        assert tree.list_direct_children("Projects") == ["Alpha", "Gamma"]

    def test_rename(self, tree):
        tree.rename("Projects", "Work")
        assert tree.folder_exists("Work/Beta/Notes")
        assert not tree.folder_exists("Projects")


class TestFilesystemTree:
    def test_walks_directories_and_skips_ignored(self, tmp_path):
        (tmp_path / "Projects" / "Alpha").mkdir(parents=True)
        (tmp_path / "Projects" / "beta").mkdir()
        (tmp_path / ".obsidian" / "plugins").mkdir(parents=True)
        (tmp_path / "Projects" / "note.md").write_text("# note")

        tree = FilesystemFolderTree(tmp_path)

        assert sorted(tree.all_folders()) == ["Projects", "Projects/Alpha", "Projects/beta"]
        assert tree.list_root_folders() == ["Projects"]
        assert tree.list_direct_children("Projects") == ["Alpha", "beta"]
        assert tree.folder_exists("Projects/Alpha")
        assert not tree.folder_exists("Projects/note.md")

    def test_custom_ignore_list(self, tmp_path):
        (tmp_path / "keep").mkdir()
        (tmp_path / "skip").mkdir()
        tree = FilesystemFolderTree(tmp_path, ignored=["skip"])
        assert tree.list_root_folders() == ["keep"]

    def test_symlinked_directories_are_not_folders(self, tmp_path):
        (tmp_path / "A" / "real").mkdir(parents=True)
        os.symlink(tmp_path / "A", tmp_path / "A" / "loop")
        os.symlink(tmp_path / "A", tmp_path / "link")
        tree = FilesystemFolderTree(tmp_path)

        assert sorted(tree.all_folders()) == ["A", "A/real"]
        assert tree.list_root_folders() == ["A"]
        assert tree.list_direct_children("A") == ["real"]
        assert tree.list_direct_children("A/loop") == []
        assert not tree.folder_exists("A/loop")
        assert not tree.folder_exists("A/loop/real")
        assert not tree.folder_exists("link")


# ---------- Enumerator ----------


def test_cached_listing_freshness(clock):
    listing = CachedListing(folders=("A",), timestamp=clock(), ttl=5, clock=clock)
    assert listing.is_fresh
    clock.advance(5)
    assert not listing.is_fresh


class TestFolderEnumerator:
    def test_root_listing_cached_until_ttl(self, clock):
        tree = InMemoryFolderTree(["A"])
        enumerator = FolderEnumerator(tree, ttl=5, clock=clock)

        assert enumerator.list_root_folders() == ("A",)
        tree.add("B")
        clock.advance(4)
        assert enumerator.list_root_folders() == ("A",)
        clock.advance(2)
        assert enumerator.list_root_folders() == ("A", "B")

    def test_invalidate_forces_refresh(self, clock):
        tree = InMemoryFolderTree(["A"])
        enumerator = FolderEnumerator(tree, ttl=60, clock=clock)
        enumerator.list_root_folders()
        tree.add("B")
        enumerator.invalidate()
        assert enumerator.list_root_folders() == ("A", "B")

    def test_generation_advances_on_expiry_and_invalidate(self, clock):
        enumerator = FolderEnumerator(InMemoryFolderTree(["A"]), ttl=5, clock=clock)
        enumerator.list_root_folders()
        start = enumerator.generation
        assert enumerator.generation == start

        clock.advance(10)
        expired = enumerator.generation
        assert expired > start

        enumerator.invalidate()
        assert enumerator.generation > expired

    def test_hits_counted(self, clock):
        enumerator = FolderEnumerator(InMemoryFolderTree(["A"]), ttl=5, clock=clock)
        enumerator.list_root_folders()
        enumerator.list_root_folders()
        enumerator.list_root_folders()
        stats = enumerator.stats()
        assert stats["hits"] == 2
        assert stats["cached_roots"] == 1
        assert stats["fresh"] is True

    def test_root_index(self, tree):
        enumerator = FolderEnumerator(tree)
        assert enumerator.root_index("Archive") == 0
        assert enumerator.root_index("Zeta") == 2
        assert enumerator.root_index("Projects/Alpha") is None

    def test_children_not_cached(self, clock):
        tree = InMemoryFolderTree(["A/x"])
        enumerator = FolderEnumerator(tree, ttl=60, clock=clock)
        assert enumerator.list_direct_children(("A",)) == ("x",)
        tree.add("A/y")
        assert enumerator.list_direct_children(("A",)) == ("x", "y")

    def test_listing_failure_is_empty(self, caplog):
        tree = Mock(spec=FolderTree)
        tree.list_root_folders.side_effect = OSError("disk gone")
        tree.list_direct_children.side_effect = OSError("disk gone")
        enumerator = FolderEnumerator(tree)

        with caplog.at_level(logging.WARNING):
            assert enumerator.list_root_folders() == ()
            assert enumerator.list_direct_children(("A",)) == ()
        assert "disk gone" in caplog.text

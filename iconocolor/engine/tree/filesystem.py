"""Folder tree backed by a directory on disk (a vault)."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from iconocolor.engine.paths import join_path, sorted_names, split_path
from iconocolor.engine.tree.base import FolderTree

logger = logging.getLogger(__name__)


class FilesystemFolderTree(FolderTree):
    """Every sub-directory of ``root`` is a folder; ``ignored`` names are pruned at every level.

    Symlinked directories are not folders, matching ``os.walk`` without ``followlinks``.
    """

    def __init__(self, root: Path, ignored: Iterable[str] = (".obsidian", ".git", ".trash")):
        self._root = Path(root)
        self._ignored = set(ignored)

    @property
    def root(self) -> Path:
        return self._root

    def all_folders(self) -> list[str]:
        folders: list[str] = []
        for dirpath, dirnames, _files in os.walk(self._root, onerror=self._on_error):
            dirnames[:] = [d for d in dirnames if d not in self._ignored]
            rel = Path(dirpath).relative_to(self._root)
            for name in dirnames:
                folders.append(join_path((*rel.parts, name)))
        return folders

    def list_root_folders(self) -> list[str]:
        return self.list_direct_children("")

    def list_direct_children(self, parent_path: str) -> list[str]:
        """Scan one directory instead of walking the whole vault."""
        directory = self._directory(parent_path)
        if directory is None or not directory.is_dir():
            return []
        if directory != self._root and not self._is_folder(directory):
            return []
        with os.scandir(directory) as entries:
            names = [
                entry.name for entry in entries
                if entry.is_dir(follow_symlinks=False) and entry.name not in self._ignored
            ]
        return sorted_names(names)

    def folder_exists(self, path: str) -> bool:
        directory = self._directory(path)
        return directory is not None and directory != self._root and self._is_folder(directory)

    def _directory(self, path: str) -> Path | None:
        segments = split_path(path)
        if any(segment in self._ignored or segment in (".", "..") for segment in segments):
            return None
        return self._root.joinpath(*segments)

    def _is_folder(self, directory: Path) -> bool:
        """A real directory reached without passing through a symlink."""
        current = directory
        while current != self._root:
            if current.is_symlink():
                return False
            current = current.parent
        return directory.is_dir()

    @staticmethod
    def _on_error(error: OSError) -> None:
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error)

"""In-memory folder tree, for tests and hosts that already hold the folder list."""
from __future__ import annotations

from typing import Iterable

from iconocolor.engine.paths import Segments, ancestors, join_path, split_path
from iconocolor.engine.tree.base import FolderTree


class InMemoryFolderTree(FolderTree):
    """A mutable set of folder paths. Adding a path adds its ancestors too."""

    def __init__(self, paths: Iterable[str] = ()):
        self._folders: set[Segments] = set()
        for path in paths:
            self.add(path)

    def all_folders(self) -> list[str]:
        return [join_path(segments) for segments in self._folders]

    def folder_exists(self, path: str) -> bool:
        return split_path(path) in self._folders

    def add(self, path: str) -> None:
        segments = split_path(path)
        if not segments:
            return
        self._folders.add(segments)
        self._folders.update(ancestors(segments))

    def remove(self, path: str) -> None:
        """Remove a folder and everything below it."""
        segments = split_path(path)
        self._folders = {f for f in self._folders if f[: len(segments)] != segments}

    def rename(self, old_path: str, new_path: str) -> None:
        old, new = split_path(old_path), split_path(new_path)
        moved = {new + f[len(old):] for f in self._folders if f[: len(old)] == old}
        self.remove(old_path)
        for segments in moved:
            self.add(join_path(segments))

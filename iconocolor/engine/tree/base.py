"""FolderTree ABC: the hierarchical namespace the engine queries by path."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from iconocolor.engine.paths import is_root, join_path, parent_of, sort_key, sorted_names, split_path


class FolderTree(ABC):
    """Interface every folder source implements.

    Subclasses only need ``all_folders``; the listing helpers derive from it
    and may be overridden with something cheaper.
    """

    @abstractmethod
    def all_folders(self) -> Iterable[str]:
        """Every folder path in the tree, ``/``-delimited."""
        ...

    def list_root_folders(self) -> list[str]:
        """Root-level folder paths in case-insensitive name order."""
        roots = {path for path in map(split_path, self.all_folders()) if is_root(path)}
        return sorted((join_path(path) for path in roots), key=sort_key)

    def list_direct_children(self, parent_path: str) -> list[str]:
        """Names of the direct children of ``parent_path``, same ordering."""
        parent = split_path(parent_path)
        names = []
        for path in map(split_path, self.all_folders()):
            if len(path) == len(parent) + 1 and parent_of(path) == parent:
                names.append(path[-1])
        return sorted_names(names)

    def folder_exists(self, path: str) -> bool:
        target = split_path(path)
        return any(split_path(p) == target for p in self.all_folders())

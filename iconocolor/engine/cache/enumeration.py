"""Ordered root/sibling enumeration with a time-boxed root listing cache."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from iconocolor.engine.paths import Segments, join_path
from iconocolor.engine.tree.base import FolderTree

logger = logging.getLogger(__name__)

DEFAULT_ROOT_CACHE_TTL = 5.0


@dataclass
class CachedListing:
    folders: tuple[str, ...]
    timestamp: float
    ttl: float = DEFAULT_ROOT_CACHE_TTL
    hit_count: int = 0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    @property
    def is_fresh(self) -> bool:
        return (self.clock() - self.timestamp) < self.ttl


class FolderEnumerator:
    """Supplies ordered root folders and direct children to the resolvers.

    The root listing is cached for ``ttl`` seconds and dropped on
    ``invalidate()``. ``generation`` advances every time the root listing is
    rebuilt or invalidated, so memoized results keyed on it expire with the
    listing.
    """

    def __init__(
        self,
        tree: FolderTree,
        ttl: float = DEFAULT_ROOT_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._tree = tree
        self._ttl = ttl
        self._clock = clock
        self._roots: CachedListing | None = None
        self._generation = 0

    @property
    def tree(self) -> FolderTree:
        return self._tree

    @property
    def generation(self) -> int:
        """Current listing generation; refreshes the root cache if it has expired."""
        if self._roots is not None and not self._roots.is_fresh:
            self._drop_roots("expired")
        return self._generation

    def list_root_folders(self) -> tuple[str, ...]:
        cached = self._roots
        if cached is not None and cached.is_fresh:
            cached.hit_count += 1
            return cached.folders

        folders = tuple(self._safe_list(self._tree.list_root_folders))
        if cached is not None:
            self._generation += 1
        self._roots = CachedListing(folders=folders, timestamp=self._clock(), ttl=self._ttl, clock=self._clock)
        logger.debug("Root folder listing refreshed: %d folders", len(folders))
        return folders

    def list_direct_children(self, parent: Segments) -> tuple[str, ...]:
        return tuple(self._safe_list(lambda: self._tree.list_direct_children(join_path(parent))))

    def root_index(self, path: str) -> int | None:
        """Position of ``path`` in the root ordering, or None if it is not listed."""
        try:
            return self.list_root_folders().index(path)
        except ValueError:
            return None

    def invalidate(self) -> None:
        self._drop_roots("invalidated")

    def stats(self) -> dict:
        cached = self._roots
        return {
            "generation": self._generation,
            "cached_roots": len(cached.folders) if cached else 0,
            "fresh": bool(cached and cached.is_fresh),
            "hits": cached.hit_count if cached else 0,
        }

    def _drop_roots(self, reason: str) -> None:
        self._roots = None
        self._generation += 1
        logger.debug("Root folder cache %s (generation %d)", reason, self._generation)

    @staticmethod
    def _safe_list(fetch: Callable[[], list[str]]) -> list[str]:
        try:
            return list(fetch())
        except OSError as exc:
            logger.warning("Folder listing failed, treating as empty: %s", exc)
            return []

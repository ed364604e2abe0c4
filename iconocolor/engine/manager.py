"""FolderColorManager: the engine facade used by UI and persistence collaborators."""
from __future__ import annotations

import logging
import re
import threading
from typing import Callable, Literal

from iconocolor.engine.cache.enumeration import DEFAULT_ROOT_CACHE_TTL, FolderEnumerator
from iconocolor.engine.models import (
    DefaultIconRule,
    FolderOverride,
    FolderOverrideUpdate,
    IconocolorSettings,
)
from iconocolor.engine.paths import ancestors, join_path, name_of, split_path
from iconocolor.engine.resolver import ColorResolver
from iconocolor.engine.result import FolderStyle, ResolvedColorSet
from iconocolor.engine.transform import apply_transformation
from iconocolor.engine.tree.base import FolderTree

logger = logging.getLogger(__name__)

ItemType = Literal["base", "markdown", "folder"]


class FolderColorManager:
    """Owns the current settings snapshot and answers color queries for folders.

    Every mutation builds a new settings snapshot under a lock and swaps in a
    fresh resolver, so a query started after a mutation has returned sees
    the new configuration. Query methods never raise for any path.
    """

    def __init__(
        self,
        settings: IconocolorSettings,
        tree: FolderTree,
        root_cache_ttl: float = DEFAULT_ROOT_CACHE_TTL,
        memoize: bool = True,
        on_change: Callable[[IconocolorSettings], None] | None = None,
    ):
        self._lock = threading.RLock()
        self._enumerator = FolderEnumerator(tree, ttl=root_cache_ttl)
        self._memoize = memoize
        self._on_change = on_change
        self._version = 0
        self._settings = settings.model_copy(deep=True)
        self._resolver = self._build_resolver()

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    @property
    def settings(self) -> IconocolorSettings:
        """The current snapshot. Treat as read-only; mutate through the manager."""
        return self._settings

    @property
    def version(self) -> int:
        return self._version

    @property
    def tree(self) -> FolderTree:
        return self._enumerator.tree

    @property
    def enumerator(self) -> FolderEnumerator:
        return self._enumerator

    @property
    def resolver(self) -> ColorResolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_base_color(self, path: str) -> str | None:
        return self._resolver.get_base_color(path)

    def get_computed_colors(self, path: str) -> ResolvedColorSet:
        return self._resolver.get_computed_colors(path)

    def get_computed_opacity(self, path: str) -> float:
        return self._resolver.get_computed_opacity(path)

    def get_folder_override(self, path: str) -> FolderOverride | None:
        return self._resolver.get_override(path)

    def get_config_for_path(self, path: str) -> FolderOverride | None:
        """The folder's own override, else the nearest ancestor's that applies to subfolders."""
        resolver = self._resolver
        segments = split_path(path)
        own = resolver.get_override(segments)
        if own is not None:
            return own
        for ancestor in ancestors(segments):
            override = resolver.get_override(ancestor)
            if override is not None and override.apply_to_subfolders:
                return override
        return None

    def get_default_icon(self, path: str, item_type: ItemType = "folder") -> DefaultIconRule | None:
        """First enabled rule of ``item_type`` whose pattern matches the item name."""
        name = name_of(split_path(path))
        for rule in self._settings.default_icon_rules:
            if not rule.enabled or rule.type != item_type or not rule.pattern or not rule.icon:
                continue
            try:
                if re.search(rule.pattern, name):
                    return rule
            except re.error as exc:
                logger.warning("Invalid regex pattern in default icon rule %s: %r (%s)", rule.id, rule.pattern, exc)
        return None

    def get_folder_style(self, path: str) -> FolderStyle:
        """Icon, element colors and background opacity for one folder."""
        resolver = self._resolver
        settings = resolver.settings
        colors = resolver.get_computed_colors(path)

        config = self.get_config_for_path(path)
        icon = config.icon if config is not None else None
        icon_color = colors.icon_color
        if not icon:
            rule = self.get_default_icon(path, "folder")
            if rule is not None:
                icon = rule.icon
                if rule.icon_color and not icon_color:
                    icon_color = rule.icon_color

        opacity = resolver.get_computed_opacity(path) if colors.folder_color else None
        return FolderStyle(
            path=join_path(split_path(path)),
            base_color=resolver.get_base_color(path),
            icon=icon,
            icon_color=icon_color,
            folder_color=colors.folder_color,
            text_color=colors.text_color,
            background_opacity=opacity,
            icon_size=settings.icon_size,
        )

    def get_all_styles(self) -> list[FolderStyle]:
        """Styles for every folder the tree currently reports, in path order."""
        paths = sorted(self.tree.all_folders(), key=lambda p: tuple(s.casefold() for s in split_path(p)))
        return [self.get_folder_style(path) for path in paths]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_folder_override(self, path: str, update: FolderOverrideUpdate | dict) -> FolderOverride | None:
        """Merge ``update`` into the folder's override; returns the stored result (None if pruned)."""
        if isinstance(update, dict):
            update = FolderOverrideUpdate.model_validate(update)
        key = join_path(split_path(path))
        with self._lock:
            configs = dict(self._settings.folder_configs)
            existing = configs.get(key) or FolderOverride()
            merged = existing.merge(update)
            if merged is None:
                configs.pop(key, None)
            else:
                configs[key] = merged
            self._commit(self._settings.model_copy(update={"folder_configs": configs}))
        logger.debug("Override for %s %s", key, "pruned" if merged is None else "updated")
        return merged

    def remove_folder_override(self, path: str) -> bool:
        key = join_path(split_path(path))
        with self._lock:
            if key not in self._settings.folder_configs:
                return False
            configs = {k: v for k, v in self._settings.folder_configs.items() if k != key}
            self._commit(self._settings.model_copy(update={"folder_configs": configs}))
        logger.debug("Override for %s removed", key)
        return True

    def update_settings(self, settings: IconocolorSettings) -> None:
        """Install a new settings snapshot and drop every cached listing."""
        with self._lock:
            self._enumerator.invalidate()
            self._commit(settings.model_copy(deep=True))

    def prune_redundant_overrides(self) -> list[str]:
        """Drop explicit element colors that equal what would be computed anyway.

        Returns the paths whose overrides changed.
        """
        changed: list[str] = []
        with self._lock:
            settings = self._settings
            transformations = {
                "icon_color": settings.icon_color_transformation,
                "folder_color": settings.folder_color_transformation,
                "text_color": settings.text_color_transformation,
            }
            configs = dict(settings.folder_configs)
            for path, override in settings.folder_configs.items():
                base_color = self._resolver.get_base_color(path)
                if not base_color:
                    continue
                remove = {
                    field for field, transformation in transformations.items()
                    if getattr(override, field) is not None
                    and _same_color(getattr(override, field), apply_transformation(base_color, transformation))
                }
                if not remove:
                    continue
                merged = override.merge(FolderOverrideUpdate(remove=remove))
                if merged is None:
                    configs.pop(path)
                else:
                    configs[path] = merged
                changed.append(path)
                logger.debug("Pruned redundant %s on %s", sorted(remove), path)
            if changed:
                self._commit(settings.model_copy(update={"folder_configs": configs}))
        return changed

    # ------------------------------------------------------------------
    # Folder events
    # ------------------------------------------------------------------

    def notify_folder_created(self, path: str) -> None:
        with self._lock:
            self._enumerator.invalidate()

    def notify_folder_deleted(self, path: str) -> None:
        with self._lock:
            self._enumerator.invalidate()

    def notify_folder_renamed(self, old_path: str, new_path: str) -> None:
        """Invalidate listings and move overrides of the folder and its descendants."""
        old, new = split_path(old_path), split_path(new_path)
        with self._lock:
            self._enumerator.invalidate()
            configs: dict[str, FolderOverride] = {}
            moved = False
            for path, override in self._settings.folder_configs.items():
                segments = split_path(path)
                if old and segments[: len(old)] == old:
                    configs[join_path(new + segments[len(old):])] = override
                    moved = True
                else:
                    configs.setdefault(path, override)
            if moved:
                self._commit(self._settings.model_copy(update={"folder_configs": configs}))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _commit(self, settings: IconocolorSettings) -> None:
        self._settings = settings
        self._version += 1
        self._resolver = self._build_resolver()
        if self._on_change is not None:
            self._on_change(settings)

    def _build_resolver(self) -> ColorResolver:
        return ColorResolver(self._settings, self._enumerator, memoize=self._memoize)


def _same_color(a: str, b: str) -> bool:
    return a.strip().lstrip("#").lower() == b.strip().lstrip("#").lower()

"""ColorResolver: base color inheritance, gradient mode, opacity, element colors."""
from __future__ import annotations

import logging

from iconocolor.engine.cache.enumeration import FolderEnumerator
from iconocolor.engine.colormath import (
    generate_gradient_colors,
    generate_repeating_colors,
    interpolate_color,
    is_valid_hex,
)
from iconocolor.engine.models import FolderOverride, IconocolorSettings
from iconocolor.engine.paths import (
    Segments,
    ancestors,
    is_root,
    join_path,
    name_of,
    parent_of,
    split_path,
)
from iconocolor.engine.result import ResolvedColorSet
from iconocolor.engine.transform import apply_child_step, apply_transformation

logger = logging.getLogger(__name__)


def gradient_position(child_index: int, child_count: int) -> float:
    """Normalized position of a child between its parent (0) and the parent's next sibling (1).

    The parent takes step 0, the next sibling the last step and the children
    the interior steps, so there are ``child_count + 2`` steps in total.
    """
    if child_count == 1:
        return 0.5
    total_steps = child_count + 2
    step = (child_index + 1) / (total_steps - 1)
    return max(0.0, min(1.0, step))


class ColorResolver:
    """Resolves colors for folder paths from one immutable settings snapshot.

    Results are memoized per path. The memo is dropped whenever the
    enumerator's generation changes; a settings change means building a new
    resolver.
    """

    def __init__(
        self,
        settings: IconocolorSettings,
        enumerator: FolderEnumerator,
        memoize: bool = True,
    ):
        self._settings = settings
        self._enumerator = enumerator
        self._memoize = memoize
        self._overrides: dict[Segments, FolderOverride] = {
            split_path(path): cfg for path, cfg in settings.folder_configs.items()
        }
        self._base_memo: dict[Segments, str | None] = {}
        self._opacity_memo: dict[Segments, float] = {}
        self._auto_colors: list[str] | None = None
        self._memo_generation: int | None = None
        self._warned: set[str] = set()

    @property
    def settings(self) -> IconocolorSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_override(self, path: str | Segments) -> FolderOverride | None:
        return self._overrides.get(split_path(path))

    def get_base_color(self, path: str | Segments) -> str | None:
        """Effective base color, or None when nothing applies.

        Precedence: explicit override, then palette auto-color for root
        folders, then the parent's color through the child transformation.
        """
        segments = split_path(path)
        if not segments:
            return None
        self._sync_memo()
        return self._base_color(segments)

    def get_computed_opacity(self, path: str | Segments) -> float:
        """Background opacity (0-100), multiplied down from the root per nesting level.

        Returns 0 when any ancestor disables inheritance. Only meaningful for
        folders that actually have a background color.
        """
        segments = split_path(path)
        if not segments:
            return 0.0
        self._sync_memo()
        return self._opacity(segments)

    def get_computed_colors(self, path: str | Segments) -> ResolvedColorSet:
        segments = split_path(path)
        if not segments:
            return ResolvedColorSet()
        self._sync_memo()

        override = self._overrides.get(segments)
        base_color = self._base_color(segments)
        if base_color is not None:
            self._check_color(base_color, segments)

        def element(explicit: str | None, transformation) -> str | None:
            if explicit is not None:
                return explicit
            if base_color:
                return apply_transformation(base_color, transformation)
            return None

        return ResolvedColorSet(
            icon_color=element(override and override.icon_color, self._settings.icon_color_transformation),
            folder_color=element(override and override.folder_color, self._settings.folder_color_transformation),
            text_color=element(override and override.text_color, self._settings.text_color_transformation),
        )

    def is_inheritance_blocked(self, path: str | Segments) -> bool:
        """True if any ancestor of ``path`` disables base color inheritance."""
        for ancestor in ancestors(split_path(path)):
            override = self._overrides.get(ancestor)
            if override is not None and not override.inherits:
                return True
        return False

    def auto_colors(self) -> list[str]:
        """Palette colors assigned to the root folders, in root order."""
        self._sync_memo()
        if self._auto_colors is None or not self._memoize:
            self._auto_colors = self._generate_auto_colors()
        return self._auto_colors

    # ------------------------------------------------------------------
    # Base color
    # ------------------------------------------------------------------

    def _base_color(self, segments: Segments) -> str | None:
        if self._memoize and segments in self._base_memo:
            return self._base_memo[segments]
        color = self._resolve_base_color(segments)
        if self._memoize:
            self._base_memo[segments] = color
        return color

    def _resolve_base_color(self, segments: Segments) -> str | None:
        override = self._overrides.get(segments)
        if override is not None and override.base_color:
            return override.base_color

        if is_root(segments):
            if self._settings.auto_color_enabled:
                return self._root_auto_color(join_path(segments))
            return None

        if self.is_inheritance_blocked(segments):
            return None

        transformation = self._settings.child_base_transformation
        if transformation.type == "none":
            return None

        parent = parent_of(segments)
        parent_color = self._base_color(parent)
        if not parent_color:
            return None

        base = parent_color
        if transformation.use_gradient:
            base = self._gradient_base(parent_color, segments, parent)
        return apply_child_step(base, transformation)

    def _root_auto_color(self, path: str) -> str | None:
        index = self._enumerator.root_index(path)
        if index is None:
            return None
        colors = self.auto_colors()
        if index < len(colors):
            return colors[index]
        return None

    def _generate_auto_colors(self) -> list[str]:
        roots = self._enumerator.list_root_folders()
        palette = self._settings.active_palette
        if not roots or palette is None or not palette.colors:
            return []
        if self._settings.auto_color_mode == "gradient":
            return generate_gradient_colors(palette.colors, len(roots))
        return generate_repeating_colors(palette.colors, len(roots))

    # ------------------------------------------------------------------
    # Gradient mode
    # ------------------------------------------------------------------

    def _gradient_base(self, parent_color: str, child: Segments, parent: Segments) -> str:
        """Interpolate between the parent and the parent's next sibling at the child's position."""
        children = self._enumerator.list_direct_children(parent)
        if not children:
            return parent_color
        try:
            child_index = children.index(name_of(child))
        except ValueError:
            return parent_color

        next_sibling = self._next_sibling(parent)
        if next_sibling is None:
            return parent_color
        next_color = self._base_color(next_sibling)
        if not next_color:
            return parent_color

        return interpolate_color(parent_color, next_color, gradient_position(child_index, len(children)))

    def _next_sibling(self, folder: Segments) -> Segments | None:
        if is_root(folder):
            roots = self._enumerator.list_root_folders()
            index = self._enumerator.root_index(join_path(folder))
            if index is None or index >= len(roots) - 1:
                return None
            return split_path(roots[index + 1])

        grandparent = parent_of(folder)
        siblings = self._enumerator.list_direct_children(grandparent)
        try:
            index = siblings.index(name_of(folder))
        except ValueError:
            return None
        if index >= len(siblings) - 1:
            return None
        return grandparent + (siblings[index + 1],)

    # ------------------------------------------------------------------
    # Opacity
    # ------------------------------------------------------------------

    def _opacity(self, segments: Segments) -> float:
        if self._memoize and segments in self._opacity_memo:
            return self._opacity_memo[segments]
        opacity = self._resolve_opacity(segments)
        if self._memoize:
            self._opacity_memo[segments] = opacity
        return opacity

    def _resolve_opacity(self, segments: Segments) -> float:
        if is_root(segments):
            return self._settings.folder_color_opacity
        if self.is_inheritance_blocked(segments):
            return 0.0

        parent_opacity = self._opacity(parent_of(segments))
        factor = self._settings.child_base_transformation.background_opacity
        if factor is None:
            factor = 100
        return max(0.0, min(100.0, parent_opacity * factor / 100))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _sync_memo(self) -> None:
        generation = self._enumerator.generation
        if generation != self._memo_generation:
            if self._memo_generation is not None:
                logger.debug("Folder listing changed, dropping %d memoized colors", len(self._base_memo))
            self._base_memo.clear()
            self._opacity_memo.clear()
            self._auto_colors = None
            self._memo_generation = generation

    def _check_color(self, color: str, segments: Segments) -> None:
        if color in self._warned or is_valid_hex(color):
            return
        self._warned.add(color)
        logger.warning("Unparseable base color %r for %s; derived colors fall back to it unchanged",
                       color, join_path(segments))

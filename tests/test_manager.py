"""Tests for FolderColorManager: mutations, folder events, icons and styles."""
import logging

import pytest

from iconocolor.engine.manager import FolderColorManager
from iconocolor.engine.models import (
    ColorPalette,
    DefaultIconRule,
    FolderOverride,
    FolderOverrideUpdate,
    IconocolorSettings,
)
from iconocolor.engine.transform import apply_lightness
from iconocolor.engine.tree.memory import InMemoryFolderTree


# ---------- Overrides ----------


class TestSetOverride:
    def test_set_and_merge(self, manager):
        manager.set_folder_override("Projects", FolderOverrideUpdate(base_color="#112233"))
        merged = manager.set_folder_override("Projects", {"iconColor": "#445566"})
        assert merged == FolderOverride(base_color="#112233", icon_color="#445566")
        assert manager.get_folder_override("Projects") == merged
        assert manager.get_base_color("Projects") == "#112233"

    def test_path_is_normalized(self, manager):
        manager.set_folder_override("/Projects/Alpha/", {"base_color": "#112233"})
        assert "Projects/Alpha" in manager.settings.folder_configs

    def test_emptied_override_is_pruned(self, manager):
        manager.set_folder_override("Projects", {"base_color": "#112233"})
        result = manager.set_folder_override("Projects", {"remove": ["base_color"]})
        assert result is None
        assert "Projects" not in manager.settings.folder_configs

    def test_remove_override(self, manager):
        manager.set_folder_override("Zeta", {"icon": "star"})
        assert manager.remove_folder_override("Zeta") is True
        assert manager.remove_folder_override("Zeta") is False
        assert manager.get_folder_override("Zeta") is None

    def test_mutation_visible_to_next_query(self, manager):
        manager.set_folder_override("Projects", {"base_color": "#000000"})
        assert manager.get_base_color("Projects/Alpha") == apply_lightness("#000000", 10)
        manager.set_folder_override("Projects", {"base_color": "#FFFFFF"})
        assert manager.get_base_color("Projects/Alpha") == apply_lightness("#FFFFFF", 10)

    def test_on_change_and_version(self, settings, tree, mocker):
        on_change = mocker.Mock()
        manager = FolderColorManager(settings, tree, on_change=on_change)
        manager.set_folder_override("Zeta", {"icon": "star"})
        assert manager.version == 1
        on_change.assert_called_once()
        saved = on_change.call_args[0][0]
        assert saved.folder_configs["Zeta"].icon == "star"

    def test_caller_settings_not_mutated(self, settings, tree):
        manager = FolderColorManager(settings, tree)
        manager.set_folder_override("Zeta", {"icon": "star"})
        assert settings.folder_configs == {}


class TestPrune:
    def test_prunes_colors_equal_to_computed(self, manager):
        manager.set_folder_override("Projects", {
            "base_color": "#336699",
            "icon_color": "#336699",
            "text_color": "#000000",
        })
        changed = manager.prune_redundant_overrides()
        assert changed == ["Projects"]
        assert manager.get_folder_override("Projects") == FolderOverride(base_color="#336699", text_color="#000000")

    def test_prunes_whole_override(self, manager):
        manager.set_folder_override("Projects", {"base_color": "#FF0000"})
        inherited = manager.get_base_color("Projects/Alpha")
        manager.set_folder_override("Projects/Alpha", {"folder_color": inherited.lower()})
        manager.prune_redundant_overrides()
        assert manager.get_folder_override("Projects/Alpha") is None

    def test_nothing_to_prune(self, manager):
        manager.set_folder_override("Projects", {"base_color": "#FF0000", "text_color": "#FF0000"})
        version = manager.version
        assert manager.prune_redundant_overrides() == []
        assert manager.version == version


# ---------- Settings / events ----------


class TestEvents:
    def test_update_settings_replaces_snapshot(self, manager):
        new = manager.settings.model_copy(update={"auto_color_enabled": True})
        manager.update_settings(new)
        assert manager.get_base_color("Archive") == "#FF0000"
        assert manager.get_base_color("Projects") == "#00FF00"
        assert manager.get_base_color("Zeta") == "#0000FF"

    def test_created_folder_gets_auto_color(self, settings):
        tree = InMemoryFolderTree(["B"])
        manager = FolderColorManager(settings.model_copy(update={"auto_color_enabled": True}), tree)
        assert manager.get_base_color("B") == "#FF0000"
        tree.add("A")
        manager.notify_folder_created("A")
        assert manager.get_base_color("A") == "#FF0000"
        assert manager.get_base_color("B") == "#00FF00"

    def test_deleted_folder(self, settings):
        tree = InMemoryFolderTree(["A", "B"])
        manager = FolderColorManager(settings.model_copy(update={"auto_color_enabled": True}), tree)
        assert manager.get_base_color("B") == "#00FF00"
        tree.remove("A")
        manager.notify_folder_deleted("A")
        assert manager.get_base_color("B") == "#FF0000"

    def test_rename_moves_overrides(self, make_manager):
        manager = make_manager(["A/B", "AB"], folder_configs={
            "A": FolderOverride(base_color="#111111"),
            "A/B": FolderOverride(icon="x"),
            "AB": FolderOverride(icon="y"),
        })
        manager.tree.rename("A", "Z")
        manager.notify_folder_renamed("A", "Z")
        assert set(manager.settings.folder_configs) == {"Z", "Z/B", "AB"}
        assert manager.get_base_color("Z") == "#111111"
        assert manager.get_folder_override("A") is None


# ---------- Icons and styles ----------


class TestConfigForPath:
    def test_own_override_first(self, make_manager):
        manager = make_manager(["A/B"], folder_configs={
            "A": FolderOverride(icon="parent", apply_to_subfolders=True),
            "A/B": FolderOverride(icon="own"),
        })
        assert manager.get_config_for_path("A/B").icon == "own"

    def test_nearest_applying_ancestor(self, make_manager):
        manager = make_manager(["A/B/C"], folder_configs={
            "A": FolderOverride(icon="top", apply_to_subfolders=True),
            "A/B": FolderOverride(icon="middle"),
        })
        assert manager.get_config_for_path("A/B/C").icon == "top"

    def test_no_applying_ancestor(self, make_manager):
        manager = make_manager(["A/B"], folder_configs={"A": FolderOverride(icon="top")})
        assert manager.get_config_for_path("A/B") is None


class TestDefaultIcons:
    @pytest.fixture
    def manager(self, make_manager):
        return make_manager(["Archive", "Daily", "Projects/Archive 2020"], default_icon_rules=[
            DefaultIconRule(id="bad", pattern="(", icon="broken"),
            DefaultIconRule(id="off", pattern="Daily", icon="calendar", enabled=False),
            DefaultIconRule(id="md", pattern="Daily", type="markdown", icon="note"),
            DefaultIconRule(id="arch", pattern="^Archive", icon="archive", icon_color="#999999"),
        ])

    def test_first_matching_rule(self, manager):
        assert manager.get_default_icon("Projects/Archive 2020").id == "arch"

    def test_disabled_and_other_types_skipped(self, manager):
        assert manager.get_default_icon("Daily") is None
        assert manager.get_default_icon("Daily", "markdown").id == "md"

    def test_invalid_regex_logged(self, manager, caplog):
        with caplog.at_level(logging.WARNING):
            manager.get_default_icon("Archive")
        assert "bad" in caplog.text

    def test_style_uses_rule(self, manager):
        style = manager.get_folder_style("Archive")
        assert style.icon == "archive"
        assert style.icon_color == "#999999"
        assert style.background_opacity is None
        assert not style.has_background

    def test_explicit_icon_beats_rule(self, manager):
        manager.set_folder_override("Archive", {"icon": "box", "base_color": "#123456"})
        style = manager.get_folder_style("Archive")
        assert style.icon == "box"
        assert style.icon_color == "#123456"


class TestFolderStyle:
    def test_full_style(self, make_manager):
        manager = make_manager(
            ["Projects/Sub"],
            auto_color_enabled=True,
            color_palettes=[ColorPalette(name="Blue", colors=["#3B82F6"])],
            folder_color_opacity=100,
            icon_size=24,
        )
        style = manager.get_folder_style("Projects/Sub")
        assert style.path == "Projects/Sub"
        assert style.base_color == apply_lightness("#3B82F6", 10)
        assert style.folder_color == style.base_color
        assert style.background_opacity == 100
        assert style.has_background
        assert style.icon_size == 24

    def test_all_styles_in_path_order(self, manager):
        paths = [style.path for style in manager.get_all_styles()]
        assert paths == [
            "Archive",
            "Projects",
            "Projects/Alpha",
            "Projects/Beta",
            "Projects/Beta/Notes",
            "Projects/Gamma",
            "Zeta",
        ]

    def test_queries_never_raise(self, manager):
        for path in ["", "/", "does/not/exist", "Projects//Alpha"]:
            manager.get_folder_style(path)
            manager.get_computed_colors(path)
            manager.get_computed_opacity(path)


def test_defaults_are_independent():
    manager = FolderColorManager(IconocolorSettings(), InMemoryFolderTree())
    assert manager.get_all_styles() == []

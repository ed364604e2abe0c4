"""Built-in palettes, default plugin settings and preset profiles."""
from typing import List

from iconocolor.engine.models import (
    ChildBaseTransformation,
    ColorPalette,
    HSLTransformation,
    IconocolorSettings,
    LightnessTransformation,
    NoTransformation,
    SettingsProfile,
)

# ---------- Palettes ----------

DEFAULT_COLOR_PALETTES = (
    # Rainbow: full saturation, medium lightness
    ColorPalette(name="Vibrant", colors=[
        "#FF0000", "#FF8000", "#FFFF00", "#80FF00", "#00FF00", "#00FF80",
        "#00FFFF", "#0080FF", "#0000FF", "#8000FF", "#FF00FF", "#FF0080",
    ]),
    # Soft: medium saturation, high lightness
    ColorPalette(name="Pastel", colors=[
        "#FFB3B3", "#FFD4B3", "#FFF4B3", "#D4FFB3", "#B3FFB3", "#B3FFD4",
        "#B3FFF4", "#B3D4FF", "#B3B3FF", "#D4B3FF", "#F4B3FF", "#FFB3D4",
    ]),
    ColorPalette(name="Earth", colors=[
        "#8B6B4A", "#8B7A4A", "#8B8B4A", "#7A8B4A", "#6B8B4A", "#5A8B5A",
        "#4A8B6B", "#4A7A8B", "#4A6B8B", "#5A5A8B", "#6B4A8B", "#7A4A8B",
    ]),
    ColorPalette(name="Cool", colors=[
        "#4ACCCC", "#4AB8CC", "#4AA3CC", "#4A8FCC", "#4A7ACC",
        "#4A66CC", "#4A52CC", "#4A3DCC", "#4A29CC", "#4A14CC",
    ]),
    ColorPalette(name="Warm", colors=[
        "#CC4A4A", "#CC5A4A", "#CC6A4A", "#CC7A4A", "#CC8A4A",
        "#CC9A4A", "#CCAA4A", "#CCBA4A", "#CCCA4A", "#CCDA4A",
    ]),
    # Desaturated: low saturation, medium lightness
    ColorPalette(name="Muted", colors=[
        "#B38080", "#B38A80", "#B39480", "#B39E80", "#B3A880", "#B3B280",
        "#A8B380", "#9EB380", "#94B380", "#8AB380", "#80B380", "#80B38A",
    ]),
)


def default_color_palettes() -> List[ColorPalette]:
    """Fresh copies of the built-in palettes."""
    return [palette.model_copy(deep=True) for palette in DEFAULT_COLOR_PALETTES]


def default_plugin_settings() -> IconocolorSettings:
    """Settings for a vault that has never saved any."""
    return IconocolorSettings(color_palettes=default_color_palettes())


# ---------- Preset profiles ----------

PRESET_PREFIX = "preset-"


def preset_profiles() -> List[SettingsProfile]:
    return [
        SettingsProfile(
            id="preset-minimal",
            name="Minimal",
            icon_size=16,
            active_palette_index=0,  # Vibrant
            auto_color_enabled=True,
            auto_color_mode="gradient",
            icon_color_transformation=NoTransformation(),
            folder_color_transformation=NoTransformation(),
            text_color_transformation=LightnessTransformation(adjustment=25),
            child_base_transformation=ChildBaseTransformation(
                type="lightness", adjustment=10, use_gradient=False, background_opacity=0
            ),
            folder_color_opacity=0,
            default_icon_rules=[],
        ),
        SettingsProfile(
            id="preset-elegant",
            name="Elegant",
            icon_size=18,
            active_palette_index=1,  # Pastel
            auto_color_enabled=True,
            auto_color_mode="gradient",
            icon_color_transformation=LightnessTransformation(adjustment=-15),
            folder_color_transformation=NoTransformation(),
            text_color_transformation=LightnessTransformation(adjustment=30),
            child_base_transformation=ChildBaseTransformation(
                type="lightness", adjustment=8, use_gradient=True, background_opacity=0
            ),
            folder_color_opacity=0,
            default_icon_rules=[],
        ),
        SettingsProfile(
            id="preset-bold",
            name="Bold",
            icon_size=20,
            active_palette_index=0,
            auto_color_enabled=True,
            auto_color_mode="gradient",
            icon_color_transformation=NoTransformation(),
            folder_color_transformation=LightnessTransformation(adjustment=-20),
            text_color_transformation=LightnessTransformation(adjustment=40),
            child_base_transformation=ChildBaseTransformation(
                type="hsl", hue=5, saturation=5, lightness=8, use_gradient=True, background_opacity=0
            ),
            folder_color_opacity=0,
            default_icon_rules=[],
        ),
        SettingsProfile(
            id="preset-root-background",
            name="Root Background",
            icon_size=18,
            active_palette_index=0,
            auto_color_enabled=True,
            auto_color_mode="gradient",
            icon_color_transformation=NoTransformation(),
            folder_color_transformation=LightnessTransformation(adjustment=-15),
            text_color_transformation=LightnessTransformation(adjustment=35),
            child_base_transformation=ChildBaseTransformation(
                type="lightness", adjustment=12, use_gradient=False, background_opacity=0
            ),
            folder_color_opacity=80,
            default_icon_rules=[],
        ),
    ]

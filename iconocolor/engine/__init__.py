"""Iconocolor color engine: folder color derivation and inheritance."""
from iconocolor.engine.colormath import (
    generate_gradient_colors,
    generate_repeating_colors,
    hex_to_rgb,
    hsl_to_rgb,
    interpolate_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from iconocolor.engine.manager import FolderColorManager
from iconocolor.engine.models import (
    ChildBaseTransformation,
    ColorPalette,
    DefaultIconRule,
    FolderOverride,
    FolderOverrideUpdate,
    HSLTransformation,
    IconocolorSettings,
    LightnessTransformation,
    NoTransformation,
    SettingsProfile,
)
from iconocolor.engine.resolver import ColorResolver
from iconocolor.engine.result import FolderStyle, ResolvedColorSet
from iconocolor.engine.transform import apply_transformation
from iconocolor.engine.tree import FilesystemFolderTree, FolderTree, InMemoryFolderTree

__all__ = [
    "FolderColorManager", "ColorResolver",
    "FolderTree", "InMemoryFolderTree", "FilesystemFolderTree",
    "IconocolorSettings", "FolderOverride", "FolderOverrideUpdate", "ColorPalette",
    "DefaultIconRule", "SettingsProfile", "ChildBaseTransformation",
    "NoTransformation", "LightnessTransformation", "HSLTransformation",
    "ResolvedColorSet", "FolderStyle",
    "apply_transformation", "interpolate_color", "generate_gradient_colors",
    "generate_repeating_colors", "hex_to_rgb", "rgb_to_hex", "rgb_to_hsl", "hsl_to_rgb",
]

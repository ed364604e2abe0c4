"""Iconocolor: per-folder icons and derived color schemes for a file explorer."""

__version__ = "1.0.0"

from iconocolor.config.settings_schema import load_plugin_settings, save_plugin_settings  # noqa: E402
from iconocolor.engine import FolderColorManager, IconocolorSettings  # noqa: E402

__all__ = [
    "__version__",
    "FolderColorManager",
    "IconocolorSettings",
    "load_plugin_settings",
    "save_plugin_settings",
]

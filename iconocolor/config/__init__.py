from iconocolor.config.defaults import DEFAULT_COLOR_PALETTES, default_plugin_settings, preset_profiles
from iconocolor.config.profiles import apply_profile, create_profile, delete_profile, find_profile
from iconocolor.config.settings_schema import load_plugin_settings, migrate_settings, save_plugin_settings

__all__ = [
    "DEFAULT_COLOR_PALETTES", "default_plugin_settings", "preset_profiles",
    "load_plugin_settings", "migrate_settings", "save_plugin_settings",
    "create_profile", "apply_profile", "delete_profile", "find_profile",
]

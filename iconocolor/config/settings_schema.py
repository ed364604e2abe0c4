"""Load, migrate and save the plugin settings blob.

The blob lives in the vault at ``.obsidian/plugins/iconocolor/data.json`` and
is read and written as camelCase JSON, so files saved by the plugin load
unchanged. Loading is never fatal by default: a missing, unreadable or invalid
file yields the defaults. Pass ``strict=True`` to get a ``SettingsFileError``
for an unusable file instead, so the caller can keep it from being overwritten.
"""
import json
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from iconocolor.config.defaults import PRESET_PREFIX, default_color_palettes, preset_profiles
from iconocolor.core.errors import SettingsFileError
from iconocolor.engine.models import IconocolorSettings

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


def _read_json(path: Path) -> Optional[Dict[str, Any]]:
    """Read a JSON object from ``path``. Returns None if the file is missing."""
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
        raise SettingsFileError(path, f"could not read: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsFileError(path, "not a JSON object")
    return data


def migrate_settings(data: Optional[Dict[str, Any]] = None) -> IconocolorSettings:
    """Build settings from a raw blob, filling in everything newer versions added.

    - absent or null top-level keys take their defaults
    - built-in palettes missing by name are appended after the user's own
    - preset profiles are added while the user has no custom profiles
    """
    raw = {key: value for key, value in (data or {}).items() if value is not None}
    settings = IconocolorSettings.model_validate(raw)

    palettes = list(settings.color_palettes)
    if not palettes:
        palettes = default_color_palettes()
    else:
        existing = {palette.name for palette in palettes}
        palettes.extend(p for p in default_color_palettes() if p.name not in existing)

    profiles = list(settings.profiles)
    has_custom = any(not profile.id.startswith(PRESET_PREFIX) for profile in profiles)
    if not has_custom:
        existing_ids = {profile.id for profile in profiles}
        profiles.extend(p for p in preset_profiles() if p.id not in existing_ids)

    return settings.model_copy(update={"color_palettes": palettes, "profiles": profiles})


def load_plugin_settings(path: Path, strict: bool = False) -> IconocolorSettings:
    """Load and migrate the settings blob at ``path``."""
    path = Path(path)
    try:
        data = _read_json(path)
        return migrate_settings(data)
    except ValidationError as exc:
        if strict:
            raise SettingsFileError(path, f"invalid values: {exc}") from exc
        logger.warning("Invalid plugin settings in %s, using defaults: %s", path, exc)
    except SettingsFileError as exc:
        if strict:
            raise
        logger.warning("Could not use plugin settings %s, using defaults: %s", path, exc.reason)
    return migrate_settings()


def backup_settings_file(path: Path) -> Optional[Path]:
    """Copy ``path`` aside as ``<name>.bak``. Returns the copy, or None if there was no file."""
    path = Path(path)
    if not path.exists():
        return None
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    shutil.copy2(path, backup)
    logger.warning("Backed up unusable plugin settings %s to %s", path, backup)
    return backup


def save_plugin_settings(settings: IconocolorSettings, path: Path) -> Path:
    """Write ``settings`` to ``path`` as camelCase JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_json_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("Saved plugin settings to %s", path)
    return path

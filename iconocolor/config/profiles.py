"""Settings profiles: named snapshots of the global look.

Profiles never carry palettes or per-folder overrides. Every function
returns a new settings object and leaves its argument untouched.
"""
import time
from typing import Optional, Tuple

from pydantic import BaseModel

from iconocolor.core.errors import ProfileNotFoundError
from iconocolor.engine.models import IconocolorSettings, SettingsProfile

PROFILE_FIELDS = (
    "icon_size",
    "active_palette_index",
    "auto_color_enabled",
    "auto_color_mode",
    "icon_color_transformation",
    "folder_color_transformation",
    "text_color_transformation",
    "child_base_transformation",
    "folder_color_opacity",
    "default_icon_rules",
)


def find_profile(settings: IconocolorSettings, profile_id: str) -> Optional[SettingsProfile]:
    for profile in settings.profiles:
        if profile.id == profile_id:
            return profile
    return None


def _new_profile_id(settings: IconocolorSettings) -> str:
    stamp = int(time.time() * 1000)
    taken = {profile.id for profile in settings.profiles}
    while f"profile-{stamp}" in taken:
        stamp += 1
    return f"profile-{stamp}"


def create_profile(settings: IconocolorSettings, name: str) -> Tuple[IconocolorSettings, SettingsProfile]:
    """Snapshot the current values as a new profile and append it."""
    snapshot = settings.model_copy(deep=True)
    profile = SettingsProfile(
        id=_new_profile_id(settings),
        name=name,
        **{field: getattr(snapshot, field) for field in PROFILE_FIELDS},
    )
    updated = settings.model_copy(update={"profiles": [*settings.profiles, profile]})
    return updated, profile


def apply_profile(settings: IconocolorSettings, profile_id: str) -> IconocolorSettings:
    """Copy the profile's set fields onto the settings and mark it active."""
    profile = find_profile(settings, profile_id)
    if profile is None:
        raise ProfileNotFoundError(profile_id)

    changes = {}
    for field in PROFILE_FIELDS:
        value = getattr(profile, field)
        if value is None:
            continue
        if isinstance(value, list):
            value = [item.model_copy() for item in value]
        elif isinstance(value, BaseModel):
            value = value.model_copy(deep=True)
        changes[field] = value
    changes["active_profile_id"] = profile.id
    return settings.model_copy(update=changes)


def delete_profile(settings: IconocolorSettings, profile_id: str) -> IconocolorSettings:
    if find_profile(settings, profile_id) is None:
        raise ProfileNotFoundError(profile_id)
    changes = {"profiles": [p for p in settings.profiles if p.id != profile_id]}
    if settings.active_profile_id == profile_id:
        changes["active_profile_id"] = None
    return settings.model_copy(update=changes)

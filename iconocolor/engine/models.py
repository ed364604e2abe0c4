"""Configuration model: overrides, palettes, transformations and plugin settings.

Persisted as camelCase JSON (the plugin's ``data.json``); Python code uses the
snake_case field names. Numeric transformation parameters are clamped to their
ranges whenever a model is validated or a field is assigned.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_snake

from iconocolor.engine.paths import join_path, split_path

OverrideField = Literal[
    "icon",
    "base_color",
    "icon_color",
    "folder_color",
    "text_color",
    "apply_to_subfolders",
    "inherit_base_color",
]

COLOR_FIELDS = ("base_color", "icon_color", "folder_color", "text_color")


def _clamp(value: float | None, low: float, high: float) -> float | None:
    if value is None:
        return None
    return max(low, min(high, value))


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        allow_inf_nan=False,
        extra="ignore",
    )


# ---------- Transformations ----------


class NoTransformation(_Model):
    type: Literal["none"] = "none"


class LightnessTransformation(_Model):
    """Shift HSL lightness by ``adjustment`` percent (positive is lighter)."""
    type: Literal["lightness"] = "lightness"
    adjustment: float = 0

    @field_validator("adjustment")
    @classmethod
    def clamp_adjustment(cls, v):
        return _clamp(v, -100, 100)


class HSLTransformation(_Model):
    """Shift hue (degrees) and saturation/lightness (percent). Omitted fields are no-ops."""
    type: Literal["hsl"] = "hsl"
    hue: Optional[float] = None
    saturation: Optional[float] = None
    lightness: Optional[float] = None

    @field_validator("hue")
    @classmethod
    def clamp_hue(cls, v):
        return _clamp(v, -180, 180)

    @field_validator("saturation", "lightness")
    @classmethod
    def clamp_percent(cls, v):
        return _clamp(v, -100, 100)


ColorTransformation = Annotated[
    Union[NoTransformation, LightnessTransformation, HSLTransformation],
    Field(discriminator="type"),
]


class ChildBaseTransformation(_Model):
    """How a child folder's base color derives from its parent's.

    ``background_opacity`` is a percentage multiplied in once per nesting level.
    """
    type: Literal["hsl", "lightness", "none"] = "none"
    hue: Optional[float] = None
    saturation: Optional[float] = None
    lightness: Optional[float] = None
    adjustment: Optional[float] = None
    use_gradient: bool = False
    background_opacity: Optional[float] = 100

    @field_validator("hue")
    @classmethod
    def clamp_hue(cls, v):
        return _clamp(v, -180, 180)

    @field_validator("saturation", "lightness", "adjustment")
    @classmethod
    def clamp_percent(cls, v):
        return _clamp(v, -100, 100)

    @field_validator("background_opacity")
    @classmethod
    def clamp_opacity(cls, v):
        return _clamp(v, 0, 100)

    def step_transformation(self) -> Union[NoTransformation, LightnessTransformation, HSLTransformation]:
        """The per-level color transformation, without gradient or opacity."""
        if self.type == "hsl":
            return HSLTransformation(hue=self.hue, saturation=self.saturation, lightness=self.lightness)
        if self.type == "lightness" and self.adjustment is not None:
            return LightnessTransformation(adjustment=self.adjustment)
        return NoTransformation()


# ---------- Per-folder overrides ----------


class FolderOverride(_Model):
    """Explicit per-folder configuration. Unset fields are None."""
    model_config = ConfigDict(frozen=True)

    icon: Optional[str] = None
    base_color: Optional[str] = None
    icon_color: Optional[str] = None
    folder_color: Optional[str] = None
    text_color: Optional[str] = None
    apply_to_subfolders: Optional[bool] = None
    inherit_base_color: Optional[bool] = None

    @field_validator("icon", *COLOR_FIELDS)
    @classmethod
    def blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def inherits(self) -> bool:
        """Children may inherit unless inheritance is explicitly disabled."""
        return self.inherit_base_color is not False

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def merge(self, update: FolderOverrideUpdate) -> Optional[FolderOverride]:
        """Apply ``update`` and return the result, or None if nothing is left set."""
        data = self.model_dump(exclude_none=True)
        data.update(update.model_dump(exclude_none=True, exclude={"remove"}))
        for name in update.remove:
            data.pop(name, None)
        merged = FolderOverride(**data)
        return None if merged.is_empty() else merged


class FolderOverrideUpdate(_Model):
    """Partial override: set fields replace, names in ``remove`` are deleted.

    Removal is applied after setting, so naming a field in both drops it.
    """
    icon: Optional[str] = None
    base_color: Optional[str] = None
    icon_color: Optional[str] = None
    folder_color: Optional[str] = None
    text_color: Optional[str] = None
    apply_to_subfolders: Optional[bool] = None
    inherit_base_color: Optional[bool] = None
    remove: set[OverrideField] = Field(default_factory=set)

    @field_validator("icon", *COLOR_FIELDS)
    @classmethod
    def blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("remove", mode="before")
    @classmethod
    def normalize_names(cls, v):
        if v is None:
            return set()
        if isinstance(v, str):
            v = [v]
        return {to_snake(name) if isinstance(name, str) else name for name in v}


# ---------- Palettes, rules, profiles ----------


class ColorPalette(_Model):
    name: str
    colors: list[str] = Field(default_factory=list)


class DefaultIconRule(_Model):
    """Regex rule assigning a default icon to items whose name matches."""
    id: str
    pattern: str
    type: Literal["base", "markdown", "folder"] = "folder"
    icon: str
    icon_color: Optional[str] = None
    enabled: bool = True


class SettingsProfile(_Model):
    """Saved subset of settings. Palettes and folder overrides are not included."""
    id: str
    name: str
    icon_size: Optional[int] = None
    active_palette_index: Optional[int] = None
    auto_color_enabled: Optional[bool] = None
    auto_color_mode: Optional[Literal["gradient", "repeat"]] = None
    icon_color_transformation: Optional[ColorTransformation] = None
    folder_color_transformation: Optional[ColorTransformation] = None
    text_color_transformation: Optional[ColorTransformation] = None
    child_base_transformation: Optional[ChildBaseTransformation] = None
    folder_color_opacity: Optional[float] = None
    default_icon_rules: Optional[list[DefaultIconRule]] = None

    @field_validator("folder_color_opacity")
    @classmethod
    def clamp_opacity(cls, v):
        return _clamp(v, 0, 100)

    @property
    def is_preset(self) -> bool:
        return self.id.startswith("preset-")


# ---------- Root settings ----------


class IconocolorSettings(_Model):
    """The complete plugin settings blob."""
    folder_configs: dict[str, FolderOverride] = Field(default_factory=dict)
    icon_size: int = 20
    color_palettes: list[ColorPalette] = Field(default_factory=list)
    active_palette_index: int = 0
    auto_color_enabled: bool = False
    auto_color_mode: Literal["gradient", "repeat"] = "gradient"
    icon_color_transformation: ColorTransformation = Field(default_factory=NoTransformation)
    folder_color_transformation: ColorTransformation = Field(default_factory=NoTransformation)
    text_color_transformation: ColorTransformation = Field(
        default_factory=lambda: LightnessTransformation(adjustment=20)
    )
    child_base_transformation: ChildBaseTransformation = Field(
        default_factory=lambda: ChildBaseTransformation(type="lightness", adjustment=10)
    )
    folder_color_opacity: float = 0
    default_icon_rules: list[DefaultIconRule] = Field(default_factory=list)
    profiles: list[SettingsProfile] = Field(default_factory=list)
    active_profile_id: Optional[str] = None

    @field_validator("folder_color_opacity")
    @classmethod
    def clamp_opacity(cls, v):
        return _clamp(v, 0, 100)

    @field_validator("folder_configs")
    @classmethod
    def normalize_overrides(cls, v):
        return {
            join_path(split_path(path)): cfg
            for path, cfg in v.items()
            if split_path(path) and not cfg.is_empty()
        }

    @property
    def active_palette(self) -> Optional[ColorPalette]:
        if 0 <= self.active_palette_index < len(self.color_palettes):
            return self.color_palettes[self.active_palette_index]
        return None

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

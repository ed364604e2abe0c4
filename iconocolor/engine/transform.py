"""Apply a declarative color transformation to a base color."""
from __future__ import annotations

from iconocolor.engine.colormath import hex_to_hsl, hsl_to_hex
from iconocolor.engine.models import (
    ChildBaseTransformation,
    ColorTransformation,
    HSLTransformation,
    LightnessTransformation,
)


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def apply_lightness(base_color: str, adjustment: float) -> str:
    """Shift lightness, keeping hue and saturation. Unparseable input is returned as-is."""
    hsl = hex_to_hsl(base_color)
    if hsl is None:
        return base_color
    return hsl_to_hex(hsl.h, hsl.s, _clamp_percent(hsl.l + adjustment))


def apply_hsl(
    base_color: str,
    hue: float | None = None,
    saturation: float | None = None,
    lightness: float | None = None,
) -> str:
    """Shift hue (wrapping into [0, 360)) and clamp saturation/lightness to [0, 100]."""
    hsl = hex_to_hsl(base_color)
    if hsl is None:
        return base_color

    h, s, l = hsl  # noqa: E741
    if hue is not None:
        h = (h + hue) % 360
    if saturation is not None:
        s = _clamp_percent(s + saturation)
    if lightness is not None:
        l = _clamp_percent(l + lightness)  # noqa: E741
    return hsl_to_hex(h, s, l)


def apply_transformation(base_color: str, transformation: ColorTransformation) -> str:
    if isinstance(transformation, HSLTransformation):
        return apply_hsl(
            base_color,
            hue=transformation.hue,
            saturation=transformation.saturation,
            lightness=transformation.lightness,
        )
    if isinstance(transformation, LightnessTransformation):
        return apply_lightness(base_color, transformation.adjustment)
    return base_color


def apply_child_step(base_color: str, transformation: ChildBaseTransformation) -> str:
    """Apply the per-level part of a child-base transformation."""
    return apply_transformation(base_color, transformation.step_transformation())

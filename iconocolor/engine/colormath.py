"""Color primitives: hex/RGB/HSL conversion, interpolation, palette sequences.

All functions are pure. Malformed hex input never raises: ``hex_to_rgb``
returns ``None`` and the helpers built on it hand back an input color
unchanged.
"""
from __future__ import annotations

import colorsys
import math
import re
from typing import NamedTuple, Sequence

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: float
    s: float
    l: float  # noqa: E741


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_channel(value: float) -> int:
    return max(0, min(255, _round_half_up(value)))


def is_valid_hex(value: object) -> bool:
    return isinstance(value, str) and _HEX_RE.match(value.strip()) is not None


def hex_to_rgb(hex_color: str) -> RGB | None:
    """Parse ``#RRGGBB`` (the ``#`` is optional). Returns None if unparseable."""
    if not isinstance(hex_color, str):
        return None
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        return None
    return RGB(*(int(part, 16) for part in match.groups()))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format channels as ``#RRGGBB``; channels are rounded and clamped to 0..255."""
    return "#{:02X}{:02X}{:02X}".format(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return HSL(h * 360, s * 100, l * 100)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return RGB(_clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(b * 255))


def hex_to_hsl(hex_color: str) -> HSL | None:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(*rgb)


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def interpolate_color(color1: str, color2: str, factor: float) -> str:
    """Linearly interpolate each RGB channel between two colors.

    ``factor`` 0 yields ``color1`` and 1 yields ``color2``. If either color
    cannot be parsed, ``color1`` is returned unchanged.
    """
    c1 = hex_to_rgb(color1)
    c2 = hex_to_rgb(color2)
    if c1 is None or c2 is None:
        return color1

    return rgb_to_hex(
        c1.r + (c2.r - c1.r) * factor,
        c1.g + (c2.g - c1.g) * factor,
        c1.b + (c2.b - c1.b) * factor,
    )


def generate_gradient_colors(palette: Sequence[str], count: int) -> list[str]:
    """Spread ``count`` colors evenly along the palette.

    When ``count`` fits in the palette the leading palette colors are used
    as-is. Otherwise the palette is treated as ``len(palette) - 1`` equal
    segments over [0, 1] and each output position ``i / (count - 1)`` is
    interpolated inside its segment.
    """
    if not palette or count <= 0:
        return []
    if len(palette) == 1:
        return [palette[0]] * count
    if count <= len(palette):
        return list(palette[:count])

    colors: list[str] = []
    segments = len(palette) - 1
    for i in range(count):
        position = i / (count - 1)
        segment_index = min(int(math.floor(position * segments)), segments - 1)
        segment_start = segment_index / segments
        segment_end = (segment_index + 1) / segments
        segment_factor = (position - segment_start) / (segment_end - segment_start)
        colors.append(interpolate_color(palette[segment_index], palette[segment_index + 1], segment_factor))
    return colors


def generate_repeating_colors(palette: Sequence[str], count: int) -> list[str]:
    """Cycle through the palette: output ``i`` is ``palette[i % len(palette)]``."""
    if not palette or count <= 0:
        return []
    return [palette[i % len(palette)] for i in range(count)]

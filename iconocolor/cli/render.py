"""Rich markup helpers shared by the commands."""
from __future__ import annotations

from rich.markup import escape

from iconocolor.engine.colormath import hex_to_rgb, rgb_to_hex


def swatch(color: str | None, width: int = 3) -> str:
    """A colored block followed by the color value; ``-`` when unset."""
    if not color:
        return "[dim]-[/dim]"
    rgb = hex_to_rgb(color)
    if rgb is None:
        return f"[red]{escape(color)}[/red]"
    return f"[on {rgb_to_hex(*rgb)}]{' ' * width}[/] {color}"


def styled_name(name: str, color: str | None) -> str:
    rgb = hex_to_rgb(color) if color else None
    if rgb is None:
        return escape(name)
    return f"[{rgb_to_hex(*rgb)}]{escape(name)}[/]"


def block(color: str, width: int = 2) -> str:
    """Just the colored block, no label."""
    rgb = hex_to_rgb(color)
    if rgb is None:
        return "?" * width
    return f"[on {rgb_to_hex(*rgb)}]{' ' * width}[/]"

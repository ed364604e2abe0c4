"""Palette CLI commands: list palettes and preview root auto-colors."""
import click
from rich.console import Console
from rich.table import Table

from iconocolor.cli.render import block, swatch
from iconocolor.engine.colormath import generate_gradient_colors, generate_repeating_colors


@click.group()
def palette_group():
    """Color palettes used for root folder auto-coloring."""
    pass


@palette_group.command("list")
@click.pass_context
def list_palettes(ctx):
    """List the available palettes."""
    console = Console()
    settings = ctx.obj["session"].manager.settings

    table = Table(title="Palettes")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Colors", justify="right")
    table.add_column("Preview")
    for index, palette in enumerate(settings.color_palettes):
        marker = " [green](active)[/green]" if index == settings.active_palette_index else ""
        preview = "".join(block(color) for color in palette.colors)
        table.add_row(str(index), f"{palette.name}{marker}", str(len(palette.colors)), preview)
    console.print(table)
    auto = "on" if settings.auto_color_enabled else "off"
    console.print(f"Auto-color: {auto} ({settings.auto_color_mode})")


@palette_group.command("preview")
@click.option('--count', type=click.IntRange(min=1), default=None,
              help='Number of root folders (default: the vault\'s root count)')
@click.option('--mode', type=click.Choice(['gradient', 'repeat']), default=None,
              help='Distribution mode (default: the configured mode)')
@click.option('--index', 'palette_index', type=int, default=None,
              help='Palette index (default: the active palette)')
@click.pass_context
def preview_palette(ctx, count, mode, palette_index):
    """Show the colors root folders would receive."""
    console = Console()
    manager = ctx.obj["session"].manager
    settings = manager.settings

    if palette_index is None:
        palette_index = settings.active_palette_index
    if not 0 <= palette_index < len(settings.color_palettes):
        raise click.BadParameter(f"No palette at index {palette_index}", param_hint="--index")
    palette = settings.color_palettes[palette_index]

    roots = list(manager.tree.list_root_folders())
    if count is None:
        count = len(roots) or len(palette.colors)
    mode = mode or settings.auto_color_mode
    if mode == "gradient":
        colors = generate_gradient_colors(palette.colors, count)
    else:
        colors = generate_repeating_colors(palette.colors, count)

    table = Table(title=f"{palette.name} ({mode}, {count})")
    table.add_column("#", justify="right")
    table.add_column("Root folder")
    table.add_column("Color")
    for i, color in enumerate(colors):
        table.add_row(str(i), roots[i] if i < len(roots) else "", swatch(color))
    console.print(table)

"""Resolve CLI command: the complete style of a single folder."""
import json

import click
from rich.console import Console
from rich.table import Table

from iconocolor.cli.render import swatch


@click.command()
@click.argument('path')
@click.option('--json', 'as_json', is_flag=True, help='Print the style as JSON')
@click.pass_context
def resolve(ctx, path, as_json):
    """Resolve the effective colors, icon and opacity of PATH."""
    manager = ctx.obj["session"].manager
    style = manager.get_folder_style(path)

    if as_json:
        click.echo(json.dumps(style.model_dump(), indent=2))
        return

    console = Console()
    if not manager.tree.folder_exists(path):
        console.print(f"[yellow]Folder not found in vault: {path}[/yellow]")

    override = manager.get_folder_override(path)
    table = Table(title=style.path or path, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Base color", swatch(style.base_color))
    table.add_row("Icon color", swatch(style.icon_color))
    table.add_row("Folder color", swatch(style.folder_color))
    table.add_row("Text color", swatch(style.text_color))
    table.add_row("Background opacity", "-" if style.background_opacity is None else f"{style.background_opacity:g}%")
    table.add_row("Icon", style.icon or "-")
    table.add_row("Icon size", f"{style.icon_size}px")
    table.add_row("Override", ", ".join(sorted(override.model_dump(exclude_none=True))) if override else "-")
    console.print(table)

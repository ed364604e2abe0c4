"""Show CLI command: the vault's folder tree with resolved colors."""
import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from iconocolor.cli.render import styled_name, swatch
from iconocolor.engine.paths import join_path, split_path

logger = logging.getLogger(__name__)


def _add_children(manager, node: Tree, path: str, depth: int, max_depth):
    if max_depth is not None and depth >= max_depth:
        return
    for name in manager.enumerator.list_direct_children(split_path(path)):
        child_path = join_path((*split_path(path), name))
        child = node.add(_label(manager, child_path, name))
        _add_children(manager, child, child_path, depth + 1, max_depth)


def _label(manager, path: str, name: str) -> str:
    style = manager.get_folder_style(path)
    label = styled_name(name, style.text_color)
    if style.base_color:
        label += f"  {swatch(style.base_color, width=2)}"
    if style.has_background:
        label += f" [dim]bg {style.background_opacity:g}%[/dim]"
    if style.icon:
        label += f" [dim]icon {escape(style.icon)}[/dim]"
    return label


@click.command()
@click.option('--depth', type=click.IntRange(min=1), default=None, help='Limit how many levels are shown')
@click.option('--json', 'as_json', is_flag=True, help='Print every folder style as JSON')
@click.pass_context
def show(ctx, depth, as_json):
    """Show the folder tree with effective colors."""
    session = ctx.obj["session"]
    manager = session.manager

    if as_json:
        styles = [
            style.model_dump() for style in manager.get_all_styles()
            if depth is None or len(split_path(style.path)) <= depth
        ]
        click.echo(json.dumps(styles, indent=2))
        return

    console = Console()
    roots = manager.enumerator.list_root_folders()
    if not roots:
        console.print("[yellow]No folders found in vault.[/yellow]")
        return

    tree = Tree(f"[bold]{session.vault.resolve().name or 'vault'}[/bold]")
    for root in roots:
        node = tree.add(_label(manager, root, root))
        _add_children(manager, node, root, 1, depth)
    console.print(tree)
    logger.debug("Folder enumeration: %s", manager.enumerator.stats())

"""Override CLI commands: set, remove and prune per-folder overrides."""
import click
from pydantic import ValidationError
from rich.console import Console

from iconocolor.engine.colormath import is_valid_hex
from iconocolor.engine.models import FolderOverrideUpdate

_FIELDS = [
    "icon",
    "base_color",
    "icon_color",
    "folder_color",
    "text_color",
    "apply_to_subfolders",
    "inherit_base_color",
]


def _hex_option(ctx, param, value):
    """Accept #RRGGBB (or RRGGBB); an empty string leaves the field unset."""
    if value is None or value == "":
        return value
    if not is_valid_hex(value):
        raise click.BadParameter(f"'{value}' is not a #RRGGBB color")
    value = value.strip()
    return value if value.startswith("#") else f"#{value}"


@click.group()
def override_group():
    """Manage per-folder overrides."""
    pass


@override_group.command("set")
@click.argument('path')
@click.option('--base-color', callback=_hex_option, help='Base color every element derives from')
@click.option('--icon-color', callback=_hex_option, help='Explicit icon color')
@click.option('--folder-color', callback=_hex_option, help='Explicit background color')
@click.option('--text-color', callback=_hex_option, help='Explicit text color')
@click.option('--icon', help='Icon identifier')
@click.option('--apply-to-subfolders/--no-apply-to-subfolders', default=None,
              help='Let subfolders inherit this icon')
@click.option('--inherit/--no-inherit', 'inherit_base_color', default=None,
              help='Allow or block base color inheritance below this folder')
@click.option('--remove', multiple=True, type=click.Choice(_FIELDS), help='Field to clear (repeatable)')
@click.pass_context
def set_override(ctx, path, base_color, icon_color, folder_color, text_color, icon,
                 apply_to_subfolders, inherit_base_color, remove):
    """Set or clear override fields on PATH."""
    console = Console()
    manager = ctx.obj["session"].manager
    try:
        update = FolderOverrideUpdate(
            icon=icon,
            base_color=base_color,
            icon_color=icon_color,
            folder_color=folder_color,
            text_color=text_color,
            apply_to_subfolders=apply_to_subfolders,
            inherit_base_color=inherit_base_color,
            remove=set(remove),
        )
    except ValidationError as exc:
        raise click.ClickException(str(exc))

    if not update.model_dump(exclude_none=True, exclude={"remove"}) and not update.remove:
        raise click.UsageError("Nothing to change: pass at least one field option or --remove.")

    merged = manager.set_folder_override(path, update)
    if merged is None:
        console.print(f"[yellow]Override for {path} is now empty and was removed.[/yellow]")
    else:
        fields = ", ".join(f"{k}={v}" for k, v in merged.model_dump(exclude_none=True).items())
        console.print(f"[green]✓[/green] {path}: {fields}")


@override_group.command("remove")
@click.argument('path')
@click.pass_context
def remove_override(ctx, path):
    """Delete the whole override of PATH."""
    console = Console()
    manager = ctx.obj["session"].manager
    if manager.remove_folder_override(path):
        console.print(f"[green]✓[/green] Removed override for {path}")
    else:
        console.print(f"[yellow]No override set for {path}[/yellow]")


@override_group.command("prune")
@click.pass_context
def prune_overrides(ctx):
    """Drop explicit colors that match what would be computed anyway."""
    console = Console()
    manager = ctx.obj["session"].manager
    changed = manager.prune_redundant_overrides()
    if not changed:
        console.print("[dim]No redundant overrides.[/dim]")
        return
    for path in changed:
        console.print(f"[green]✓[/green] Pruned {path}")
    console.print(f"{len(changed)} override(s) simplified.")

"""Profile CLI commands: list, apply, save and delete settings profiles."""
import click
from rich.console import Console
from rich.table import Table

from iconocolor.config.profiles import apply_profile, create_profile, delete_profile
from iconocolor.core.errors import ProfileNotFoundError


@click.group()
def profile_group():
    """Saved looks: icon size, palette choice and transformations."""
    pass


@profile_group.command("list")
@click.pass_context
def list_profiles(ctx):
    """List saved and preset profiles."""
    console = Console()
    settings = ctx.obj["session"].manager.settings
    if not settings.profiles:
        console.print("[yellow]No profiles saved.[/yellow]")
        return

    table = Table(title="Profiles")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Status")
    for profile in settings.profiles:
        status = "[green]active[/green]" if profile.id == settings.active_profile_id else ""
        table.add_row(profile.id, profile.name, "preset" if profile.is_preset else "custom", status)
    console.print(table)


@profile_group.command("apply")
@click.argument('profile_id')
@click.pass_context
def apply(ctx, profile_id):
    """Apply the profile PROFILE_ID to the current settings."""
    console = Console()
    manager = ctx.obj["session"].manager
    try:
        updated = apply_profile(manager.settings, profile_id)
    except ProfileNotFoundError as exc:
        raise click.ClickException(str(exc))
    manager.update_settings(updated)
    profile = next(p for p in updated.profiles if p.id == profile_id)
    console.print(f"[green]✓[/green] Profile \"{profile.name}\" applied")


@profile_group.command("save")
@click.argument('name')
@click.pass_context
def save(ctx, name):
    """Save the current look as a new profile called NAME."""
    console = Console()
    manager = ctx.obj["session"].manager
    updated, profile = create_profile(manager.settings, name)
    manager.update_settings(updated)
    console.print(f"[green]✓[/green] Profile \"{name}\" created ({profile.id})")


@profile_group.command("delete")
@click.argument('profile_id')
@click.pass_context
def delete(ctx, profile_id):
    """Delete the profile PROFILE_ID."""
    console = Console()
    manager = ctx.obj["session"].manager
    try:
        updated = delete_profile(manager.settings, profile_id)
    except ProfileNotFoundError as exc:
        raise click.ClickException(str(exc))
    manager.update_settings(updated)
    console.print(f"[green]✓[/green] Profile {profile_id} deleted")

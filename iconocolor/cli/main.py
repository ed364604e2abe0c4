#!/usr/bin/env python3
"""
Iconocolor CLI

Inspect and edit the folder colors of a vault from the command line: resolve
inherited colors, manage per-folder overrides, preview palettes and switch
settings profiles.
"""

from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import click

from iconocolor import __version__
from iconocolor.cli.session import VaultSession
from iconocolor.core.config import get_settings


# ==============================================================================
# Main CLI Group
# ==============================================================================
@click.group()
@click.version_option(__version__, prog_name="iconocolor")
@click.option('--vault', type=click.Path(exists=True, file_okay=False, path_type=Path), default='.',
              show_default=True, help='Vault directory whose folders are colored')
@click.option('--settings', 'settings_path', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='Plugin settings file (default: <vault>/.obsidian/plugins/iconocolor/data.json)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, vault, settings_path, verbose):
    """Iconocolor - folder colors with inheritance, palettes and gradients.

      iconocolor show                         Colored folder tree
      iconocolor resolve Projects/Alpha       Full style for one folder
      iconocolor override set Projects --base-color "#3366CC"
      iconocolor palette preview --count 8    Auto-colors for 8 roots
      iconocolor profile apply preset-bold    Switch look
    """
    app_settings = get_settings()
    if verbose:
        app_settings = app_settings.model_copy(update={"log_level": "DEBUG"})
    app_settings.setup_logging()

    ctx.ensure_object(dict)
    ctx.obj["session"] = VaultSession(vault, settings_path, app_settings)


# ==============================================================================
# Subcommands
# ==============================================================================
from iconocolor.commands.show import show  # noqa: E402
cli.add_command(show)

from iconocolor.commands.resolve import resolve  # noqa: E402
cli.add_command(resolve)

from iconocolor.commands.override import override_group  # noqa: E402
cli.add_command(override_group, "override")

from iconocolor.commands.palette import palette_group  # noqa: E402
cli.add_command(palette_group, "palette")

from iconocolor.commands.profile import profile_group  # noqa: E402
cli.add_command(profile_group, "profile")


if __name__ == "__main__":
    cli()

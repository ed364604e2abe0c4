"""The vault a CLI invocation works on: its folder tree and settings file."""
from __future__ import annotations

import logging
from pathlib import Path

import click

from iconocolor.config.settings_schema import (
    backup_settings_file,
    load_plugin_settings,
    migrate_settings,
    save_plugin_settings,
)
from iconocolor.core.config import Settings, get_settings
from iconocolor.core.errors import SettingsFileError
from iconocolor.engine.manager import FolderColorManager
from iconocolor.engine.models import IconocolorSettings
from iconocolor.engine.tree.filesystem import FilesystemFolderTree

logger = logging.getLogger(__name__)


class VaultSession:
    """Lazily builds a FolderColorManager for ``vault``.

    Every change the manager commits is written straight back to the
    settings file. A settings file that could not be used is copied to
    ``<name>.bak`` before the first write replaces it.
    """

    def __init__(self, vault: Path, settings_path: Path | None = None, app_settings: Settings | None = None):
        self.app_settings = app_settings or get_settings()
        self.vault = Path(vault)
        if settings_path is None:
            settings_path = self.vault / self.app_settings.plugin_dir / self.app_settings.settings_file
        self.settings_path = Path(settings_path)
        self.load_error: SettingsFileError | None = None
        self.backup_path: Path | None = None
        self._manager: FolderColorManager | None = None

    @property
    def manager(self) -> FolderColorManager:
        if self._manager is None:
            tree = FilesystemFolderTree(self.vault, ignored=self.app_settings.get_ignored_dirs_list())
            self._manager = FolderColorManager(
                self._load(),
                tree,
                root_cache_ttl=self.app_settings.root_cache_ttl,
                memoize=self.app_settings.memoize,
                on_change=self.save,
            )
            logger.debug("Opened vault %s with settings %s", self.vault, self.settings_path)
        return self._manager

    def _load(self) -> IconocolorSettings:
        try:
            return load_plugin_settings(self.settings_path, strict=True)
        except SettingsFileError as exc:
            logger.warning("%s; using defaults", exc)
            self.load_error = exc
            return migrate_settings()

    def save(self, settings: IconocolorSettings) -> None:
        if self.load_error is not None and self.backup_path is None:
            self.backup_path = backup_settings_file(self.settings_path)
            if self.backup_path is not None:
                click.echo(f"Previous settings kept in {self.backup_path}", err=True)
        save_plugin_settings(settings, self.settings_path)

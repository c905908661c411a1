"""Configuration store with version upgrade and backup support.

Single-writer assumption: one process owns a given config name at a time. Within a
process, ``update`` and ``save`` hold a lock scoped to the config path for the whole
probe, copy and write sequence. Separate processes are not coordinated.
"""

import logging
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Generic, TypeVar

from pluginconf.config.backups import existing_backups, next_backup_path
from pluginconf.config.codec import dumps, loads
from pluginconf.config.models import VersionedConfig
from pluginconf.system.caller_identity import resolve_caller_name
from pluginconf.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=VersionedConfig)

_path_locks: dict[Path, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _path_locks_guard:
        return _path_locks.setdefault(key, threading.Lock())


class ConfigStore(Generic[T]):
    """Loads, upgrades and saves one plugin's versioned JSON config."""

    def __init__(
        self,
        config_class: type[T],
        name: str | None,
        path_resolver: PathResolver | None = None,
    ):
        """Initialize ConfigStore.

        Args:
            config_class: VersionedConfig subclass stored in the file
            name: Logical config name. None or empty means it could not be resolved.
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.config_class = config_class
        self.name = name or None
        self.path_resolver = path_resolver or PathResolver()

    @classmethod
    def for_caller(
        cls, config_class: type[T], path_resolver: PathResolver | None = None
    ) -> "ConfigStore[T]":
        """Create a store named after the calling module's top-level package."""
        return cls(config_class, resolve_caller_name(stack_depth=1), path_resolver)

    @property
    def config_path(self) -> Path | None:
        """Path to the live config file, or None if the name is unresolved."""
        if self.name is None:
            return None
        return self.path_resolver.get_config_path(self.name)

    def exists(self) -> bool:
        config_path = self.config_path
        return config_path is not None and config_path.is_file()

    def backups(self) -> list[Path]:
        """List existing backups of this config, oldest first."""
        config_path = self.config_path
        if config_path is None:
            return []
        return existing_backups(config_path)

    def update(self, config: T) -> bool:
        """Upgrade a stale config to the current version, backing up the old file first.

        Args:
            config: Configuration as loaded from disk. Its ``version`` is bumped in place
                once the new file is in place.

        Returns:
            bool: True if the file was backed up and rewritten, False if nothing was done

        Raises:
            OSError: If the backup copy or the rewrite fails. A failed copy leaves the
                live file untouched.
        """
        config_path = self.config_path
        if config_path is None:
            return False

        expected_version = self.config_class.current_version()
        if config.version == expected_version:
            logger.debug("Config %s is current at version %s", self.name, expected_version)
            return False

        with _lock_for(config_path):
            backup_path = next_backup_path(config_path)
            shutil.copy2(config_path, backup_path)

            upgraded = config.model_copy(update={"version": expected_version})
            self._write_atomic(config_path, dumps(upgraded))

            previous_version = config.version
            config.version = expected_version

        logger.info(
            "Upgraded config %s from version %s to %s (backup: %s)",
            self.name,
            previous_version,
            expected_version,
            backup_path,
        )
        return True

    def reload(self) -> T:
        """Reload configuration from disk.

        Returns:
            A freshly parsed config, or a default one if the name is unresolved

        Raises:
            FileNotFoundError: If the config file does not exist
            ConfigParseError: If the file contents are invalid
        """
        config_path = self.config_path
        if config_path is None:
            return self.config_class()

        config_text = config_path.read_text(encoding="utf-8")
        return loads(self.config_class, config_text, config_path)

    def save(self, config: T) -> None:
        """Write a config to disk without a backup or version check.

        Args:
            config: Configuration to save

        Raises:
            ValueError: If the config name is unresolved
        """
        config_path = self.config_path
        if config_path is None:
            raise ValueError("Cannot save config without a resolved config name")

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with _lock_for(config_path):
            self._write_atomic(config_path, dumps(config))
        logger.info("Configuration saved successfully to %s", config_path)

    def _write_atomic(self, path: Path, content: str) -> None:
        """Replace ``path`` with ``content`` via a temporary sibling file."""
        fd, temp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            # mkstemp creates 0600 files; keep the live file's permissions
            if path.exists():
                shutil.copymode(path, temp_name)
            os.replace(temp_name, path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

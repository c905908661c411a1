"""Backup file naming for config upgrades.

A config at ``<dir>/<name>.json`` is backed up to ``<dir>/<name>-<k>.bak``, where ``k``
is the smallest index not already on disk. Nothing is cached; every call probes the
filesystem again, and backups are never pruned.
"""

import re
from pathlib import Path

BACKUP_SUFFIX = ".bak"


def backup_path_for(config_path: Path, index: int) -> Path:
    """Get the backup path for a given index."""
    return config_path.with_name(f"{config_path.stem}-{index}{BACKUP_SUFFIX}")


def next_backup_path(config_path: Path) -> Path:
    """Find the first unused backup path for a config file.

    Args:
        config_path: Path to the live ``.json`` config file

    Returns:
        Path: ``<name>-<k>.bak`` for the lowest ``k >= 0`` that does not exist
    """
    index = 0
    while backup_path_for(config_path, index).exists():
        index += 1
    return backup_path_for(config_path, index)


def existing_backups(config_path: Path) -> list[Path]:
    """List backups of a config file, ordered by index."""
    if not config_path.parent.is_dir():
        return []

    pattern = re.compile(rf"^{re.escape(config_path.stem)}-(\d+){re.escape(BACKUP_SUFFIX)}$")
    indexed = []
    for candidate in config_path.parent.iterdir():
        match = pattern.match(candidate.name)
        if match and candidate.is_file():
            indexed.append((int(match.group(1)), candidate))

    return [path for _, path in sorted(indexed)]

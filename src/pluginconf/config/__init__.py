"""pluginconf configuration package.

This package provides versioned plugin configuration with:
- Version tracking against a per-class expected version
- Numbered backups before every upgrade
- Indented JSON output and comment-tolerant JSON input
"""

from .codec import ConfigParseError
from .manager import ConfigStore
from .models import VersionedConfig

__all__ = [
    "ConfigParseError",
    "ConfigStore",
    "VersionedConfig",
]

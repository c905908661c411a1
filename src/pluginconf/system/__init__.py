"""System domain package.

This package contains the environment-facing components:
- PathResolver: Config root and per-name path resolution
- caller_identity: Logical config name from the calling module
"""

from pluginconf.system import caller_identity
from pluginconf.system.path_resolver import PathResolver

__all__ = [
    "PathResolver",
    "caller_identity",
]

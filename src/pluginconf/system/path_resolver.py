import os
from pathlib import Path

# Plugin config directory relative to the game install, as laid out by the plugin host
PLUGIN_CONFIGS_SUBDIR = Path("csgo") / "addons" / "counterstrikesharp" / "configs" / "plugins"


class PathResolver:
    """Central authority for config file path resolution in pluginconf.

    Uses environment variables for configuration with sensible defaults.
    """

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        self.game_dir = Path(os.getenv("PLUGINCONF_GAME_DIR", "/opt/game"))

    def get_configs_root(self) -> Path:
        """Get the directory holding every plugin's config directory.

        Checks PLUGINCONF_CONFIG_ROOT environment variable first, then falls back to the
        plugin host layout under the game directory.
        """
        config_root = os.getenv("PLUGINCONF_CONFIG_ROOT")
        if config_root:
            return Path(config_root)

        return self.game_dir / PLUGIN_CONFIGS_SUBDIR

    def get_config_dir(self, name: str) -> Path:
        """Get the directory holding one config and its backups."""
        return self.get_configs_root() / name

    def get_config_path(self, name: str) -> Path:
        """Get the path to the live JSON file for a logical config name.

        Args:
            name: Logical config name, e.g. the plugin's package name

        Returns:
            Path: ``<root>/<name>/<name>.json``
        """
        return self.get_config_dir(name) / f"{name}.json"

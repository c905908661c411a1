from pathlib import Path

import pytest

from pluginconf.system.path_resolver import PathResolver


@pytest.fixture
def path_resolver(tmp_path: Path) -> PathResolver:
    """Provide a PathResolver whose configs root lives under tmp_path.

    Override the method rather than setting PLUGINCONF_CONFIG_ROOT so tests never
    depend on, or leak into, the process environment.
    """
    configs_root = tmp_path / "configs"
    configs_root.mkdir(parents=True)

    resolver = PathResolver()
    resolver.game_dir = tmp_path / "game"
    resolver.get_configs_root = lambda: configs_root
    return resolver


@pytest.fixture
def write_config(path_resolver):
    """Write raw JSON text as the live config file for a name and return its path."""

    def _write(name: str, text: str) -> Path:
        config_path = path_resolver.get_config_path(name)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(text, encoding="utf-8")
        return config_path

    return _write

"""Tests for backup file naming."""

from pathlib import Path

from pluginconf.config.backups import backup_path_for, existing_backups, next_backup_path


class TestNextBackupPath:
    """Test next_backup_path probing."""

    def test_first_backup_is_index_zero(self, tmp_path):
        """Should start at -0 when no backups exist."""
        config_path = tmp_path / "Plugin.json"
        assert next_backup_path(config_path) == tmp_path / "Plugin-0.bak"

    def test_skips_existing_indices(self, tmp_path):
        """Should return the next index after contiguous backups."""
        config_path = tmp_path / "Plugin.json"
        for index in range(3):
            backup_path_for(config_path, index).touch()

        assert next_backup_path(config_path) == tmp_path / "Plugin-3.bak"

    def test_returns_smallest_missing_index(self, tmp_path):
        """Should fill a gap rather than appending past it."""
        config_path = tmp_path / "Plugin.json"
        (tmp_path / "Plugin-0.bak").touch()
        (tmp_path / "Plugin-2.bak").touch()

        assert next_backup_path(config_path) == tmp_path / "Plugin-1.bak"

    def test_ignores_other_configs_backups(self, tmp_path):
        """Should only probe backups that belong to this config."""
        (tmp_path / "Other-0.bak").touch()
        assert next_backup_path(tmp_path / "Plugin.json") == tmp_path / "Plugin-0.bak"

    def test_is_pure(self, tmp_path):
        """Should not create anything on disk."""
        next_backup_path(tmp_path / "Plugin.json")
        assert list(tmp_path.iterdir()) == []


class TestExistingBackups:
    """Test listing existing backups."""

    def test_orders_numerically(self, tmp_path):
        """Should sort -10 after -2."""
        config_path = tmp_path / "Plugin.json"
        for index in (10, 2, 0):
            backup_path_for(config_path, index).touch()

        assert [p.name for p in existing_backups(config_path)] == [
            "Plugin-0.bak",
            "Plugin-2.bak",
            "Plugin-10.bak",
        ]

    def test_ignores_unrelated_files(self, tmp_path):
        """Should skip the live file, other configs and malformed names."""
        config_path = tmp_path / "Plugin.json"
        config_path.touch()
        for name in ("Plugin-x.bak", "Plugin-1.json", "PluginX-0.bak", "Other-0.bak"):
            (tmp_path / name).touch()
        (tmp_path / "Plugin-0.bak").touch()

        assert existing_backups(config_path) == [tmp_path / "Plugin-0.bak"]

    def test_missing_directory(self, tmp_path):
        """Should return an empty list when the config directory does not exist."""
        assert existing_backups(tmp_path / "nowhere" / "Plugin.json") == []

    def test_backup_path_for(self):
        assert backup_path_for(Path("/r/P/P.json"), 4) == Path("/r/P/P-4.bak")

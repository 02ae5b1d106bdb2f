"""Tests for the update directory."""

import urllib.error

import pytest

from aide_frame.update import UpdateDirectory, compare_versions, read_plugin_version


class TestVersions:
    """Test version reading and comparison."""

    @pytest.mark.parametrize("local,remote,expected", [
        ("1.0.0", "1.0.1", 1),
        ("1.0.0", "1.0.0", 0),
        ("1.2.0", "1.10.0", 1),
        ("2.0.0", "1.9.9", -1),
        ("1.0.0alpha1", "1.0.0", 0),
        ("1.0.0-dev", "1.0.1", 1),
    ])
    def test_compare_versions(self, local, remote, expected):
        """Test numeric version comparison."""
        assert compare_versions(local, remote) == expected

    def test_uncomparable_versions(self):
        """Test versions that cannot be parsed compare equal."""
        assert compare_versions(None, "1.0.0") == 0

    def test_header_version(self, tmp_path):
        """Test the Version header of the plugin file wins."""
        plugin_file = tmp_path / "plugin.py"
        plugin_file.write_text('"""\nPlugin Name: Demo\nVersion: 3.1.4\n"""\n')
        (tmp_path / "VERSION").write_text("9.9.9\n")

        assert read_plugin_version(str(plugin_file)) == "3.1.4"

    def test_version_file(self, tmp_path):
        """Test the VERSION file next to a header-less plugin file."""
        plugin_file = tmp_path / "plugin.py"
        plugin_file.write_text("print('hello')\n")
        (tmp_path / "VERSION").write_text("2.0.0\n")

        assert read_plugin_version(str(plugin_file)) == "2.0.0"

    def test_no_version(self, tmp_path):
        """Test the fallback version."""
        assert read_plugin_version(str(tmp_path / "missing.py")) == "0.0.0"


class TestUpdateDirectory:
    """Test registration and update checks."""

    @pytest.fixture
    def plugin_file(self, tmp_path):
        path = tmp_path / "plugin.py"
        path.write_text('"""\nVersion: 1.0.0\n"""\n')
        return str(path)

    @pytest.fixture
    def directory(self):
        return UpdateDirectory({"source": {"repo": "fervidum/f9slider"}})

    def test_register(self, directory, plugin_file):
        """Test registering a plugin file once."""
        first = directory.register(plugin_file)
        second = directory.register(plugin_file)

        assert first is second
        assert directory.registered() == [plugin_file]
        assert first["current_version"] == "1.0.0"

    def test_source_defaults_merged(self, directory):
        """Test partial source configuration keeps the defaults."""
        assert directory.config["source"]["branch"] == "main"
        assert directory._version_url() == "https://raw.githubusercontent.com/fervidum/f9slider/main/VERSION"

    def test_update_available(self, directory, plugin_file, monkeypatch):
        """Test a newer remote version is reported."""
        monkeypatch.setattr(UpdateDirectory, "_fetch_remote_version", lambda self, url: "1.1.0")
        directory.register(plugin_file)

        result = directory.check_for_updates(plugin_file)

        assert result["success"] is True
        assert result["update_available"] is True
        assert result["message"] == "Update available: 1.0.0 -> 1.1.0"
        assert directory.register(plugin_file)["last_check"] is not None

    def test_local_ahead(self, directory, plugin_file, monkeypatch):
        """Test a local version newer than the remote."""
        monkeypatch.setattr(UpdateDirectory, "_fetch_remote_version", lambda self, url: "0.9.0")
        directory.register(plugin_file)

        result = directory.check_for_updates(plugin_file)

        assert result["update_available"] is False
        assert "ahead" in result["message"]

    def test_network_error(self, directory, plugin_file, monkeypatch):
        """Test network errors are returned, not raised."""
        def offline(self, url):
            raise urllib.error.URLError("offline")

        monkeypatch.setattr(UpdateDirectory, "_fetch_remote_version", offline)
        directory.register(plugin_file)

        assert directory.check_for_updates(plugin_file) == {"success": False, "error": "Network error: offline"}

    def test_unregistered_plugin(self, directory, plugin_file):
        """Test checking a plugin that never registered."""
        assert directory.check_for_updates(plugin_file)["success"] is False

    def test_disabled_and_unconfigured(self, plugin_file):
        """Test checks are refused when disabled or without a repository."""
        disabled = UpdateDirectory({"enabled": False, "source": {"repo": "fervidum/f9slider"}})
        unconfigured = UpdateDirectory()
        unconfigured.register(plugin_file)

        assert disabled.check_for_updates(plugin_file)["error"] == "Updates are disabled in config"
        assert unconfigured.check_for_updates(plugin_file)["error"] == "No repository configured"

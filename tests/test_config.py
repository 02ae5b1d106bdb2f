"""Tests for configuration loading."""

import json

from aide_frame.config import deep_merge, load_config, save_config
from f9slider.app_config import DEFAULT_CONFIG


class TestLoadConfig:
    """Test load_config."""

    def test_defaults_without_file(self, tmp_path):
        """Test defaults are returned as a copy when no file exists."""
        config = load_config(str(tmp_path / "missing.json"), defaults=DEFAULT_CONFIG)
        config["update"]["source"]["branch"] = "dev"

        assert config["text_domain"] == "f9slider"
        assert DEFAULT_CONFIG["update"]["source"]["branch"] == "main"

    def test_deep_merge_over_defaults(self, tmp_path):
        """Test nested keys are merged, not replaced."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"update": {"source": {"branch": "stable"}}, "container_tags": ["nav"]}))

        config = load_config(str(path), defaults=DEFAULT_CONFIG)

        assert config["update"]["source"] == {
            "repo": "fervidum/f9slider",
            "branch": "stable",
            "version_path": "app/f9slider/VERSION",
        }
        assert config["container_tags"] == ["nav"]

    def test_search_paths(self, tmp_path):
        """Test the first existing search path is used."""
        second = tmp_path / "second.json"
        second.write_text(json.dumps({"log_level": "DEBUG"}))

        config = load_config(defaults={"log_level": "INFO"}, search_paths=[str(tmp_path / "first.json"), str(second)])

        assert config["log_level"] == "DEBUG"

    def test_invalid_json_skipped(self, tmp_path):
        """Test an unparsable file falls through to the next candidate."""
        broken = tmp_path / "broken.json"
        broken.write_text("{not json")
        good = tmp_path / "good.json"
        good.write_text(json.dumps({"log_level": "ERROR"}))

        config = load_config(str(broken), defaults={"log_level": "INFO"}, search_paths=[str(good)])

        assert config["log_level"] == "ERROR"

    def test_save_and_reload(self, tmp_path):
        """Test saving a configuration."""
        path = tmp_path / "saved.json"

        assert save_config({"log_level": "WARNING"}, str(path)) is True
        assert load_config(str(path)) == {"log_level": "WARNING"}
        assert save_config({}, str(tmp_path / "missing" / "x.json")) is False

    def test_deep_merge(self):
        """Test deep_merge modifies and returns base."""
        base = {"a": {"b": 1, "c": 2}, "d": 1}

        result = deep_merge(base, {"a": {"c": 3}, "e": 4})

        assert result is base
        assert base == {"a": {"b": 1, "c": 3}, "d": 1, "e": 4}

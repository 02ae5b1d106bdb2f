"""Tests for the command line interface."""

import json
import logging

import pytest
from PIL import Image

from aide_frame.log import logger
from aide_frame.update import UpdateDirectory
from f9slider.cli import main


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "sliders.json"
    path.write_text(json.dumps({
        "sliders": [{"term_id": 3, "name": "Front Page"}],
        "items": [
            {"db_id": 1, "slider": 3, "menu_order": 1, "title": "Hello", "url": "/"},
            {"db_id": 2, "slider": 3, "menu_order": 2, "title": "World", "url": "/world"},
        ],
    }))
    return path


class TestRender:
    """Test the render command."""

    def test_render_slider(self, plugin_paths, data_file, capsys):
        """Test rendering a slider by slug."""
        code = main(["render", "--data", str(data_file), "--slider", "front-page",
                     "--container", "nav", "--item-spacing", "discard"])

        out = capsys.readouterr().out
        assert code == 0
        assert '<nav class="menu-front-page-container"><ul id="menu-front-page" class="menu">' in out
        assert '<a href="/world">World</a></li></ul></nav>' in out

    def test_current_url(self, plugin_paths, data_file, capsys):
        """Test the current URL marks the current item."""
        main(["render", "--data", str(data_file), "--current-url", "/world"])

        assert "current-menu-item menu-item-2" in capsys.readouterr().out

    def test_unknown_slider(self, plugin_paths, data_file, capsys):
        """Test an unknown slider exits with an error."""
        code = main(["render", "--data", str(data_file), "--slider", "missing"])

        assert code == 1
        assert "No slider to render" in capsys.readouterr().err

    def test_missing_data_file(self, plugin_paths, tmp_path, capsys):
        """Test a missing slider file exits with an error."""
        code = main(["render", "--data", str(tmp_path / "nope.json")])

        assert code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_broken_data_file(self, plugin_paths, tmp_path, capsys):
        """Test items pointing at unknown sliders are reported."""
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"items": [{"db_id": 1, "slider": 7}]}))

        assert main(["render", "--data", str(path)]) == 1
        assert "Cannot load" in capsys.readouterr().err

    def test_numeric_title(self, plugin_paths, tmp_path, capsys):
        """Test a numeric title in the slider file renders as text."""
        path = tmp_path / "years.json"
        path.write_text(json.dumps({
            "sliders": [{"term_id": 1, "name": "Years"}],
            "items": [{"db_id": 1, "slider": 1, "title": 2024, "url": "/2024"}],
        }))

        assert main(["render", "--data", str(path), "--slider", "years"]) == 0
        assert '<a href="/2024">2024</a>' in capsys.readouterr().out

    def test_image_next_to_data_file(self, plugin_paths, tmp_path, capsys):
        """Test relative slide images are sized from the slider file's directory."""
        (tmp_path / "img").mkdir()
        Image.new("RGB", (40, 30)).save(tmp_path / "img" / "welcome.png")
        path = tmp_path / "sliders.json"
        path.write_text(json.dumps({
            "sliders": [{"term_id": 1, "name": "Home"}],
            "items": [{"db_id": 1, "slider": 1, "title": "Welcome", "image": "img/welcome.png"}],
        }))

        assert main(["render", "--data", str(path)]) == 0
        assert '<img src="img/welcome.png" alt="Welcome" width="40" height="30" />' in capsys.readouterr().out

    def test_verbose_sets_log_level(self, plugin_paths, data_file):
        """Test -v switches the logger to debug output."""
        main(["-v", "render", "--data", str(data_file)])

        assert logger.level == logging.DEBUG


class TestCheckUpdate:
    """Test the check-update command."""

    def test_check_update(self, plugin_paths, monkeypatch, capsys):
        """Test the update check message is printed."""
        monkeypatch.setattr(UpdateDirectory, "_fetch_remote_version", lambda self, url: "0.0.0")

        assert main(["-q", "check-update"]) == 0
        assert "up to date" in capsys.readouterr().out

    def test_check_update_failure(self, plugin_paths, monkeypatch, capsys, tmp_path):
        """Test a failed update check exits with an error."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"update": {"enabled": False}}))

        assert main(["--config", str(config), "check-update"]) == 1
        assert "disabled" in capsys.readouterr().err

"""Pytest configuration and shared fixtures."""

import io
import struct

import pytest

from aide_frame import paths
from aide_frame.hooks import HookBus
from aide_frame.log import logger
from f9slider.context import RequestContext
from f9slider.locations import LocationRegistry
from f9slider.render import SliderRenderer
from f9slider.store import SliderStore


def write_mo(path, messages):
    """Write a minimal GNU gettext catalog with the given msgid -> msgstr pairs."""
    catalog = {"": "Content-Type: text/plain; charset=UTF-8\n"}
    catalog.update(messages)
    keys = sorted(catalog)
    ids = [key.encode("utf-8") for key in keys]
    strs = [catalog[key].encode("utf-8") for key in keys]

    count = len(keys)
    header_size = 7 * 4
    ids_table = header_size
    strs_table = ids_table + count * 8
    data_start = strs_table + count * 8

    offsets = []
    data = b""
    for blob in ids + strs:
        offsets.append((len(blob), data_start + len(data)))
        data += blob + b"\0"

    output = struct.pack("<7I", 0x950412DE, 0, count, ids_table, strs_table, 0, 0)
    for length, offset in offsets:
        output += struct.pack("<2I", length, offset)
    output += data

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(output)
    return path


@pytest.fixture
def hooks():
    return HookBus()


@pytest.fixture
def store():
    """Home slider with a nested item, plus an empty slider."""
    store = SliderStore()
    home = store.add_slider("Home Slider", term_id=1)
    store.add_slider("Empty", term_id=2)
    store.add_item(home, {"db_id": 10, "menu_order": 1, "title": "Welcome", "url": "/"})
    store.add_item(home, {"db_id": 11, "menu_order": 2, "menu_item_parent": 10, "title": "Tour", "url": "/tour"})
    store.add_item(home, {"db_id": 12, "menu_order": 3, "title": "Contact", "url": "/contact"})
    return store


@pytest.fixture
def locations():
    return LocationRegistry()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def renderer(store, locations, hooks, output):
    return SliderRenderer(store, locations, hooks, context=RequestContext(), output=output)


@pytest.fixture
def plugin_paths(tmp_path):
    """Point the plugin paths at a temporary plugin and language directory."""
    plugin_dir = tmp_path / "plugins" / "f9slider"
    lang_dir = tmp_path / "languages"
    plugin_dir.mkdir(parents=True)
    lang_dir.mkdir()
    paths.init(str(plugin_dir), str(lang_dir))
    yield plugin_dir, lang_dir
    paths.init()


@pytest.fixture(autouse=True)
def log_level():
    """Restore the shared logger level after each test."""
    level = logger.level
    yield
    logger.setLevel(level)

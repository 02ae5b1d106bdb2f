"""
Central path configuration for plugins.

Holds the directories a plugin needs at runtime: its own directory, the main
plugin file, the plugin-local languages directory and the site-wide language
directory that overrides it. Call init() once at startup.

Usage:
    from aide_frame import paths

    paths.init()                              # auto-detect
    paths.init("/srv/site/plugins/f9slider")  # explicit plugin directory

    print(paths.PLUGIN_DIR)
    print(paths.LANGUAGES_DIR)

    # Applications can register additional paths
    paths.register("FIXTURES_DIR", os.path.join(paths.PLUGIN_DIR, "fixtures"))
"""

import os

# Base directories - set by init()
PLUGIN_DIR = None       # Directory holding the plugin package
PLUGIN_FILE = None      # Main plugin file, identifies the plugin to the updater
LANGUAGES_DIR = None    # <plugin>/languages/
GLOBAL_LANG_DIR = None  # Site-wide language directory, searched first
VERSION_FILE = None     # <plugin>/VERSION

# Application-specific paths (registered via register())
_app_paths = {}

_initialized = False


def init(plugin_dir=None, global_lang_dir=None):
    """
    Initialize all path constants.

    Args:
        plugin_dir: Plugin directory. If None, the f9slider package directory
                    (sibling of this framework package) is used.
        global_lang_dir: Site-wide language directory. Defaults to the
                    F9SLIDER_LANG_DIR environment variable, then to
                    <parent of plugin_dir>/languages.
    """
    global PLUGIN_DIR, PLUGIN_FILE, LANGUAGES_DIR, GLOBAL_LANG_DIR, VERSION_FILE, _initialized

    if plugin_dir is None:
        app_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        plugin_dir = os.path.join(app_dir, "f9slider")

    if global_lang_dir is None:
        global_lang_dir = os.environ.get(
            "F9SLIDER_LANG_DIR",
            os.path.join(os.path.dirname(plugin_dir), "languages"),
        )

    PLUGIN_DIR = plugin_dir
    PLUGIN_FILE = os.path.join(plugin_dir, "__init__.py")
    LANGUAGES_DIR = os.path.join(plugin_dir, "languages")
    GLOBAL_LANG_DIR = global_lang_dir
    VERSION_FILE = os.path.join(plugin_dir, "VERSION")

    _initialized = True


def ensure_initialized():
    """Ensure paths are initialized, auto-init if not."""
    if not _initialized:
        init()


def register(name, path):
    """
    Register an application-specific path.

    Args:
        name: Path name (will be accessible as paths.NAME)
        path: The path value
    """
    ensure_initialized()
    _app_paths[name] = path
    globals()[name] = path


def get(name, default=None):
    """Get a registered path by name."""
    return _app_paths.get(name, globals().get(name, default))

"""
Self-update directory for plugins.

Plugins register their main file; the directory reads the installed version
and compares it against the VERSION file published in the plugin's GitHub
repository.

Update flow:
1. REGISTER: plugin hands over its main file (on the 'selfd_register' hook)
2. CHECK: compare local version with the remote VERSION file

Downloading and installing releases is left to the host.

Usage:
    from aide_frame.update import UpdateDirectory

    directory = UpdateDirectory({
        "source": {"repo": "fervidum/f9slider", "branch": "main"},
    })
    directory.register("/srv/site/plugins/f9slider/__init__.py")
    result = directory.check_for_updates("/srv/site/plugins/f9slider/__init__.py")
"""

import datetime
import os
import re
import urllib.error
import urllib.request

from .log import logger

# "Version: 1.2.3" line in a plugin header
_VERSION_HEADER = re.compile(r'^[ \t/*#@"]*Version:\s*(\S+)', re.MULTILINE | re.IGNORECASE)


def read_plugin_version(plugin_file):
    """
    Read the installed version of a plugin.

    Looks for a "Version:" header line in the first 8 KiB of the plugin file,
    then for a VERSION file next to it.

    Returns:
        Version string, "0.0.0" when none is found
    """
    try:
        with open(plugin_file, 'r', encoding='utf-8') as f:
            match = _VERSION_HEADER.search(f.read(8192))
        if match:
            return match.group(1)
    except OSError:
        pass

    version_file = os.path.join(os.path.dirname(plugin_file), "VERSION")
    try:
        with open(version_file, 'r', encoding='utf-8') as f:
            return f.read().strip() or "0.0.0"
    except OSError:
        return "0.0.0"


def compare_versions(local, remote):
    """
    Compare two version strings.

    Returns:
        1 if remote > local (update available)
        0 if remote == local (up to date)
        -1 if remote < local (local is ahead, development mode)
    """
    def parse_version(v):
        # "1.0.0alpha1" and "1.2.3-dev" compare on their numeric release part
        base = re.split(r'[^0-9.]', v, maxsplit=1)[0]
        return tuple(int(p) for p in base.split('.') if p.isdigit())

    try:
        local_parts = parse_version(local)
        remote_parts = parse_version(remote)
    except (ValueError, TypeError):
        return 0  # Can't compare, assume equal

    if remote_parts > local_parts:
        return 1
    elif remote_parts < local_parts:
        return -1
    return 0


class UpdateDirectory:
    """
    Keeps the plugins registered for update checks.

    Configuration options:
        enabled: bool - Enable/disable update checks
        source.repo: str - GitHub repo (e.g., "username/repo")
        source.branch: str - Branch to check
        source.version_path: str - Path of the VERSION file in the repo
        timeout: int - Network timeout in seconds
    """

    DEFAULT_CONFIG = {
        "enabled": True,
        "source": {
            "repo": None,
            "branch": "main",
            "version_path": "VERSION",
        },
        "timeout": 10,
    }

    def __init__(self, config=None):
        config = config or {}
        self.config = {**self.DEFAULT_CONFIG, **config}
        self.config["source"] = {**self.DEFAULT_CONFIG["source"], **config.get("source", {})}
        self._plugins = {}

    def register(self, plugin_file):
        """Register a plugin's main file. Returns the registration record."""
        plugin_file = os.path.abspath(plugin_file)
        record = self._plugins.get(plugin_file)
        if record is None:
            record = {
                "plugin_file": plugin_file,
                "current_version": read_plugin_version(plugin_file),
                "available_version": None,
                "last_check": None,
            }
            self._plugins[plugin_file] = record
            logger.info(f"Registered {plugin_file} for updates ({record['current_version']})")
        return record

    def is_registered(self, plugin_file):
        return os.path.abspath(plugin_file) in self._plugins

    def registered(self):
        """List of registered plugin files."""
        return list(self._plugins)

    def _version_url(self):
        source = self.config["source"]
        repo = source.get("repo")
        if not repo:
            return None
        return f"https://raw.githubusercontent.com/{repo}/{source.get('branch', 'main')}/{source.get('version_path', 'VERSION')}"

    def _fetch_remote_version(self, url):
        req = urllib.request.Request(url, headers={"User-Agent": "F9slider-Updater"})
        with urllib.request.urlopen(req, timeout=self.config.get("timeout", 10)) as response:
            return response.read().decode('utf-8').strip()

    def check_for_updates(self, plugin_file):
        """
        Check the configured repository for a newer version.

        Returns:
            dict with check results; "success" is False on any failure
        """
        if not self.config.get("enabled", True):
            return {"success": False, "error": "Updates are disabled in config"}

        record = self._plugins.get(os.path.abspath(plugin_file))
        if record is None:
            return {"success": False, "error": "Plugin is not registered"}

        url = self._version_url()
        if not url:
            return {"success": False, "error": "No repository configured"}

        try:
            remote_version = self._fetch_remote_version(url)
        except urllib.error.URLError as e:
            logger.warning(f"Update check failed: {e.reason}")
            return {"success": False, "error": f"Network error: {e.reason}"}
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Update check failed: {e}")
            return {"success": False, "error": str(e)}

        local_version = record["current_version"]
        record["available_version"] = remote_version
        record["last_check"] = datetime.datetime.now().isoformat()

        cmp = compare_versions(local_version, remote_version)
        if cmp == 1:
            message = f"Update available: {local_version} -> {remote_version}"
        elif cmp == -1:
            message = f"Local version ({local_version}) is ahead of remote ({remote_version})"
        else:
            message = f"Already up to date ({local_version})"

        return {
            "success": True,
            "update_available": cmp == 1,
            "current_version": local_version,
            "available_version": remote_version,
            "message": message,
        }


__all__ = [
    'read_plugin_version',
    'compare_versions',
    'UpdateDirectory',
]

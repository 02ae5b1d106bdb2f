"""
AIDE Frame - Plugin Framework.

A lightweight framework providing common infrastructure for plugins:
- Logging configuration
- Path management
- Configuration loading
- Named extension points (filters and actions)
- Update checks against GitHub

Usage:
    from aide_frame import log, paths, config, hooks

    paths.init()
    cfg = config.load_config("config.json")

    bus = hooks.HookBus()
    bus.add_action("init", lambda: log.info("init"))
    bus.do_action("init")
"""

from . import log
from . import paths
from . import config
from . import hooks

__version__ = "1.0.0"

__all__ = [
    'log',
    'paths',
    'config',
    'hooks',
]

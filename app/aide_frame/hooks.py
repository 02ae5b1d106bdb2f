"""
Named extension points (filters and actions).

A HookBus keeps, per hook name, an ordered list of callbacks. Callbacks run
by ascending priority, and in registration order within one priority.

- Filters transform a value: each callback receives the current value plus
  the extra arguments and returns the value handed to the next callback.
- Actions notify: callbacks receive the arguments, return values are ignored.

Filters and actions share one registry, so a name can be used as either.

Usage:
    from aide_frame.hooks import HookBus

    hooks = HookBus()
    hooks.add_filter("f9_image_slider_items", lambda items, args: items.upper())
    html = hooks.apply_filters("f9_image_slider_items", html, args)

    hooks.add_action("init", plugin.init, priority=0)
    hooks.do_action("init")
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from .log import logger

DEFAULT_PRIORITY = 10


@dataclass
class HookCallback:
    """One registered callback."""
    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    sequence: int = 0


@dataclass
class HookBus:
    """Ordered callback registry for filters and actions."""
    _hooks: dict = field(default_factory=dict)
    _actions_run: dict = field(default_factory=dict)
    _sequence: int = 0

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY):
        """Register callback on hook name."""
        self._sequence += 1
        entries = self._hooks.setdefault(name, [])
        entries.append(HookCallback(callback, priority, self._sequence))
        entries.sort(key=lambda entry: (entry.priority, entry.sequence))
        return True

    add_action = add_filter

    def remove_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> bool:
        """Remove the first registration of callback at priority. Returns True if removed."""
        entries = self._hooks.get(name, [])
        for index, entry in enumerate(entries):
            if entry.callback == callback and entry.priority == priority:
                del entries[index]
                if not entries:
                    del self._hooks[name]
                return True
        return False

    remove_action = remove_filter

    def remove_all(self, name: str):
        self._hooks.pop(name, None)

    def has_filter(self, name: str, callback: Callable[..., Any] = None) -> bool:
        """Whether anything (or the given callback) is registered on name."""
        entries = self._hooks.get(name, [])
        if callback is None:
            return bool(entries)
        return any(entry.callback == callback for entry in entries)

    has_action = has_filter

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Pass value through every callback registered on name."""
        # Snapshot so callbacks may (un)register hooks while running
        for entry in list(self._hooks.get(name, [])):
            value = entry.callback(value, *args)
        return value

    def do_action(self, name: str, *args: Any):
        """Call every callback registered on name."""
        self._actions_run[name] = self._actions_run.get(name, 0) + 1
        entries = list(self._hooks.get(name, []))
        if entries:
            logger.debug(f"Action {name}: {len(entries)} callback(s)")
        for entry in entries:
            entry.callback(*args)

    def did_action(self, name: str) -> int:
        """Number of times do_action(name) has run."""
        return self._actions_run.get(name, 0)


__all__ = [
    'DEFAULT_PRIORITY',
    'HookCallback',
    'HookBus',
]

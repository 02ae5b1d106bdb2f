"""
Configuration loading utilities.

JSON configuration with deep merge over application defaults. The slider
library ships its defaults in f9slider.app_config.DEFAULT_CONFIG; a site
overrides only the keys it cares about.

Usage:
    from aide_frame.config import load_config
    from f9slider.app_config import DEFAULT_CONFIG

    config = load_config("f9slider.json", defaults=DEFAULT_CONFIG)

    # First existing file wins
    config = load_config(defaults=DEFAULT_CONFIG, search_paths=[
        "/etc/f9slider/config.json",
        "~/.f9slider.json",
    ])
"""

import copy
import json
import os

from .log import logger


def deep_merge(base, override):
    """
    Recursively merge override into base.

    Args:
        base: Base dictionary (modified in place)
        override: Dictionary with override values

    Returns:
        The merged base dictionary
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path=None, defaults=None, search_paths=None):
    """
    Load configuration from a JSON file, merging it over defaults.

    Args:
        config_path: Direct path to config file (takes precedence)
        defaults: Default configuration dictionary (never modified)
        search_paths: List of paths to try after config_path

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(defaults) if defaults else {}

    paths_to_try = []
    if config_path:
        paths_to_try.append(config_path)
    if search_paths:
        paths_to_try.extend(search_paths)
    paths_to_try = [os.path.expanduser(p) for p in paths_to_try]

    for path in paths_to_try:
        if not os.path.exists(path):
            continue
        try:
            with open(path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Config parse error in {path}: {e}")
            continue
        except OSError as e:
            logger.warning(f"Config read error in {path}: {e}")
            continue
        if not isinstance(user_config, dict):
            logger.warning(f"Config in {path} is not an object, ignored")
            continue
        deep_merge(config, user_config)
        logger.debug(f"Loaded config from {path}")
        return config

    if paths_to_try:
        logger.debug("No config file found, using defaults")
    return config


def save_config(config, config_path, indent=2):
    """
    Save configuration to a JSON file.

    Returns:
        True on success, False on error
    """
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=indent)
        return True
    except OSError as e:
        logger.error(f"Config save error: {e}")
        return False

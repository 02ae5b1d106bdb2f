"""
Configuration defaults for the slider plugin.

Sites override any of these in a JSON file loaded with
aide_frame.config.load_config(path, defaults=DEFAULT_CONFIG).
"""

DEFAULT_CONFIG = {
    "text_domain": "f9slider",
    "log_level": "INFO",

    # Site-wide language directory; None uses aide_frame.paths.GLOBAL_LANG_DIR
    "lang_dir": None,

    # Tags render() accepts as container, before the allowedtags filter
    "container_tags": ["div", "nav"],

    # Theme slider locations registered at startup: {"slug": "Label"}
    "locations": {},
    # Slider assigned to each location: {"slug": slider id, slug or name}
    "location_assignments": {},

    # Update checks (admin requests only)
    "update": {
        "enabled": True,
        "source": {
            "repo": "fervidum/f9slider",
            "branch": "main",
            "version_path": "app/f9slider/VERSION"
        },
        "timeout": 10
    }
}

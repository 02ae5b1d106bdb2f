"""
Plugin bootstrap.

F9slider wires the slider components together and into the host's hooks.
Build one per application at startup and pass it where it is needed:

    from aide_frame.hooks import HookBus
    from f9slider.context import RequestContext
    from f9slider.plugin import F9slider

    hooks = HookBus()
    plugin = F9slider(hooks, RequestContext(locale="de_DE"))
    hooks.do_action('init')

    plugin.register_image_sliders({"header": "Header slider"})
    html = plugin.f9_image_slider(theme_location="header", echo=False)
"""

import copy
import os

from aide_frame import paths
from aide_frame.hooks import HookBus
from aide_frame.log import logger

from .app_config import DEFAULT_CONFIG
from .context import RequestContext
from .i18n import TextDomains
from .locations import LocationRegistry
from .render import SliderRenderer
from .resolver import get_image_slider_object
from .store import SliderStore


class F9slider:
    """
    Main plugin object.

    Args:
        hooks: HookBus shared with the host (a private one is created if None)
        context: RequestContext of the current request
        config: Configuration dict, merged over DEFAULT_CONFIG by the caller
        store: SliderStore with the site's sliders
        output: Stream echoed sliders are written to
    """

    def __init__(self, hooks=None, context=None, config=None, store=None, output=None):
        paths.ensure_initialized()
        self.hooks = hooks if hooks is not None else HookBus()
        self.context = context or RequestContext()
        self.config = config if config is not None else copy.deepcopy(DEFAULT_CONFIG)
        self.plugin_file = paths.PLUGIN_FILE
        self.plugin_dir = paths.PLUGIN_DIR

        self.store = store if store is not None else SliderStore()
        self.locations = LocationRegistry()
        self.textdomains = TextDomains()
        self.renderer = SliderRenderer(
            self.store,
            self.locations,
            self.hooks,
            context=self.context,
            output=output,
            container_tags=self.config.get("container_tags"),
        )
        self.admin = None

        if self.config.get("locations"):
            self.locations.register(self.config["locations"])
        for location, slider in self.config.get("location_assignments", {}).items():
            self.locations.assign(location, slider)

        self.includes()
        self.init_hooks()

    def init_hooks(self):
        """Hook into actions and filters."""
        self.hooks.add_action('init', self.init, priority=0)

    def is_request(self, request_type) -> bool:
        """
        What type of request is this?

        Args:
            request_type: 'admin', 'ajax', 'cron' or 'frontend'
        """
        ctx = self.context
        if request_type == 'admin':
            return ctx.is_admin
        if request_type == 'ajax':
            return ctx.doing_ajax
        if request_type == 'cron':
            return ctx.doing_cron
        if request_type == 'frontend':
            return (not ctx.is_admin or ctx.doing_ajax) and not ctx.doing_cron
        return False

    def includes(self):
        """Load the components needed for this kind of request."""
        if self.is_request('admin'):
            from .admin import SliderAdmin
            self.admin = SliderAdmin(self)

    def init(self):
        """Run when the host initialises."""
        self.hooks.do_action('before_f9slider_init')
        self.load_plugin_textdomain()
        self.hooks.do_action('f9slider_init')

    def load_plugin_textdomain(self):
        """
        Load localisation files.

        The first-loaded file overrides the following ones for strings both
        translate. Locales are looked up in:
            - <lang_dir>/f9slider/f9slider-LOCALE.mo
            - <plugin_dir>/languages/f9slider-LOCALE.mo

        Returns:
            Number of files loaded
        """
        domain = self.config.get("text_domain", "f9slider")
        locale = self.hooks.apply_filters('plugin_locale', self.context.determine_locale(), domain)
        lang_dir = self.config.get("lang_dir") or paths.GLOBAL_LANG_DIR

        self.textdomains.unload(domain)
        candidates = [
            os.path.join(lang_dir, domain, f"{domain}-{locale}.mo"),
            os.path.join(self.plugin_dir, "languages", f"{domain}-{locale}.mo"),
        ]
        loaded = sum(1 for mofile in candidates if self.textdomains.load(domain, mofile))
        if not loaded:
            logger.debug(f"No translations for {domain} in locale {locale}")
        return loaded

    def translate(self, text):
        """Translate text in the plugin's text domain."""
        return self.textdomains.translate(self.config.get("text_domain", "f9slider"), text)

    # Public API

    def register_image_sliders(self, locations=None):
        self.locations.register(locations)

    def unregister_image_sliders(self, location):
        return self.locations.unregister(location)

    def get_image_sliders_locations(self):
        return self.locations.assigned()

    def get_image_slider_object(self, slider):
        return get_image_slider_object(slider, self.store, self.hooks)

    def f9_image_slider(self, args=None, **kwargs):
        return self.renderer.render(args, **kwargs)

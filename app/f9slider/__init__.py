"""
F9slider - Image slider menus.

Plugin Name: F9slider
Description: Image slider menus with theme locations and extension hooks
Version: 1.0.0alpha1
Author: Fervidum
Text Domain: f9slider
Domain Path: /languages/

Sliders are stored as terms with an ordered, optionally nested list of
items. Themes register slider locations; render() resolves the slider for a
location (or an explicit id, slug or name) and emits its list markup through
a chain of extension hooks.

Usage:
    from f9slider import F9slider, SliderStore

    store = SliderStore.from_file("sliders.json")
    plugin = F9slider(store=store)
    plugin.hooks.do_action('init')
    print(plugin.f9_image_slider(menu="home-slider", echo=False))
"""

from .store import Slider, SliderItem, SliderLookupError, SliderStore, slugify
from .locations import LocationRegistry, ThemeFeatures
from .context import RequestContext
from .resolver import get_image_slider_object
from .walker import SliderWalker, walk_image_sliders_tree
from .render import DEFAULT_ARGS, SliderRenderer
from .i18n import TextDomains
from .plugin import F9slider

__version__ = "1.0.0a1"

__all__ = [
    'Slider',
    'SliderItem',
    'SliderLookupError',
    'SliderStore',
    'slugify',
    'LocationRegistry',
    'ThemeFeatures',
    'RequestContext',
    'get_image_slider_object',
    'SliderWalker',
    'walk_image_sliders_tree',
    'DEFAULT_ARGS',
    'SliderRenderer',
    'TextDomains',
    'F9slider',
]

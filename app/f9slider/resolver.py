"""
Resolve a slider reference to a stored slider.
"""

from aide_frame.log import logger

from .store import Slider, SliderLookupError


def get_image_slider_object(slider, store, hooks):
    """
    Return a slider object.

    Args:
        slider: Slider id, slug, name, or an already resolved Slider
        store: SliderStore to look the reference up in
        hooks: HookBus; the result passes through 'wp_get_image_slider_object'

    Returns:
        Slider, or None if the reference is empty or nothing matched
    """
    slider_obj = None

    if isinstance(slider, Slider):
        slider_obj = slider

    if slider and slider_obj is None:
        try:
            slider_obj = store.get_term(slider)
            if slider_obj is None:
                slider_obj = store.get_term_by('slug', slider)
            if slider_obj is None:
                slider_obj = store.get_term_by('name', slider)
        except SliderLookupError as e:
            logger.debug(f"Slider lookup for {slider!r} failed: {e}")
            slider_obj = None

    if slider_obj is None and slider:
        logger.debug(f"No slider matches {slider!r}")

    return hooks.apply_filters('wp_get_image_slider_object', slider_obj, slider)

"""
Slider rendering.

SliderRenderer.render() is the public entry point: it resolves the requested
slider, collects and orders its items, walks them into list markup, wraps the
markup and runs it through the extension hooks:

    f9_image_slider_args                  (args dict)
    pre_f9_image_slider                   (None, args) - non-None short-circuits
    f9_image_slider_container_allowedtags (['div', 'nav'])
    f9_image_slider_objects               (sorted items, args)
    f9_image_slider_items                 (items html, args)
    f9_image_slider_{slug}_items          (items html, args)
    f9_image_slider                       (final html, args)
"""

import re
import sys
from html import escape
from types import SimpleNamespace

from aide_frame.log import logger

from .classes import assign_item_classes
from .context import RequestContext
from .resolver import get_image_slider_object
from .walker import walk_image_sliders_tree

ITEM_SPACING = ('preserve', 'discard')

DEFAULT_ARGS = {
    'menu': '',
    'container': 'div',
    'container_class': '',
    'container_id': '',
    'menu_class': 'menu',
    'menu_id': '',
    'echo': True,
    'fallback_cb': None,
    'before': '',
    'after': '',
    'link_before': '',
    'link_after': '',
    'items_wrap': '<ul id="{0}" class="{1}">{2}</ul>',
    'item_spacing': 'preserve',
    'depth': 0,
    'walker': None,
    'theme_location': '',
    'image_dir': None,
}

DEFAULT_CONTAINER_TAGS = ['div', 'nav']

_TRAILING_NUMBER = re.compile(r'-(\d+)$')


def _esc_attr(value) -> str:
    return escape(str(value), quote=True)


class SliderRenderer:
    """
    Renders sliders from a store.

    Args:
        store: SliderStore holding sliders and items
        locations: LocationRegistry for theme_location lookups
        hooks: HookBus carrying the extension points
        context: RequestContext used for "current item" classes
        output: Stream echoed output is written to (default sys.stdout)
        container_tags: Default allowed container tags, before filtering
    """

    def __init__(self, store, locations, hooks, context=None, output=None, container_tags=None):
        self.store = store
        self.locations = locations
        self.hooks = hooks
        self.context = context or RequestContext()
        self.output = output
        self.container_tags = list(container_tags or DEFAULT_CONTAINER_TAGS)
        # Wrap ids handed out so far; ids stay unique for this renderer's lifetime
        self._wrap_ids = []

    def _echo(self, html):
        stream = self.output if self.output is not None else sys.stdout
        stream.write(html)

    def _items_for(self, slider):
        return self.store.get_items(slider.term_id)

    def _unique_wrap_id(self, slug):
        wrap_id = f'menu-{slug}'
        while wrap_id in self._wrap_ids:
            match = _TRAILING_NUMBER.search(wrap_id)
            if match:
                wrap_id = _TRAILING_NUMBER.sub(f'-{int(match.group(1)) + 1}', wrap_id)
            else:
                wrap_id = f'{wrap_id}-1'
        return wrap_id

    def render(self, args=None, **kwargs):
        """
        Render a slider.

        Args are given as a dict and/or keyword arguments; see DEFAULT_ARGS.

        Returns:
            The markup when echo is False; None after echoing; False when
            there is nothing to show (no slider, no items); the fallback's
            return value when the fallback runs.
        """
        merged = dict(DEFAULT_ARGS)
        merged.update(args or {})
        merged.update(kwargs)

        if merged['item_spacing'] not in ITEM_SPACING:
            merged['item_spacing'] = DEFAULT_ARGS['item_spacing']

        merged = self.hooks.apply_filters('f9_image_slider_args', merged)
        args = SimpleNamespace(**merged)
        if args.image_dir is None:
            args.image_dir = self.store.base_dir

        pre_output = self.hooks.apply_filters('pre_f9_image_slider', None, args)
        if pre_output is not None:
            if args.echo:
                self._echo(pre_output)
                return None
            return pre_output

        slider = get_image_slider_object(args.menu, self.store, self.hooks)
        slider_items = None

        if not slider and args.theme_location:
            assigned = self.locations.assigned()
            if args.theme_location in assigned:
                slider = get_image_slider_object(assigned[args.theme_location], self.store, self.hooks)

        # First slider that has items
        if not slider and not args.theme_location:
            for slider_maybe in self.store.get_sliders():
                slider_items = self._items_for(slider_maybe)
                if slider_items:
                    slider = slider_maybe
                    break

        if not args.menu:
            args.menu = slider

        if slider and slider_items is None:
            slider_items = self._items_for(slider)

        if not slider or (slider_items is not None and not slider_items and not args.theme_location):
            if args.fallback_cb and callable(args.fallback_cb):
                logger.debug("No slider to show, running fallback")
                return args.fallback_cb(dict(vars(args)))

        if not slider:
            logger.debug("No slider found")
            return False

        html = ''

        show_container = False
        if args.container:
            allowed_tags = self.hooks.apply_filters(
                'f9_image_slider_container_allowedtags', list(self.container_tags))
            if isinstance(args.container, str) and args.container in allowed_tags:
                show_container = True
                if args.container_class:
                    css_class = f' class="{_esc_attr(args.container_class)}"'
                else:
                    css_class = f' class="menu-{slider.slug}-container"'
                container_id = f' id="{_esc_attr(args.container_id)}"' if args.container_id else ''
                html += f'<{args.container}{container_id}{css_class}>'

        assign_item_classes(slider_items, self.context)

        sorted_items = {}
        items_with_children = set()
        for item in slider_items:
            sorted_items[item.menu_order] = item
            if item.menu_item_parent:
                items_with_children.add(item.menu_item_parent)
        sorted_items = [sorted_items[order] for order in sorted(sorted_items)]

        for item in sorted_items:
            if item.db_id in items_with_children and 'menu-item-has-children' not in item.classes:
                item.classes.append('menu-item-has-children')

        sorted_items = self.hooks.apply_filters('f9_image_slider_objects', sorted_items, args)

        items = walk_image_sliders_tree(sorted_items, args.depth, args)

        wrap_id = args.menu_id if args.menu_id else self._unique_wrap_id(slider.slug)
        self._wrap_ids.append(wrap_id)

        wrap_class = args.menu_class or ''

        items = self.hooks.apply_filters('f9_image_slider_items', items, args)
        items = self.hooks.apply_filters(f'f9_image_slider_{slider.slug}_items', items, args)

        # No markup at all without items
        if not items:
            logger.debug(f"Slider {slider.slug!r} rendered no items")
            return False

        html += args.items_wrap.format(_esc_attr(wrap_id), _esc_attr(wrap_class), items)

        if show_container:
            html += f'</{args.container}>'

        html = self.hooks.apply_filters('f9_image_slider', html, args)

        if args.echo:
            self._echo(html)
            return None
        return html


__all__ = [
    'DEFAULT_ARGS',
    'DEFAULT_CONTAINER_TAGS',
    'ITEM_SPACING',
    'SliderRenderer',
]

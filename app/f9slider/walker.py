"""
Slider tree walker.

Turns a flat, ordered list of slider items into nested list markup. Items
point at their parent through menu_item_parent; the walker groups children
under their parent and emits one <li> per item, with a <ul class="sub-menu">
for each level of children.

Depth:
    -1  flat list, hierarchy ignored
     0  all levels
     n  at most n levels
"""

from html import escape

from . import images


def _attr(value) -> str:
    return escape(str(value), quote=True)


class SliderWalker:
    """Default walker; subclass and override the *_el/*_lvl methods to change markup."""

    parent_field = 'menu_item_parent'

    def walk(self, elements, max_depth, args):
        """Render elements (ordered list of SliderItem) as list markup."""
        output = []
        elements = list(elements)
        if max_depth < -1 or not elements:
            return ''

        if max_depth == -1:
            for element in elements:
                self.display_element(element, {}, 1, 0, args, output)
            return ''.join(output)

        top_level, children = self._group(elements, root=0)

        # No item hangs off the root: treat the first item's parent as root
        if not top_level:
            top_level, children = self._group(elements, root=self._parent(elements[0]))

        for element in top_level:
            self.display_element(element, children, max_depth, 0, args, output)

        # Children whose parent was never displayed
        if max_depth == 0 and children:
            for orphans in list(children.values()):
                for orphan in orphans:
                    self.display_element(orphan, {}, 1, 0, args, output)

        return ''.join(output)

    def _parent(self, element):
        return getattr(element, self.parent_field, 0) or 0

    def _group(self, elements, root):
        top_level = []
        children = {}
        for element in elements:
            parent = self._parent(element)
            if parent == root:
                top_level.append(element)
            else:
                children.setdefault(parent, []).append(element)
        return top_level, children

    def display_element(self, element, children, max_depth, depth, args, output):
        element_id = element.db_id
        self.start_el(output, element, depth, args)

        new_level = False
        if (max_depth == 0 or max_depth > depth + 1) and element_id in children:
            for child in children[element_id]:
                if not new_level:
                    new_level = True
                    self.start_lvl(output, depth, args)
                self.display_element(child, children, max_depth, depth + 1, args, output)
            del children[element_id]

        if new_level:
            self.end_lvl(output, depth, args)
        self.end_el(output, element, depth, args)

    @staticmethod
    def _spacing(args):
        if getattr(args, 'item_spacing', 'preserve') == 'discard':
            return '', ''
        return '\t', '\n'

    def start_lvl(self, output, depth, args):
        t, n = self._spacing(args)
        indent = t * depth
        output.append(f'{n}{indent}<ul class="sub-menu">{n}')

    def end_lvl(self, output, depth, args):
        t, n = self._spacing(args)
        indent = t * depth
        output.append(f'{indent}</ul>{n}')

    def start_el(self, output, item, depth, args):
        t, _ = self._spacing(args)
        indent = t * depth if depth else ''

        classes = [c for c in list(item.classes) + [f'menu-item-{item.db_id}'] if c]
        class_names = f' class="{_attr(" ".join(classes))}"' if classes else ''
        item_id = f' id="menu-item-{item.db_id}"'

        output.append(f'{indent}<li{item_id}{class_names}>')

        atts = {
            'title': item.attr_title,
            'target': item.target,
            'rel': item.xfn,
            'href': item.url,
        }
        attributes = ''.join(f' {name}="{_attr(value)}"' for name, value in atts.items() if value)

        output.append(
            getattr(args, 'before', '')
            + f'<a{attributes}>'
            + getattr(args, 'link_before', '')
            + self.image_markup(item, getattr(args, 'image_dir', None))
            + escape(str(item.title))
            + getattr(args, 'link_after', '')
            + '</a>'
            + getattr(args, 'after', '')
        )

    def end_el(self, output, item, depth, args):
        _, n = self._spacing(args)
        output.append(f'</li>{n}')

    def image_markup(self, item, image_dir=None):
        """<img> for the item's slide image, sized when the file is local.

        Relative image paths are taken from image_dir, or PLUGIN_DIR when unset.
        """
        if not item.image:
            return ''
        size = ''
        if images.is_local_image(item.image):
            dimensions = images.image_size(images.resolve_image_path(item.image, image_dir))
            if dimensions:
                size = f' width="{dimensions[0]}" height="{dimensions[1]}"'
        alt = item.attr_title or item.title
        return f'<img src="{_attr(item.image)}" alt="{_attr(alt)}"{size} />'


def walk_image_sliders_tree(items, depth, args):
    """Walk items with args.walker, or the default SliderWalker."""
    walker = getattr(args, 'walker', None) or SliderWalker()
    return walker.walk(items, depth, args)

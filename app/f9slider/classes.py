"""
Item CSS classes derived from the current request.
"""


def _add_class(item, css_class):
    if css_class not in item.classes:
        item.classes.append(css_class)


def _normalize_url(url):
    return url.rstrip('/') if url not in ('', '/') else url


def assign_item_classes(items, context):
    """
    Add structural and "current" classes to slider items in place.

    Every item gets 'menu-item', 'menu-item-type-{type}' and
    'menu-item-object-{object}'. The item linking to the current URL gets
    'current-menu-item'; its ancestors get 'current-menu-ancestor' and its
    direct parent also 'current-menu-parent'.
    """
    by_id = {item.db_id: item for item in items}
    current_url = _normalize_url(context.current_url) if context and context.current_url else None

    for item in items:
        _add_class(item, 'menu-item')
        _add_class(item, f'menu-item-type-{item.type}')
        _add_class(item, f'menu-item-object-{item.object}')

        if current_url is not None and item.url and _normalize_url(item.url) == current_url:
            item.current = True
            _add_class(item, 'current-menu-item')

    for item in items:
        if not item.current:
            continue
        parent_id = item.menu_item_parent
        seen = set()
        while parent_id and parent_id in by_id and parent_id not in seen:
            seen.add(parent_id)
            parent = by_id[parent_id]
            parent.current_item_ancestor = True
            _add_class(parent, 'current-menu-ancestor')
            if parent_id == item.menu_item_parent:
                parent.current_item_parent = True
                _add_class(parent, 'current-menu-parent')
            parent_id = parent.menu_item_parent

    return items

"""
Slider storage.

Sliders are taxonomy-style terms; each slider owns an ordered, optionally
hierarchical list of items. The store is an in-memory table that can be
loaded from a JSON document:

    {
        "sliders": [
            {"term_id": 2, "name": "Home Slider", "slug": "home-slider"}
        ],
        "items": [
            {"db_id": 10, "slider": 2, "menu_order": 1, "title": "Welcome",
             "url": "/", "image": "img/welcome.jpg"},
            {"db_id": 11, "slider": 2, "menu_order": 2, "menu_item_parent": 10,
             "title": "Tour", "url": "/tour"}
        ]
    }
"""

import copy
import json
import os
import re
import unicodedata
from dataclasses import dataclass, field, fields
from typing import Optional

from aide_frame.log import logger

TAXONOMY = "image_slider"

# Item fields rendered as text
TEXT_FIELDS = ("title", "url", "type", "object", "target", "attr_title", "xfn", "description", "image")


class SliderLookupError(LookupError):
    """A term lookup could not be performed (bad field, bad value)."""


def slugify(text) -> str:
    """Lower-case ASCII slug: 'Home Slider!' -> 'home-slider'."""
    text = unicodedata.normalize('NFKD', str(text)).encode('ascii', 'ignore').decode('ascii')
    return re.sub(r'[^a-z0-9]+', '-', text.lower()).strip('-')


@dataclass
class Slider:
    term_id: int
    name: str
    slug: str = ""
    taxonomy: str = TAXONOMY
    description: str = ""
    count: int = 0

    def __post_init__(self):
        if not self.slug:
            self.slug = slugify(self.name)


@dataclass
class SliderItem:
    db_id: int
    menu_order: int = 0
    menu_item_parent: int = 0
    title: str = ""
    url: str = ""
    classes: list = field(default_factory=list)
    type: str = "custom"
    object: str = "custom"
    object_id: int = 0
    target: str = ""
    attr_title: str = ""
    xfn: str = ""
    description: str = ""
    image: str = ""
    current: bool = False
    current_item_ancestor: bool = False
    current_item_parent: bool = False

    @property
    def ID(self):
        return self.db_id

    @classmethod
    def from_dict(cls, data):
        """Build an item from a mapping, ignoring keys the item does not know."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for key in TEXT_FIELDS:
            if key in values:
                values[key] = "" if values[key] is None else str(values[key])
        values["classes"] = [str(c) for c in values.get("classes") or []]
        return cls(**values)


class SliderStore:
    """In-memory slider and item table."""

    def __init__(self, base_dir=None):
        self._sliders = {}
        self._items = {}
        # Directory relative slide images are taken from
        self.base_dir = base_dir

    def add_slider(self, name, slug="", term_id=None, description="") -> Slider:
        if term_id is None:
            term_id = max(self._sliders, default=0) + 1
        slider = Slider(term_id=int(term_id), name=name, slug=slug, description=description)
        self._sliders[slider.term_id] = slider
        self._items.setdefault(slider.term_id, [])
        return slider

    def add_item(self, slider, item) -> SliderItem:
        """Attach an item (SliderItem or mapping) to a slider id or Slider."""
        term_id = slider.term_id if isinstance(slider, Slider) else int(slider)
        if term_id not in self._sliders:
            raise SliderLookupError(f"Unknown slider id {term_id}")
        if not isinstance(item, SliderItem):
            item = SliderItem.from_dict(item)
        self._items[term_id].append(item)
        self._sliders[term_id].count = len(self._items[term_id])
        return item

    def get_term(self, term_id) -> Optional[Slider]:
        """Slider by numeric id. Non-numeric ids simply do not match."""
        if isinstance(term_id, bool):
            return None
        if isinstance(term_id, float) and not term_id.is_integer():
            return None
        try:
            return self._sliders.get(int(term_id))
        except (TypeError, ValueError):
            return None

    def get_term_by(self, field_name, value) -> Optional[Slider]:
        """Slider by 'id', 'slug' or 'name'."""
        if field_name == 'id':
            return self.get_term(value)
        if not isinstance(value, (str, int)) or isinstance(value, bool):
            raise SliderLookupError(f"Cannot look up sliders by {type(value).__name__}")
        if field_name == 'slug':
            wanted = slugify(value)
            return next((s for s in self._sliders.values() if s.slug == wanted), None)
        if field_name == 'name':
            wanted = str(value)
            return next((s for s in self._sliders.values() if s.name == wanted), None)
        raise SliderLookupError(f"Unknown lookup field {field_name!r}")

    def get_sliders(self) -> list:
        """All sliders ordered by name."""
        return sorted(self._sliders.values(), key=lambda s: (s.name.lower(), s.term_id))

    def get_items(self, term_id) -> list:
        """Copies of a slider's items ordered by menu_order."""
        items = self._items.get(term_id, [])
        return [copy.deepcopy(item) for item in sorted(items, key=lambda item: item.menu_order)]

    def load(self, data):
        """Load sliders and items from a JSON-shaped mapping."""
        for entry in data.get("sliders", []):
            self.add_slider(
                entry["name"],
                slug=entry.get("slug", ""),
                term_id=entry.get("term_id"),
                description=entry.get("description", ""),
            )
        for entry in data.get("items", []):
            entry = dict(entry)
            slider_id = entry.pop("slider")
            self.add_item(slider_id, entry)
        logger.debug(f"Loaded {len(self._sliders)} slider(s)")
        return self

    @classmethod
    def from_file(cls, path):
        """Load a JSON slider file; relative images resolve next to it."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls(base_dir=os.path.dirname(os.path.abspath(path))).load(data)


__all__ = [
    'TAXONOMY',
    'SliderLookupError',
    'slugify',
    'Slider',
    'SliderItem',
    'SliderStore',
]

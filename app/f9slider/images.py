"""
Slide image metadata.

Reads the pixel size of local slide images so the markup can carry width and
height attributes. Remote images (http, https, protocol-relative, data URIs)
are not opened.
"""

import os

from PIL import Image, UnidentifiedImageError

from aide_frame import paths
from aide_frame.log import logger

REMOTE_PREFIXES = ('http://', 'https://', '//', 'data:')


def is_local_image(src) -> bool:
    return bool(src) and not src.lower().startswith(REMOTE_PREFIXES)


def resolve_image_path(src, base_dir=None):
    """Absolute path of a local image; relative paths are taken from base_dir or PLUGIN_DIR."""
    if os.path.isabs(src):
        return src
    if base_dir is None:
        paths.ensure_initialized()
        base_dir = paths.PLUGIN_DIR
    return os.path.join(base_dir, src)


# Sizes of images read so far; failed reads are retried
_sizes = {}


def image_size(path):
    """
    Pixel size of an image file.

    Returns:
        (width, height), or None if the file is missing or not an image
    """
    if path in _sizes:
        return _sizes[path]
    try:
        with Image.open(path) as img:
            size = img.size
    except (OSError, UnidentifiedImageError) as e:
        logger.debug(f"Cannot read image size of {path}: {e}")
        return None
    _sizes[path] = size
    return size

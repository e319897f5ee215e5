"""
Module: images

Purpose:
    Image access helpers. The playlist pipeline never renders pixels;
    images are only opened to infer missing dimensions.

Key Functions:
    - probe_dimensions(): Read (width, height) from an image header
    - resolve_image_path(): Image reference -> local file

Dependencies:
    - PIL: Image header parsing
"""

from .probe import probe_dimensions, resolve_image_path, ImageNotFoundError

__all__ = [
    "probe_dimensions",
    "resolve_image_path",
    "ImageNotFoundError",
]

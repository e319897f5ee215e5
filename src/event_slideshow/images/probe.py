"""
Module: images.probe

Purpose:
    Infer pixel dimensions for submissions stored without them by reading
    the image header with Pillow. Only the header is read; pixels are
    never decoded.

Key Functions:
    - probe_dimensions(): (width, height) of an image file as displayed
    - resolve_image_path(): Map an image reference to a local file

Key Classes:
    - ImageNotFoundError: Image missing or unreadable

Dependencies:
    - PIL: Image header parsing, EXIF orientation

Used By:
    - loading.loader: Optional dimension inference
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import urlparse

from PIL import Image, ExifTags, UnidentifiedImageError

logger = logging.getLogger(__name__)

# EXIF orientations that rotate the image by 90 or 270 degrees.
_TRANSPOSED_ORIENTATIONS = {5, 6, 7, 8}


class ImageNotFoundError(Exception):
    """Image file missing or not a readable image."""
    pass


def probe_dimensions(path: Path) -> Tuple[int, int]:
    """
    Get (width, height) of an image as it will be displayed.

    Phone cameras often store portrait photos as landscape pixels plus an
    EXIF rotation; width and height are swapped for those.

    Args:
        path: Image file path

    Returns:
        Tuple of (width, height) in pixels

    Raises:
        ImageNotFoundError: If the file is missing or unreadable
    """
    path = Path(path)
    if not path.is_file():
        raise ImageNotFoundError(f"Image not found: {path}")

    try:
        with Image.open(path) as img:
            width, height = img.size
            orientation = img.getexif().get(ExifTags.Base.Orientation)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageNotFoundError(f"Cannot read image {path}: {e}") from e

    if orientation in _TRANSPOSED_ORIENTATIONS:
        logger.debug(f"{path.name}: EXIF orientation {orientation}, swapping dimensions")
        width, height = height, width
    return width, height


def resolve_image_path(image_url: str, image_root: Optional[Path]) -> Optional[Path]:
    """
    Map an image reference to a file under image_root.

    Remote references (http, https, s3, ...) cannot be probed locally.

    Returns:
        Local path, or None when the reference is remote or no root is set
    """
    if not image_url or image_root is None:
        return None
    parsed = urlparse(image_url)
    if parsed.scheme not in ("", "file"):
        return None
    return Path(image_root) / parsed.path.lstrip("/")

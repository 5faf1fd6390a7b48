"""Scaling images into fixed-size thumbnails.

A thumbnail is always exactly ``width`` x ``height`` pixels. The source is
scaled down to fit the box (never up) and centered on a transparent canvas.

Example:
    >>> png = create_thumbnail(Path("logo.jpg").read_bytes(), 64, 64)
"""
from __future__ import annotations

import io
import logging
from typing import BinaryIO, Optional, Tuple, Union

from PIL import Image

from .resources import get_embedded_resource_bytes

logger = logging.getLogger(__name__)

DEFAULT_THUMBNAIL_WIDTH = 128
DEFAULT_THUMBNAIL_HEIGHT = 128
DEFAULT_ICON_RESOURCE = "image_default_icon.png"
THUMBNAIL_FORMAT = "PNG"

ImageSource = Union[bytes, bytearray, BinaryIO]


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Thumbnail size must be positive, got {width}x{height}")


def _scaled_size(source_size: Tuple[int, int], width: int, height: int) -> Tuple[int, int]:
    src_width, src_height = source_size
    scale = min(1.0, width / src_width, height / src_height)
    return max(1, int(src_width * scale)), max(1, int(src_height * scale))


def thumbnail(source: Optional[Image.Image], width: int, height: int) -> Image.Image:
    """Return a new RGBA image of ``width`` x ``height`` holding ``source`` centered.

    Raises:
        ValueError: If ``source`` is None or a dimension is not positive
    """
    if source is None:
        raise ValueError("source image must not be None")
    _check_size(width, height)

    image = source if source.mode == "RGBA" else source.convert("RGBA")
    size = _scaled_size(image.size, width, height)
    if size != image.size:
        image = image.resize(size, Image.Resampling.LANCZOS)

    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    canvas.alpha_composite(image, dest=((width - size[0]) // 2, (height - size[1]) // 2))
    return canvas


def write_thumbnail(
    output: BinaryIO,
    source: Optional[Image.Image],
    width: int,
    height: int,
    image_format: str = THUMBNAIL_FORMAT,
) -> None:
    """Write the thumbnail of ``source`` to ``output`` encoded as ``image_format``."""
    thumbnail(source, width, height).save(output, format=image_format)


def default_icon() -> bytes:
    """PNG bytes of the bundled placeholder shown for undecodable images."""
    return get_embedded_resource_bytes(DEFAULT_ICON_RESOURCE)


def create_thumbnail(
    contents: Optional[ImageSource],
    width: int = DEFAULT_THUMBNAIL_WIDTH,
    height: int = DEFAULT_THUMBNAIL_HEIGHT,
) -> bytes:
    """PNG thumbnail of encoded image ``contents`` (bytes or a binary stream).

    Content that cannot be decoded yields :func:`default_icon` instead of
    an error.

    Raises:
        ValueError: If ``contents`` is None or a dimension is not positive
    """
    if contents is None:
        raise ValueError("contents must not be None")
    _check_size(width, height)

    stream = io.BytesIO(contents) if isinstance(contents, (bytes, bytearray)) else contents
    try:
        with Image.open(stream) as source:
            source.load()
            out = io.BytesIO()
            write_thumbnail(out, source, width, height)
            return out.getvalue()
    except (OSError, Image.DecompressionBombError) as exc:
        logger.warning("Could not create thumbnail, using default icon: %s", exc)
        return default_icon()


__all__ = [
    "DEFAULT_THUMBNAIL_HEIGHT",
    "DEFAULT_THUMBNAIL_WIDTH",
    "create_thumbnail",
    "default_icon",
    "thumbnail",
    "write_thumbnail",
]

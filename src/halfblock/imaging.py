import io
import math
from enum import Enum
from pathlib import Path

from PIL import Image, ImageFilter, UnidentifiedImageError


class DecodeError(ValueError):
    """Input could not be decoded as a supported image."""


class FilterKind(Enum):
    NEAREST = "nearest"
    TRIANGLE = "triangle"
    GAUSSIAN = "gaussian"
    CATMULL_ROM = "catmull-rom"
    LANCZOS = "lanczos"


# Pillow's bicubic uses a = -0.5, which is the Catmull-Rom spline
_RESAMPLING = {
    FilterKind.NEAREST: Image.Resampling.NEAREST,
    FilterKind.TRIANGLE: Image.Resampling.BILINEAR,
    FilterKind.GAUSSIAN: Image.Resampling.BILINEAR,
    FilterKind.CATMULL_ROM: Image.Resampling.BICUBIC,
    FilterKind.LANCZOS: Image.Resampling.LANCZOS,
}


def decode(source: bytes | str | Path, format: str | None = None) -> Image.Image:
    """Decode raw bytes or an image file into an RGBA image at native resolution.

    ``format`` restricts decoding to a single Pillow format name such as "PNG".
    Raises DecodeError for data Pillow cannot identify or read.
    """
    formats = None
    if format is not None:
        Image.init()
        if format.upper() not in Image.OPEN:
            raise DecodeError(f"Unsupported image format: {format}")
        formats = [format.upper()]

    fp = io.BytesIO(source) if isinstance(source, (bytes, bytearray, memoryview)) else source
    try:
        image = Image.open(fp, formats=formats)
    except UnidentifiedImageError as e:
        raise DecodeError(f"Not a valid image: {e}") from e
    try:
        image.load()
    except (OSError, SyntaxError) as e:
        raise DecodeError(f"Corrupt image data: {e}") from e
    return image.convert("RGBA")


def fit_dimensions(size: tuple[int, int], bounds: tuple[int, int]) -> tuple[int, int]:
    """Largest (width, height) with the aspect ratio of ``size`` that fits in ``bounds``."""
    width, height = size
    ratio = min(bounds[0] / width, bounds[1] / height)
    # Halves round away from zero
    return max(1, math.floor(width * ratio + 0.5)), max(1, math.floor(height * ratio + 0.5))


def _gaussian_prefilter(image: Image.Image, width: int, height: int) -> Image.Image:
    """Blur in proportion to the downscale factor so the bilinear pass sees a Gaussian-smoothed source."""
    scale = max(image.width / width, image.height / height)
    if scale <= 1:
        return image
    # Blur premultiplied so transparent pixels do not darken visible edges
    blurred = image.convert("RGBa").filter(ImageFilter.GaussianBlur(radius=scale / 2))
    return blurred.convert("RGBA")


def resize(
    image: Image.Image,
    width: int,
    height: int,
    resize_filter: FilterKind = FilterKind.NEAREST,
    preserve_aspect: bool = False,
) -> Image.Image:
    if preserve_aspect:
        width, height = fit_dimensions(image.size, (width, height))
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    if resize_filter is FilterKind.GAUSSIAN:
        image = _gaussian_prefilter(image, width, height)
    return image.resize((width, height), _RESAMPLING[resize_filter])

from pathlib import Path

from PIL import Image

from halfblock.config import RenderConfig
from halfblock.escape import EscapeStyle
from halfblock.imaging import FilterKind, decode, resize
from halfblock.renderer import render


def convert(image: Image.Image | bytes | str | Path, config: RenderConfig, format: str | None = None) -> str:
    """Decode (unless already an image), resize and render."""
    if isinstance(image, Image.Image):
        image = image.convert("RGBA")
    else:
        image = decode(image, format=format)
    image = resize(image, config.width, config.height, config.resize_filter, config.preserve_aspect)
    return render(image, config.alpha_threshold, config.escape_style)


def image_to_ansi(
    image: Image.Image | bytes | str | Path,
    width: int,
    height: int,
    alpha_threshold: int = 0,
    escape_style: EscapeStyle = EscapeStyle.LITERAL,
    resize_filter: FilterKind = FilterKind.NEAREST,
    preserve_aspect: bool = False,
    format: str | None = None,
) -> str:
    config = RenderConfig(
        width=width,
        height=height,
        alpha_threshold=alpha_threshold,
        escape_style=escape_style,
        resize_filter=resize_filter,
        preserve_aspect=preserve_aspect,
    )
    return convert(image, config, format=format)

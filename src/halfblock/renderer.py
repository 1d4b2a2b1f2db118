import numpy as np

from halfblock.escape import LOWER_HALF, UPPER_HALF, EscapeStyle, foreground, foreground_background, reset


def _cell(top, bottom, top_visible: bool, bottom_visible: bool, style: EscapeStyle) -> str:
    if not top_visible and not bottom_visible:
        return " "
    if not top_visible:
        return f"{foreground(bottom, style)}{LOWER_HALF}{reset(style)}"
    if not bottom_visible:
        return f"{foreground(top, style)}{UPPER_HALF}{reset(style)}"
    # Lower half block: foreground paints the bottom pixel, background the top one
    return f"{foreground_background(bottom, top, style)}{LOWER_HALF}{reset(style)}"


def render(pixels, alpha_threshold: int = 0, escape_style: EscapeStyle = EscapeStyle.LITERAL) -> str:
    """Render an RGBA pixel grid as half-block truecolor text.

    Each output line covers two pixel rows. A pixel is invisible when its alpha
    is below ``alpha_threshold``; a threshold of 0 shows every pixel. An odd
    final row is paired with fully transparent black.

    Args:
        pixels: (height, width, 4) uint8 array-like, row-major. A Pillow RGBA
            image works too.
        alpha_threshold: minimum alpha (0-255) for a pixel to be drawn.
        escape_style: literal control bytes or printable ``\\x1b`` markers.

    Returns:
        ceil(height / 2) newline-terminated lines of ``width`` cells each, or
        an empty string for a zero-area grid.
    """
    if not 0 <= alpha_threshold <= 255:
        raise ValueError(f"Alpha threshold must be between 0 and 255, got {alpha_threshold}")
    grid = np.asarray(pixels, dtype=np.uint8)
    # Empty input of any nesting, e.g. [] or [[]], is a zero-area grid
    if grid.size == 0:
        return ""
    if grid.ndim != 3 or grid.shape[2] != 4:
        raise ValueError(f"Expected a (height, width, 4) RGBA grid, got shape {grid.shape}")

    height, width, _ = grid.shape
    if height % 2:
        grid = np.concatenate([grid, np.zeros((1, width, 4), dtype=np.uint8)])

    top = grid[0::2]
    bottom = grid[1::2]
    top_visible = (top[..., 3] >= alpha_threshold).tolist()
    bottom_visible = (bottom[..., 3] >= alpha_threshold).tolist()
    top_rgb = top[..., :3].tolist()
    bottom_rgb = bottom[..., :3].tolist()

    out = []
    for row in range(len(top_rgb)):
        for col in range(width):
            out.append(
                _cell(
                    top_rgb[row][col],
                    bottom_rgb[row][col],
                    top_visible[row][col],
                    bottom_visible[row][col],
                    escape_style,
                )
            )
        out.append("\n")
    return "".join(out)

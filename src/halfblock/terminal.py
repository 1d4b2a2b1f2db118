import os
import sys

FALLBACK_SIZE = (80, 24)


def get_terminal_size(stream=None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind ``stream`` (stdout by default).

    Falls back to 80x24 when the stream is not a tty or its size can't be queried.
    """
    if stream is None:
        stream = sys.stdout
    if not stream.isatty():
        return FALLBACK_SIZE
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError):
        return FALLBACK_SIZE
    return (size.columns, size.lines)


def get_pixel_bounds(stream=None) -> tuple[int, int]:
    """Return the (width, height) in pixels that fills the terminal without scrolling.

    Every text row holds two pixels; the last row is left for the prompt.
    """
    columns, rows = get_terminal_size(stream)
    return (columns, max(1, rows - 1) * 2)

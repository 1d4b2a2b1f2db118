from enum import Enum

# Block elements: the glyph's foreground fills the named half, background the other
UPPER_HALF = "▀"
LOWER_HALF = "▄"


class EscapeStyle(Enum):
    """How the control character introducing each ANSI sequence is written."""

    LITERAL = "\x1b"
    ESCAPED = "\\x1b"


def _sgr(style: EscapeStyle, params: str) -> str:
    return f"{style.value}[{params}m"


def foreground(rgb, style: EscapeStyle) -> str:
    r, g, b = rgb
    return _sgr(style, f"38;2;{r};{g};{b}")


def foreground_background(fg, bg, style: EscapeStyle) -> str:
    """Set truecolor foreground and background in a single sequence."""
    return _sgr(style, "38;2;{};{};{};48;2;{};{};{}".format(*fg, *bg))


def reset(style: EscapeStyle) -> str:
    return _sgr(style, "0")


def unescape(text: str) -> str:
    """Turn printable escape markers back into literal control bytes."""
    return text.replace(EscapeStyle.ESCAPED.value, EscapeStyle.LITERAL.value)

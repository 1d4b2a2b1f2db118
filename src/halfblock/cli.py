import argparse
import sys
from pathlib import Path

from halfblock.config import RenderConfig
from halfblock.converter import convert
from halfblock.escape import EscapeStyle
from halfblock.imaging import DecodeError, FilterKind
from halfblock.terminal import get_pixel_bounds


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def _alpha(value: str) -> int:
    number = int(value)
    if not 0 <= number <= 255:
        raise argparse.ArgumentTypeError(f"must be between 0 and 255, got {number}")
    return number


def main():
    parser = argparse.ArgumentParser(description="Render an image as truecolor half-block text")
    parser.add_argument("image", help="Path to input image, or - to read from stdin")
    parser.add_argument(
        "-W",
        "--width",
        type=_positive_int,
        default=None,
        help="Width in pixels, one per column (default: terminal width)",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=_positive_int,
        default=None,
        help="Height in pixels, two per line (default: terminal height)",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=_alpha,
        default=0,
        help="Minimum alpha for a pixel to be drawn (default: 0, no transparency)",
    )
    parser.add_argument(
        "-r", "--raw", action="store_true", default=False, help="Print escape sequences as literal \\x1b text"
    )
    parser.add_argument(
        "-f",
        "--filter",
        default=FilterKind.NEAREST.value,
        choices=[kind.value for kind in FilterKind],
        help="Resampling filter (default: nearest)",
    )
    parser.add_argument("--format", default=None, help="Decode as this image format instead of detecting it")
    parser.add_argument(
        "--stretch",
        action="store_true",
        default=False,
        help="Resize to exactly width x height instead of preserving the aspect ratio",
    )
    args = parser.parse_args()

    bounds = get_pixel_bounds()
    width = args.width if args.width is not None else bounds[0]
    height = args.height if args.height is not None else bounds[1]

    if args.image == "-":
        source = sys.stdin.buffer.read()
    else:
        source = Path(args.image)
        if not source.exists():
            print(f"File not found: {source}", file=sys.stderr)
            sys.exit(1)

    config = RenderConfig(
        width=width,
        height=height,
        alpha_threshold=args.threshold,
        escape_style=EscapeStyle.ESCAPED if args.raw else EscapeStyle.LITERAL,
        resize_filter=FilterKind(args.filter),
        preserve_aspect=not args.stretch,
    )
    try:
        text = convert(source, config, format=args.format)
    except DecodeError as e:
        print(f"Not a valid image: {args.image} ({e})", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Cannot read image: {args.image} ({e.strerror or e})", file=sys.stderr)
        sys.exit(1)
    print(text, end="")

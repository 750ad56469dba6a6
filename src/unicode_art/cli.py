import argparse
import logging
import sys
from pathlib import Path

from PIL import UnidentifiedImageError

from unicode_art.config import (
    CLASSIC_PRESETS,
    DEFAULT_NUM_COLS,
    DEFAULT_TERM_WIDTH,
    DEFAULT_THRESHOLD,
    Preset,
    RenderOptions,
)
from unicode_art.converter import render_to
from unicode_art.errors import UnicodeArtError
from unicode_art.terminal import get_terminal_width

EXIT_USAGE = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of columns: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"number of columns must be at least 1, got {number}")
    return number


def _threshold(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {value!r}") from None
    if not 0 <= number <= 255:
        raise argparse.ArgumentTypeError(f"threshold must be between 0 and 255, got {number}")
    return number


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=DEFAULT_NUM_COLS,
        help=f"Number of columns (default: {DEFAULT_NUM_COLS})",
    )
    parser.add_argument("-c", "--color", action="store_true", default=False, help="ANSI truecolor output")
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument(
        "--fit", action="store_true", default=False, help="Shrink the output to fit the terminal width"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unicode-art", description="Render an image as Unicode art")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    classic = sub.add_parser("classic", help="Character ramp (ASCII) art")
    _add_common(classic)
    classic.add_argument(
        "-p",
        "--preset",
        default=Preset.STANDARD.value,
        choices=[p.value for p in CLASSIC_PRESETS] + [Preset.BLOCK.value],
        help="Character ramp, or 'block' for half-block pixels (default: standard)",
    )

    braille = sub.add_parser("braille", help="Braille dot art")
    _add_common(braille)
    braille.add_argument(
        "-t",
        "--threshold",
        type=_threshold,
        default=DEFAULT_THRESHOLD,
        help=f"Brightness below which a dot is set (default: {DEFAULT_THRESHOLD})",
    )

    subpixel = sub.add_parser("subpixel", help="Glyph-matched subpixel art")
    _add_common(subpixel)

    return parser


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    preset = {"braille": Preset.BRAILLE, "subpixel": Preset.SUBPIXEL}.get(args.command)
    if preset is None:
        preset = Preset.parse(args.preset)
    return RenderOptions(
        preset=preset,
        num_cols=args.width,
        threshold=getattr(args, "threshold", DEFAULT_THRESHOLD),
        colour=args.color,
        invert=args.invert,
        fit_terminal=args.fit,
        term_width=get_terminal_width() if args.fit else DEFAULT_TERM_WIDTH,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    try:
        options = options_from_args(args)
    except UnicodeArtError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return EXIT_USAGE

    if (sys.stdout.encoding or "").lower() != "utf-8" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    try:
        render_to(image_path, options, sys.stdout)
    except UnidentifiedImageError as e:
        print(f"Cannot read image: {e}", file=sys.stderr)
        return 1
    except UnicodeArtError as e:
        print(f"Rendering failed: {e}", file=sys.stderr)
        return 1
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())

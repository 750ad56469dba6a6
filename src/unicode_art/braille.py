import logging
from typing import TextIO

import numpy as np
from PIL import Image

from unicode_art import colour
from unicode_art.aspect_ratio import AspectFitter, TermFit
from unicode_art.charsets import BRAILLE_BASE
from unicode_art.config import DEFAULT_TERM_WIDTH, DEFAULT_THRESHOLD
from unicode_art.errors import ConfigurationError

logger = logging.getLogger(__name__)

X_DOTS = 2
Y_DOTS = 4

# (x, y) offset inside the 2x4 block for bit 0..7 of the Unicode Braille
# pattern: dots 1-3 run down the left column, 4-6 down the right, and
# dots 7 and 8 are the bottom row added later to the block.
DOT_OFFSETS = (
    (0, 0),
    (0, 1),
    (0, 2),
    (1, 0),
    (1, 1),
    (1, 2),
    (0, 3),
    (1, 3),
)

# Pixels past the image edge read as transparent black
PADDING = (0, 0, 0, 0)


def dots_to_char(dots) -> str:
    """Pack eight booleans (in DOT_OFFSETS order) into a Braille character."""
    mask = 0
    for bit, on in enumerate(dots):
        if on:
            mask |= 1 << bit
    return chr(BRAILLE_BASE + mask)


class DotBitmapEncoder:
    """Threshold a 2x4 pixel window into one Braille pattern."""

    def __init__(self, threshold: int = DEFAULT_THRESHOLD, invert: bool = False):
        if isinstance(threshold, bool) or not isinstance(threshold, int) or not 0 <= threshold <= 255:
            raise ConfigurationError(f"threshold must be an integer in 0..255, got {threshold!r}")
        self.threshold = threshold
        self.invert = invert

    def block_dots(self, block: np.ndarray) -> tuple[bool, ...]:
        """Dot values for a block of shape (<=4, <=2, >=3); missing pixels are padding."""
        height, width = block.shape[:2]
        dots = []
        for x, y in DOT_OFFSETS:
            pixel = block[y, x] if x < width and y < height else PADDING
            grey = (int(pixel[0]) + int(pixel[1]) + int(pixel[2])) // 3
            dots.append((grey < self.threshold) != self.invert)
        return tuple(dots)

    def encode(self, block: np.ndarray) -> str:
        return dots_to_char(self.block_dots(block))

    def encode_image(self, arr: np.ndarray):
        """Yield one list of Braille characters per band of four pixel rows."""
        height, width = arr.shape[:2]
        for y in range(0, height, Y_DOTS):
            yield [self.encode(arr[y : y + Y_DOTS, x : x + X_DOTS]) for x in range(0, width, X_DOTS)]


class BrailleRenderer:
    def __init__(
        self,
        num_cols: int,
        threshold: int = DEFAULT_THRESHOLD,
        colour: bool = False,
        invert: bool = False,
        term_fit: TermFit = TermFit.NONE,
        term_width: int = DEFAULT_TERM_WIDTH,
    ):
        self.encoder = DotBitmapEncoder(threshold, invert)
        self.fitter = AspectFitter(cols=num_cols, term_fit=term_fit, term_width=term_width)
        self.colour = colour

    def resize(self, image: Image.Image) -> Image.Image:
        """Scale so each output cell covers exactly one 2x4 block."""
        cols, rows = self.fitter.calculate(image.width, image.height)
        logger.debug("braille grid %dx%d for %dx%d image", cols, rows, image.width, image.height)
        return image.convert("RGBA").resize((cols * X_DOTS, rows * Y_DOTS), Image.LANCZOS)

    def write_all(self, image: Image.Image, writer: TextIO) -> None:
        img = self.resize(image)
        arr = np.asarray(img, dtype=np.uint8)

        if not self.colour:
            for line in self.encoder.encode_image(arr):
                writer.write("".join(line))
                writer.write("\n")
            return

        background = colour.bg(colour.BLACK if self.encoder.invert else colour.WHITE)
        height, width = arr.shape[:2]
        for y in range(0, height, Y_DOTS):
            parts = []
            for x in range(0, width, X_DOTS):
                window = (x, y, min(width, x + X_DOTS), min(height, y + Y_DOTS))
                pixel = img.crop(window).resize((1, 1), Image.BICUBIC).getpixel((0, 0))
                char = self.encoder.encode(arr[y : y + Y_DOTS, x : x + X_DOTS])
                parts.append(f"{colour.fg(pixel)}{char}{background}")
            parts.append(colour.LINE_END)
            parts.append("\n")
            writer.write("".join(parts))
        writer.write(colour.RESET)

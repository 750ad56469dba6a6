import logging
from typing import TextIO

import numpy as np
from PIL import Image

from unicode_art import colour
from unicode_art.aspect_ratio import AspectFitter, TermFit
from unicode_art.charsets import UPPER_HALF_BLOCK
from unicode_art.config import DEFAULT_TERM_WIDTH

logger = logging.getLogger(__name__)


class HalfBlockEncoder:
    """Two stacked pixels as one cell: foreground paints the top half."""

    def encode(self, upper, lower) -> str:
        return f"{colour.fg(upper)}{colour.bg(lower)}{UPPER_HALF_BLOCK}"

    def encode_rows(self, arr: np.ndarray):
        """Yield one encoded line per pair of pixel rows; an odd last row is dropped."""
        for y in range(arr.shape[0] // 2):
            upper = arr[2 * y]
            lower = arr[2 * y + 1]
            yield "".join(self.encode(top, bottom) for top, bottom in zip(upper, lower))


class BlockRenderer:
    def __init__(
        self,
        num_cols: int,
        colour: bool = False,
        term_fit: TermFit = TermFit.NONE,
        term_width: int = DEFAULT_TERM_WIDTH,
    ):
        self.encoder = HalfBlockEncoder()
        self.fitter = AspectFitter(cols=num_cols, term_fit=term_fit, term_width=term_width)
        self.colour = colour

    def resize(self, image: Image.Image) -> Image.Image:
        cols, rows = self.fitter.calculate(image.width, image.height)
        logger.debug("block grid %dx%d for %dx%d image", cols, rows, image.width, image.height)
        img = image.convert("RGB").resize((cols, rows * 2), Image.LANCZOS)
        if not self.colour:
            img = img.convert("L").convert("RGB")
        return img

    def write_all(self, image: Image.Image, writer: TextIO) -> None:
        arr = np.asarray(self.resize(image), dtype=np.uint8)
        for line in self.encoder.encode_rows(arr):
            writer.write(line)
            writer.write(colour.LINE_END)
            writer.write("\n")
        writer.write(colour.RESET)

import logging
from typing import TextIO

from PIL import Image

from unicode_art import charsets, colour
from unicode_art.aspect_ratio import AspectFitter, TermFit
from unicode_art.config import DEFAULT_TERM_WIDTH
from unicode_art.errors import ImageTooSmallError
from unicode_art.sampling import sample_grid, sample_points, to_rgba_array

logger = logging.getLogger(__name__)


class PaletteMapper:
    """Pick a character from a density ramp for a brightness byte."""

    def __init__(self, palette: str, invert: bool = False):
        assert len(palette) >= 2, f"palette needs at least two characters, got {palette!r}"
        self.palette = palette
        self.invert = invert

    def index(self, brightness: int) -> int:
        if self.invert:
            brightness = 255 - brightness
        n = len(self.palette)
        return min(n - 1, brightness * n // 255)

    def char(self, brightness: int) -> str:
        return self.palette[self.index(brightness)]

    def map_row(self, row) -> str:
        return "".join(self.palette[self.index(int(b))] for b in row)


class ClassicRenderer:
    """Luminance-ramp renderer: one palette character per cell."""

    def __init__(
        self,
        palette: str = charsets.STANDARD,
        num_cols: int | None = None,
        num_rows: int | None = None,
        colour: bool = False,
        invert: bool = False,
        term_fit: TermFit = TermFit.NONE,
        term_width: int = DEFAULT_TERM_WIDTH,
    ):
        self.mapper = PaletteMapper(palette, invert=invert)
        self.fitter = AspectFitter(num_cols, num_rows, term_fit, term_width)
        self.colour = colour

    def grid_size(self, image: Image.Image) -> tuple[int, int]:
        return self.fitter.calculate(image.width, image.height)

    def write_all(self, image: Image.Image, writer: TextIO) -> None:
        arr = to_rgba_array(image)
        num_cols, num_rows = self.grid_size(image)
        logger.debug("classic grid %dx%d for %dx%d image", num_cols, num_rows, image.width, image.height)
        # every cell must cover at least one pixel; cell edges step by (size - 1) / cells
        if num_cols > image.width - 1 or num_rows > image.height - 1:
            raise ImageTooSmallError(
                f"{image.width}x{image.height} image is too small for {num_cols}x{num_rows} characters; "
                f"use fewer columns"
            )
        means = sample_grid(arr, num_cols, num_rows)

        if not self.colour:
            for row in means:
                writer.write(self.mapper.map_row(row))
                writer.write("\n")
            return

        points = sample_points(arr, num_cols, num_rows)
        background = colour.bg(colour.BLACK)
        for row, pixels in zip(means, points):
            parts = []
            for brightness, pixel in zip(row, pixels):
                parts.append(f"{colour.fg(pixel)}{background}{self.mapper.char(int(brightness))}")
            parts.append(colour.LINE_END)
            parts.append("\n")
            writer.write("".join(parts))
        writer.write(colour.RESET)

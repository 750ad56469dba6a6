"""Subpixel renderer.

A producer thread renders the image with the 4-level classic ramp at three
times the requested width. The calling thread reads those lines back three
at a time, cuts them into 3x3 density blocks and replaces each block with
the glyph whose ink layout is closest.

The two stages talk through a bounded line channel: the producer blocks
when the consumer falls behind, and the consumer blocks until a line is
available. Lines arrive in the order they were written.
"""

import logging
import queue
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Iterable, TextIO

from PIL import Image

from unicode_art.aspect_ratio import AspectFitter, TermFit
from unicode_art.charsets import LEVELS_4
from unicode_art.classic import ClassicRenderer
from unicode_art.config import DEFAULT_TERM_WIDTH
from unicode_art.errors import PipelineError
from unicode_art.glyphs import GLYPHS, GRID_SIZE, GlyphCatalog

logger = logging.getLogger(__name__)

CHANNEL_LINES = 64
ZERO_DENSITY = "0"

_EOF = object()


class LineChannel:
    """Bounded single-producer single-consumer queue of text lines.

    The producer side looks like a text stream (``write``/``close``); the
    consumer side is an iterator that ends once the producer has closed.
    """

    def __init__(self, maxsize: int = CHANNEL_LINES):
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)
        self._pending = ""
        self._closed = False
        self._eof = False

    def write(self, text: str) -> int:
        if self._closed:
            raise ValueError("write to closed channel")
        *lines, self._pending = (self._pending + text).split("\n")
        for line in lines:
            self._queue.put(line)
        return len(text)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._pending:
            self._queue.put(self._pending)
            self._pending = ""
        self._queue.put(_EOF)

    def __iter__(self):
        while not self._eof:
            item = self._queue.get()
            if item is _EOF:
                self._eof = True
                return
            yield item

    def drain(self) -> int:
        """Discard everything up to end-of-stream so a blocked producer can finish."""
        return sum(1 for _ in self)


def block_vector(lines: list[str], col: int) -> list[int]:
    """Density vector of the 3x3 block starting at ``col``.

    Rows are read bottom to top and each row left to right. Short lines
    count as zero density. A final group with fewer than three lines is
    padded below its last line, so the padding is read first: ``["123"]``
    gives ``[0, 0, 0, 0, 0, 0, 1, 2, 3]``, with the ink on the top row of
    the glyph.
    """
    rows = list(lines) + [""] * (GRID_SIZE - len(lines))
    digits = "".join(line[col : col + GRID_SIZE].ljust(GRID_SIZE, ZERO_DENSITY) for line in reversed(rows))
    return [int(d) for d in digits]


class SubpixelRenderer:
    def __init__(
        self,
        num_cols: int,
        invert: bool = False,
        catalog: GlyphCatalog = GLYPHS,
        term_fit: TermFit = TermFit.NONE,
        term_width: int = DEFAULT_TERM_WIDTH,
        channel_size: int = CHANNEL_LINES,
    ):
        self.fitter = AspectFitter(cols=num_cols, term_fit=term_fit, term_width=term_width)
        self.invert = invert
        self.catalog = catalog
        self.channel_size = channel_size

    def producer(self, image: Image.Image) -> ClassicRenderer:
        cols, _ = self.fitter.calculate(image.width, image.height)
        return ClassicRenderer(LEVELS_4, num_cols=cols * GRID_SIZE, invert=self.invert)

    def _produce(self, image: Image.Image, channel: LineChannel) -> None:
        try:
            self.producer(image).write_all(image, channel)
        finally:
            channel.close()

    def convert_block_row(self, lines: list[str]) -> str:
        width = len(lines[0]) if lines else 0
        return "".join(
            self.catalog.find_nearest(block_vector(lines, col)) for col in range(0, width, GRID_SIZE)
        )

    def convert(self, lines: Iterable[str], writer: TextIO) -> int:
        """Turn 4-level classic output into glyphs, one output line per three input lines."""
        it = iter(lines)
        block_rows = 0
        while chunk := list(islice(it, GRID_SIZE)):
            writer.write(self.convert_block_row(chunk))
            writer.write("\n")
            block_rows += 1
        return block_rows

    def write_all(self, image: Image.Image, writer: TextIO) -> None:
        channel = LineChannel(self.channel_size)
        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="subpixel-producer") as pool:
            logger.debug("starting subpixel producer for %dx%d image", image.width, image.height)
            future = pool.submit(self._produce, image, channel)
            try:
                block_rows = self.convert(channel, writer)
            finally:
                channel.drain()
            error = future.exception()
        logger.debug("subpixel producer joined after %d block rows", block_rows)

        if error is not None:
            logger.debug("subpixel producer failed: %s", error)
            raise PipelineError(f"producer stage failed: {error}") from error

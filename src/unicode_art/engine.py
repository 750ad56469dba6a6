from __future__ import annotations

from typing import Protocol, TextIO

from PIL import Image

from unicode_art.aspect_ratio import TermFit
from unicode_art.block import BlockRenderer
from unicode_art.braille import BrailleRenderer
from unicode_art.classic import ClassicRenderer
from unicode_art.config import Preset, RenderOptions
from unicode_art.subpixel import SubpixelRenderer


class Renderer(Protocol):
    def write_all(self, image: Image.Image, writer: TextIO) -> None:
        """Write the text rendering of an image to ``writer``, one row per line."""
        ...


def create_renderer(options: RenderOptions) -> Renderer:
    term_fit = TermFit.AUTO if options.fit_terminal else TermFit.NONE
    fit = {"term_fit": term_fit, "term_width": options.term_width}
    preset = options.preset

    if preset is Preset.BLOCK:
        return BlockRenderer(options.num_cols, colour=options.colour, **fit)
    if preset is Preset.BRAILLE:
        return BrailleRenderer(
            options.num_cols, threshold=options.threshold, colour=options.colour, invert=options.invert, **fit
        )
    if preset is Preset.SUBPIXEL:
        return SubpixelRenderer(options.num_cols, invert=options.invert, **fit)
    return ClassicRenderer(
        preset.palette, num_cols=options.num_cols, colour=options.colour, invert=options.invert, **fit
    )

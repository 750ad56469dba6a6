import io
import logging
from pathlib import Path
from typing import TextIO

from PIL import Image

from unicode_art.config import Preset, RenderOptions
from unicode_art.engine import create_renderer

logger = logging.getLogger(__name__)


def load_image(image: Image.Image | str | Path) -> Image.Image:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
        image.load()
    return image


def render_to(image: Image.Image | str | Path, options: RenderOptions, writer: TextIO) -> None:
    image = load_image(image)
    if options.colour and options.preset is Preset.SUBPIXEL:
        logger.warning("colour output is not supported by the subpixel renderer; ignoring")
    create_renderer(options).write_all(image, writer)


def image_to_text(
    image: Image.Image | str | Path,
    options: RenderOptions | None = None,
    **kwargs,
) -> str:
    """Render an image (or a path to one) and return the text.

    Options may be given as a ``RenderOptions`` or as its fields by keyword.
    """
    if options is None:
        options = RenderOptions(**kwargs)
    elif kwargs:
        raise TypeError("pass either options or keyword fields, not both")
    out = io.StringIO()
    render_to(image, options, out)
    return out.getvalue()

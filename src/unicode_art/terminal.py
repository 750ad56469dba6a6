import os
import sys
from typing import TextIO

from unicode_art.config import DEFAULT_TERM_WIDTH


def get_terminal_width(stream: TextIO | None = None, fallback: int = DEFAULT_TERM_WIDTH) -> int:
    """Columns of the terminal behind ``stream`` (stdout by default), or ``fallback`` if not a tty."""
    stream = stream if stream is not None else sys.stdout
    if not stream.isatty():
        return fallback
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (OSError, ValueError):
        return fallback

import re

import numpy as np
from PIL import Image

from unicode_art.block import BlockRenderer, HalfBlockEncoder

FG = re.compile(r"\033\[38;2;(\d+);(\d+);(\d+)m")


def test_encode_cell():
    assert HalfBlockEncoder().encode((1, 2, 3), (4, 5, 6)) == "\033[38;2;1;2;3m\033[48;2;4;5;6m▀"


def test_odd_last_row_is_dropped():
    arr = np.zeros((3, 2, 3), dtype=np.uint8)
    arr[1] = 255
    lines = list(HalfBlockEncoder().encode_rows(arr))
    assert lines == ["\033[38;2;0;0;0m\033[48;2;255;255;255m▀" * 2]


def test_colour_output(solid, render):
    # 4x4 image at 4 columns needs no resampling: rows = 2, pixel rows = 4
    result = render(BlockRenderer(num_cols=4, colour=True), solid(4, 4, (255, 0, 0)))
    lines = result.split("\n")
    assert len(lines) == 3
    cell = "\033[38;2;255;0;0m\033[48;2;255;0;0m▀"
    assert lines[0] == cell * 4 + "\033[40m"
    assert lines[1] == cell * 4 + "\033[40m"
    assert lines[2] == "\033[0m"


def test_greyscale_without_colour(solid, render):
    result = render(BlockRenderer(num_cols=4), solid(4, 4, (255, 0, 0)))
    colours = FG.findall(result)
    assert len(colours) == 8
    assert all(r == g == b for r, g, b in colours)


def test_upper_and_lower_pixels(render):
    img = Image.new("RGB", (2, 2), (0, 0, 0))
    img.paste((255, 255, 255), (0, 1, 2, 2))
    # 2x2 at 2 columns: rows = 1, resized to 2x2 unchanged
    result = render(BlockRenderer(num_cols=2, colour=True), img)
    assert result == ("\033[38;2;0;0;0m\033[48;2;255;255;255m▀" * 2) + "\033[40m\n\033[0m"

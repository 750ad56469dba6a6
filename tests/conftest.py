import io

import pytest
from PIL import Image


@pytest.fixture
def solid():
    """Factory for single-colour RGB images."""

    def make(width, height, colour):
        if isinstance(colour, int):
            colour = (colour, colour, colour)
        return Image.new("RGB", (width, height), colour)

    return make


@pytest.fixture
def halves():
    """Factory for images whose left half is black and right half white."""

    def make(width, height):
        img = Image.new("RGB", (width, height), (255, 255, 255))
        img.paste((0, 0, 0), (0, 0, width // 2, height))
        return img

    return make


@pytest.fixture
def render():
    """Run a renderer into a string."""

    def run(renderer, image):
        out = io.StringIO()
        renderer.write_all(image, out)
        return out.getvalue()

    return run

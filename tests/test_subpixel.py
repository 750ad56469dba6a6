import io
import logging
import threading

import pytest
from PIL import Image

from unicode_art.errors import ImageTooSmallError, PipelineError
from unicode_art.glyphs import GlyphCatalog
from unicode_art.subpixel import LineChannel, SubpixelRenderer, block_vector

# One glyph per uniform density level, so block rows are easy to read back
LEVELS = GlyphCatalog([(ord(str(level)), (level,) * 9) for level in range(4)])


class ScriptedProducer:
    def __init__(self, lines, error=None):
        self.lines = lines
        self.error = error

    def write_all(self, image, writer):
        for line in self.lines:
            writer.write(line)
            writer.write("\n")
        if self.error is not None:
            raise self.error


class ScriptedRenderer(SubpixelRenderer):
    def __init__(self, lines, error=None, **kwargs):
        super().__init__(num_cols=1, **kwargs)
        self.script = ScriptedProducer(lines, error)

    def producer(self, image):
        return self.script


class BrokenWriter:
    def write(self, text):
        raise OSError("disk full")


def blank():
    return Image.new("RGB", (4, 4))


def test_block_vector_reads_bottom_row_first():
    assert block_vector(["012", "123", "230"], 0) == [2, 3, 0, 1, 2, 3, 0, 1, 2]


def test_block_vector_pads_short_and_missing_lines():
    assert block_vector(["0", "11"], 0) == [0, 0, 0, 1, 1, 0, 0, 0, 0]
    assert block_vector(["333333", "3333"], 3) == [0, 0, 0, 3, 0, 0, 3, 3, 3]


def test_single_line_group_puts_ink_on_the_top_row():
    assert block_vector(["123"], 0) == [0, 0, 0, 0, 0, 0, 1, 2, 3]


def test_channel_splits_writes_into_lines():
    channel = LineChannel()
    channel.write("ab\ncd")
    channel.write("e\n")
    channel.write("tail")
    channel.close()
    assert list(channel) == ["ab", "cde", "tail"]


def test_channel_rejects_writes_after_close():
    channel = LineChannel()
    channel.close()
    with pytest.raises(ValueError):
        channel.write("x")


def test_channel_drain_after_end_returns_immediately():
    channel = LineChannel()
    channel.write("a\n")
    channel.close()
    assert list(channel) == ["a"]
    assert channel.drain() == 0


def test_channel_blocks_producer_when_full():
    channel = LineChannel(maxsize=1)
    written = threading.Event()

    def produce():
        channel.write("a\nb\nc\n")
        channel.close()
        written.set()

    thread = threading.Thread(target=produce)
    thread.start()
    assert not written.wait(0.2)
    assert list(channel) == ["a", "b", "c"]
    thread.join(1)
    assert written.is_set()


def test_convert_groups_three_lines():
    renderer = SubpixelRenderer(num_cols=1)
    out = io.StringIO()
    rows = renderer.convert(["000000"] * 4, out)
    assert rows == 2
    assert out.getvalue() == "  \n  \n"


def test_blank_image_is_all_spaces(render):
    image = Image.new("RGB", (60, 60), (255, 255, 255))
    # 4 columns -> producer renders 12x6 digits -> 2 block rows
    assert render(SubpixelRenderer(num_cols=4), image) == "    \n    \n"


def test_black_image_uses_one_dense_glyph(render):
    image = Image.new("RGB", (60, 60), (0, 0, 0))
    lines = render(SubpixelRenderer(num_cols=4), image).splitlines()
    assert len(lines) == 2
    chars = set("".join(lines))
    assert len(chars) == 1
    assert chars != {" "}


def test_invert_swaps_black_and_white(render):
    white = Image.new("RGB", (60, 60), (255, 255, 255))
    black = Image.new("RGB", (60, 60), (0, 0, 0))
    assert render(SubpixelRenderer(num_cols=4, invert=True), white) == render(SubpixelRenderer(num_cols=4), black)


def test_lines_arrive_in_order_through_small_channel(render):
    lines = [str(row // 3 % 4) * 3 for row in range(30)]
    renderer = ScriptedRenderer(lines, catalog=LEVELS, channel_size=1)
    assert render(renderer, blank()) == "0\n1\n2\n3\n0\n1\n2\n3\n0\n1\n"


def test_short_final_group_is_padded(render):
    renderer = ScriptedRenderer(["333", "333", "333", "333"], catalog=LEVELS)
    # last group has one line of 3s over two zero lines: six empty cells win
    assert render(renderer, blank()) == "3\n0\n"


def test_producer_failure_is_raised_after_output():
    renderer = ScriptedRenderer(["000"] * 3, error=RuntimeError("decoder exploded"), catalog=LEVELS)
    out = io.StringIO()
    with pytest.raises(PipelineError, match="decoder exploded") as info:
        renderer.write_all(blank(), out)
    assert isinstance(info.value.__cause__, RuntimeError)
    assert out.getvalue() == "0\n"


def test_image_too_small_for_producer_fails_the_pipeline():
    with pytest.raises(PipelineError) as info:
        SubpixelRenderer(num_cols=80).write_all(Image.new("RGB", (8, 8)), io.StringIO())
    assert isinstance(info.value.__cause__, ImageTooSmallError)


def test_producer_failure_is_left_to_the_caller_to_report(caplog):
    renderer = ScriptedRenderer(["000"], error=RuntimeError("decoder exploded"), catalog=LEVELS)
    with caplog.at_level(logging.DEBUG, logger="unicode_art"):
        with pytest.raises(PipelineError):
            renderer.write_all(blank(), io.StringIO())
    assert "decoder exploded" in caplog.text
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_writer_error_propagates_without_hanging():
    renderer = ScriptedRenderer(["000"] * 300, catalog=LEVELS, channel_size=1)
    with pytest.raises(OSError, match="disk full"):
        renderer.write_all(blank(), BrokenWriter())

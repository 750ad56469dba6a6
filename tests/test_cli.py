import pytest
from PIL import Image

from unicode_art.cli import build_parser, main, options_from_args
from unicode_art.config import Preset


@pytest.fixture
def image_file(tmp_path):
    def make(colour, size=(20, 20)):
        path = tmp_path / "image.png"
        Image.new("RGB", size, colour).save(path)
        return str(path)

    return make


def test_classic_preset(image_file, capsys):
    assert main(["classic", image_file((128, 128, 128)), "-w", "10", "-p", "level_10"]) == 0
    assert capsys.readouterr().out == "==========\n" * 5


def test_braille_defaults(image_file, capsys):
    assert main(["braille", image_file((0, 0, 0), (8, 8)), "-w", "1"]) == 0
    assert capsys.readouterr().out == "⣿\n"


def test_braille_invert(image_file, capsys):
    assert main(["braille", image_file((0, 0, 0), (8, 8)), "-w", "1", "--invert"]) == 0
    assert capsys.readouterr().out == "⠀\n"


def test_subpixel(image_file, capsys):
    assert main(["subpixel", image_file((255, 255, 255), (60, 60)), "-w", "4"]) == 0
    assert capsys.readouterr().out == "    \n    \n"


def test_block_preset_maps_to_block_renderer(image_file):
    args = build_parser().parse_args(["classic", image_file((0, 0, 0)), "-p", "block", "-c"])
    options = options_from_args(args)
    assert options.preset is Preset.BLOCK
    assert options.colour


def test_missing_file(tmp_path, capsys):
    assert main(["classic", str(tmp_path / "missing.png")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_unreadable_image(tmp_path, capsys):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    assert main(["classic", str(path)]) == 1
    assert "Cannot read image" in capsys.readouterr().err


def test_too_small_image_reports_failure(image_file, capsys):
    assert main(["subpixel", image_file((0, 0, 0), (8, 8))]) == 1
    assert "Rendering failed" in capsys.readouterr().err


@pytest.mark.parametrize("preset", ["standard", "level_10"])
def test_classic_default_width_on_small_image_reports_failure(image_file, capsys, preset):
    assert main(["classic", image_file((0, 0, 0), (40, 40)), "-p", preset]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Rendering failed" in captured.err
    assert "too small" in captured.err


@pytest.mark.parametrize("threshold", ["256", "-1", "dark"])
def test_threshold_out_of_range(image_file, threshold):
    with pytest.raises(SystemExit) as info:
        main(["braille", image_file((0, 0, 0)), "-t", threshold])
    assert info.value.code == 2


@pytest.mark.parametrize("width", ["0", "wide"])
def test_invalid_width(image_file, width):
    with pytest.raises(SystemExit) as info:
        main(["classic", image_file((0, 0, 0)), "-w", width])
    assert info.value.code == 2


def test_unknown_preset(image_file):
    with pytest.raises(SystemExit) as info:
        main(["classic", image_file((0, 0, 0)), "-p", "mandel"])
    assert info.value.code == 2


def test_fit_uses_terminal_width(image_file, monkeypatch):
    monkeypatch.setattr("unicode_art.cli.get_terminal_width", lambda: 33)
    args = build_parser().parse_args(["classic", image_file((0, 0, 0)), "--fit", "-w", "300"])
    options = options_from_args(args)
    assert options.fit_terminal
    assert options.term_width == 33


def test_without_fit_term_width_is_default(image_file):
    args = build_parser().parse_args(["classic", image_file((0, 0, 0))])
    options = options_from_args(args)
    assert not options.fit_terminal
    assert options.term_width == 80

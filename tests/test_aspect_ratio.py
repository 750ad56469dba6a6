import pytest

from unicode_art.aspect_ratio import AspectFitter, TermFit, fit_grid, round_half_up


def test_rows_from_cols():
    assert fit_grid(100, 50, cols=40) == (40, 10)


def test_cols_from_rows():
    assert fit_grid(100, 50, rows=10) == (40, 10)


def test_both_given_are_unchanged():
    assert fit_grid(7, 9, cols=3, rows=4) == (3, 4)


def test_neither_given_uses_image_size():
    assert fit_grid(7, 9) == (7, 9)


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_wide_image_grows_cols_until_a_row_fits():
    # 0.5 * 99 * 10 / 1000 rounds to 0, 0.5 * 100 * 10 / 1000 rounds to 1
    assert fit_grid(1000, 10, cols=1) == (100, 1)


def test_tall_image_grows_rows_until_a_col_fits():
    assert fit_grid(10, 1000, rows=1) == (1, 25)


def test_no_termfit_keeps_wide_output():
    assert fit_grid(200, 100, cols=120) == (120, 30)


def test_auto_termfit_clamps_cols():
    assert fit_grid(200, 100, cols=120, term_fit=TermFit.AUTO) == (80, 20)


def test_auto_termfit_clamps_rows_driven_fit():
    assert fit_grid(400, 100, rows=30, term_fit=TermFit.AUTO) == (80, 10)


def test_auto_termfit_with_border():
    assert fit_grid(200, 100, cols=120, term_fit=TermFit.AUTO, border=True) == (78, 20)


def test_auto_termfit_custom_width():
    fitter = AspectFitter(cols=50, term_fit=TermFit.AUTO, term_width=20)
    assert fitter.calculate(100, 100) == (20, 10)


def test_auto_termfit_leaves_narrow_output_alone():
    assert fit_grid(100, 100, cols=30, term_fit=TermFit.AUTO) == (30, 15)


@pytest.mark.parametrize("width, height", [(1, 1), (1000, 1), (1, 1000), (640, 480), (3, 7), (4000, 30)])
@pytest.mark.parametrize("start", [1, 2, 37, 80, 500])
def test_never_zero_and_within_bound(width, height, start):
    for fitter in (
        AspectFitter(cols=start),
        AspectFitter(rows=start),
        AspectFitter(cols=start, term_fit=TermFit.AUTO),
        AspectFitter(rows=start, term_fit=TermFit.AUTO),
        AspectFitter(cols=start, term_fit=TermFit.AUTO, border=True),
    ):
        cols, rows = fitter.calculate(width, height)
        assert cols > 0 and rows > 0
        if fitter.term_fit is TermFit.AUTO:
            assert cols + (2 if fitter.border else 0) <= fitter.term_width


def test_degenerate_image_is_rejected():
    with pytest.raises(AssertionError):
        fit_grid(0, 10, cols=5)

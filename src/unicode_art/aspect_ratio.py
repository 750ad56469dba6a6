import math
from dataclasses import dataclass
from enum import Enum

from unicode_art.config import DEFAULT_TERM_WIDTH


class TermFit(Enum):
    NONE = "none"
    AUTO = "auto"


def round_half_up(value: float) -> int:
    """Round non-negative values with halves going up, not to even."""
    return int(math.floor(value + 0.5))


# Character cells are assumed to be twice as tall as they are wide, hence
# the 2.0 and 0.5 factors below.
def calc_cols(rows: int, img_width: int, img_height: int) -> int:
    return round_half_up(2.0 * rows * img_width / img_height)


def calc_rows(cols: int, img_width: int, img_height: int) -> int:
    return round_half_up(0.5 * cols * img_height / img_width)


@dataclass(frozen=True)
class AspectFitter:
    """Choose a (cols, rows) character grid that keeps the image's proportions.

    Give either ``cols`` or ``rows`` and the other is derived. With both
    given they are returned untouched. ``term_fit=TermFit.AUTO`` keeps
    ``cols`` (plus a one-column border on each side when ``border`` is set)
    within ``term_width``.
    """

    cols: int | None = None
    rows: int | None = None
    term_fit: TermFit = TermFit.NONE
    term_width: int = DEFAULT_TERM_WIDTH
    border: bool = False

    @property
    def _padding(self) -> int:
        return 2 if self.border else 0

    def _rows_for(self, cols: int, img_width: int, img_height: int) -> tuple[int, int]:
        rows = calc_rows(cols, img_width, img_height)
        while rows == 0:
            cols += 1
            rows = calc_rows(cols, img_width, img_height)
        return cols, rows

    def _cols_for(self, rows: int, img_width: int, img_height: int) -> tuple[int, int]:
        cols = calc_cols(rows, img_width, img_height)
        while cols == 0:
            rows += 1
            cols = calc_cols(rows, img_width, img_height)
        return cols, rows

    def _clamp(self, cols: int, rows: int, img_width: int, img_height: int) -> tuple[int, int]:
        limit = max(1, self.term_width - self._padding)
        while self.term_fit is TermFit.AUTO and cols + self._padding > self.term_width:
            if cols <= limit:
                # the bound is narrower than the border; nothing left to shrink
                break
            cols = limit
            # widening again to avoid zero rows would overrun the bound
            rows = max(1, calc_rows(cols, img_width, img_height))
        return cols, rows

    def calculate(self, img_width: int, img_height: int) -> tuple[int, int]:
        assert img_width > 0 and img_height > 0, f"degenerate image {img_width}x{img_height}"
        if self.cols is not None and self.rows is not None:
            return self.cols, self.rows
        if self.rows is not None:
            cols, rows = self._cols_for(self.rows, img_width, img_height)
        elif self.cols is not None:
            cols, rows = self._rows_for(self.cols, img_width, img_height)
        else:
            return img_width, img_height
        return self._clamp(cols, rows, img_width, img_height)


def fit_grid(
    img_width: int,
    img_height: int,
    cols: int | None = None,
    rows: int | None = None,
    term_fit: TermFit = TermFit.NONE,
    term_width: int = DEFAULT_TERM_WIDTH,
    border: bool = False,
) -> tuple[int, int]:
    return AspectFitter(cols, rows, term_fit, term_width, border).calculate(img_width, img_height)

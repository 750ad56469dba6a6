import numpy as np
from PIL import Image

from unicode_art.aspect_ratio import round_half_up


def to_rgba_array(image: Image.Image) -> np.ndarray:
    """Read-only (height, width, 4) uint8 view of an image."""
    arr = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    assert arr.shape[0] > 0 and arr.shape[1] > 0, f"degenerate image {image.size}"
    return arr


def cell_edges(size: int, cells: int) -> np.ndarray:
    """Pixel boundaries of ``cells`` cells spread over ``size`` pixels.

    Cell ``i`` spans ``edges[i]:edges[i + 1]``. The step is (size - 1) / cells,
    so edges are uneven by up to a pixel and the last pixel is never covered.
    """
    ratio = (size - 1) / cells
    return np.array([round_half_up(i * ratio) for i in range(cells + 1)], dtype=np.int64)


def sample_grid(arr: np.ndarray, num_cols: int, num_rows: int) -> np.ndarray:
    """Mean brightness of every cell. Returns uint8 array of shape (num_rows, num_cols).

    Each cell is the mean of (R+G+B)/3 over its pixels, truncated to a byte.
    A summed-area table makes each cell cost four lookups.
    """
    height, width = arr.shape[:2]
    xs = cell_edges(width, num_cols)
    ys = cell_edges(height, num_rows)

    counts = np.outer(np.diff(ys), np.diff(xs))
    assert counts.min() > 0, (
        f"empty sample rectangle: {num_cols}x{num_rows} cells do not fit a {width}x{height} image"
    )

    total = arr[:, :, :3].sum(axis=2, dtype=np.int64)
    table = np.zeros((height + 1, width + 1), dtype=np.int64)
    table[1:, 1:] = total.cumsum(axis=0).cumsum(axis=1)

    sums = table[ys[1:]][:, xs[1:]] - table[ys[:-1]][:, xs[1:]] - table[ys[1:]][:, xs[:-1]] + table[ys[:-1]][:, xs[:-1]]
    return (sums // 3 // counts).astype(np.uint8)


def sample_points(arr: np.ndarray, num_cols: int, num_rows: int) -> np.ndarray:
    """Top-left pixel of every cell. Returns uint8 array of shape (num_rows, num_cols, 4)."""
    height, width = arr.shape[:2]
    xs = cell_edges(width, num_cols)[:-1]
    ys = cell_edges(height, num_rows)[:-1]
    return arr[ys][:, xs]

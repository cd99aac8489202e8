from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .bitmatrix import BitMatrix

ON_COLOR = (50, 99, 183)
OFF_COLOR = (226, 224, 233)


def solution_image(
    matrix: BitMatrix,
    on_color: Sequence[int] = ON_COLOR,
    off_color: Sequence[int] = OFF_COLOR,
) -> np.ndarray:
    """Return an (n_rows, n_cols, 4) uint8 RGBA image, one pixel per tile."""
    grid = matrix.to_array()
    image = np.empty(grid.shape + (4,), dtype=np.uint8)
    image[..., 3] = 255
    image[grid, :3] = np.asarray(on_color, dtype=np.uint8)
    image[~grid, :3] = np.asarray(off_color, dtype=np.uint8)
    return image


def save_solution_image(
    matrix: BitMatrix,
    filename: str,
    on_color: Sequence[int] = ON_COLOR,
    off_color: Sequence[int] = OFF_COLOR,
) -> None:
    """Write the matrix as a 2-colour PNG."""
    plt.imsave(filename, solution_image(matrix, on_color, off_color), format="png")

from __future__ import annotations

from typing import List, Tuple

from .bitmatrix import BitMatrix


def neighbors_open(
    n_rows: int, n_cols: int, r: int, c: int
) -> List[Tuple[int, int]]:
    """Tile (r, c) followed by its orthogonal neighbours inside the field."""
    neigh = [(r, c)]
    if r > 0:
        neigh.append((r - 1, c))
    if r < n_rows - 1:
        neigh.append((r + 1, c))
    if c > 0:
        neigh.append((r, c - 1))
    if c < n_cols - 1:
        neigh.append((r, c + 1))
    return neigh


def create_field(n_rows: int, n_cols: int) -> BitMatrix:
    """Return an n_rows x n_cols field with every tile on."""
    field = BitMatrix(n_rows, n_cols)
    for r in range(n_rows):
        for c in range(n_cols):
            field.set(r, c, True)
    return field


def press(field: BitMatrix, r: int, c: int) -> None:
    """Toggle tile (r, c) and its neighbours in place."""
    for rr, cc in neighbors_open(field.n_rows, field.n_cols, r, c):
        field.xor(rr, cc, True)


def apply_solution(field: BitMatrix, solution: BitMatrix) -> None:
    """Press every tile set in ``solution``, mutating ``field``."""
    if field.shape != solution.shape:
        raise ValueError(
            f"solution shape {solution.shape} does not match field {field.shape}"
        )
    for r in range(field.n_rows):
        for c in range(field.n_cols):
            if solution.get(r, c):
                press(field, r, c)

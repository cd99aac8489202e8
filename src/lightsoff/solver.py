from __future__ import annotations

from typing import Optional, Tuple

from .algebra import ProgressSink, find_min_weight_solution, gf2_gauss
from .bitmatrix import BitMatrix
from .bitvector import BitVector
from .board import neighbors_open


def build_system(field: BitMatrix) -> BitMatrix:
    """Return the augmented N x (N+1) system [A|b] over GF(2) for a field.

    Equation e = r * n_cols + c says that the presses touching tile (r, c)
    must add up to its current state, so that it ends up off. Column j of A
    encodes the tiles toggled when pressing tile j.
    """
    n_rows, n_cols = field.shape
    N = n_rows * n_cols
    system = BitMatrix(N, N + 1)

    def idx(r, c):
        return r * n_cols + c

    for r in range(n_rows):
        for c in range(n_cols):
            e = idx(r, c)
            for rr, cc in neighbors_open(n_rows, n_cols, r, c):
                system.set(e, idx(rr, cc), True)
            system.set(e, N, field.get(r, c))
    return system


def reshape_solution(flat: BitVector, n_rows: int, n_cols: int) -> BitMatrix:
    """Lay a flat variable vector out row-major as an n_rows x n_cols field."""
    result = BitMatrix(n_rows, n_cols)
    for r in range(n_rows):
        for c in range(n_cols):
            if flat.get(r * n_cols + c):
                result.set(r, c, True)
    return result


class LightsOffSolver:
    """Find the fewest presses that switch every tile of a field off."""

    def __init__(self, field: BitMatrix):
        self.field = field
        self.n_rows, self.n_cols = field.shape
        self.rank: Optional[int] = None
        self.n_solutions = 0
        self.min_weight = 0

    def solve(
        self, progress: Optional[ProgressSink] = None
    ) -> Optional[BitMatrix]:
        """Return the minimum-weight press pattern, or None if unsolvable.

        Sets ``rank``, ``n_solutions`` (2 ** nullity, 0 when unsolvable) and
        ``min_weight`` as a side effect. The field itself is left untouched.
        """
        N = self.n_rows * self.n_cols
        system = build_system(self.field)
        self.rank, pivcols = gf2_gauss(system, progress=progress)
        solution = find_min_weight_solution(system, self.rank, pivcols)

        if solution is None:
            self.n_solutions = 0
            self.min_weight = 0
            return None
        self.n_solutions = 1 << (N - self.rank)
        self.min_weight = solution.popcount()
        return reshape_solution(solution, self.n_rows, self.n_cols)


def solve(
    field: BitMatrix, progress: Optional[ProgressSink] = None
) -> Tuple[Optional[BitMatrix], int, int]:
    """Solve a field.

    Returns:
        solution: press pattern shaped like the field, or None
        n_solutions: number of press patterns that clear the field
        min_weight: number of presses in ``solution``
    """
    solver = LightsOffSolver(field)
    solution = solver.solve(progress=progress)
    return solution, solver.n_solutions, solver.min_weight

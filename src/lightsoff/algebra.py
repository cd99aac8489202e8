from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from .bitmatrix import BitMatrix
from .bitvector import BitVector

ProgressSink = Callable[[str, int], None]


def gf2_gauss(
    system: BitMatrix,
    progress: Optional[ProgressSink] = None,
    label: str = "Gaussing system",
) -> Tuple[int, List[int]]:
    """Gauss-Jordan eliminate an augmented system [A|b] over GF(2) in place.

    The last column is the right-hand side. Each pivot column is cleared in
    every other row, above and below the pivot, so the right-hand side of a
    pivot row is the value of its variable once the free variables are
    fixed.

    Returns:
        rank: number of pivot rows (they are rows 0..rank-1). This is the
            true rank, not the index of the last pivot column plus one;
            the two agree when every pivot sits on the diagonal.
        pivcols: pivot column of each pivot row, in row order
    """
    n_rows = system.n_rows
    n_vars = system.n_cols - 1

    rank = 0
    pivcols: list[int] = []
    last_percent = -1
    for col in range(n_vars):
        # find a pivot in/under current row
        pivot = None
        for r in range(rank, n_rows):
            if system.get(r, col):
                pivot = r
                break
        if pivot is not None:
            if pivot != rank:
                system.swap_rows(rank, pivot)
            pivot_row = system[rank]
            # eliminate ALL other rows (Gauss-Jordan)
            for r in range(n_rows):
                if r != rank and system.get(r, col):
                    system[r].xor_words(pivot_row)
            pivcols.append(col)
            rank += 1

        if progress is not None:
            percent = (col + 1) * 100 // n_vars
            if percent != last_percent:
                progress(label, percent)
                last_percent = percent
    return rank, pivcols


def find_min_weight_solution(
    system: BitMatrix, rank: int, pivcols: Optional[Sequence[int]] = None
) -> Optional[BitVector]:
    """Return the minimum-Hamming-weight solution of an eliminated system.

    ``system`` must come out of ``gf2_gauss``. When ``pivcols`` is omitted
    the pivots are taken to sit on the diagonal (row j pivots column j).
    Every assignment of the free variables is tried, each candidate costing
    one word-wise XOR of a free column into the pivot values. Among equally
    light candidates the one with the smallest assignment index wins, the
    index having free variable k as bit k. Returns None if the system is
    inconsistent.
    """
    n_rows = system.n_rows
    n_vars = system.n_cols - 1
    if pivcols is None:
        pivcols = list(range(rank))

    # Inconsistency check: 0...0 | 1 rows
    for r in range(rank, n_rows):
        if system.get(r, n_vars):
            return None

    solution = BitVector(n_vars)
    pivot_set = set(pivcols)
    frees = [c for c in range(n_vars) if c not in pivot_set]

    if not frees:
        for j, pc in enumerate(pivcols):
            solution.set(pc, system.get(j, n_vars))
        return solution

    # free columns and the RHS restricted to the pivot rows
    columns = [
        BitVector.from_bits(system.get(j, f) for j in range(rank)) for f in frees
    ]
    dependent = BitVector.from_bits(system.get(j, n_vars) for j in range(rank))

    # Walk the assignments in Gray-code order: one column flips per step.
    assignment = 0
    free_weight = 0
    best_assignment = 0
    best_dependent = dependent.copy()
    min_weight = dependent.popcount()
    for step in range(1, 1 << len(frees)):
        k = (step & -step).bit_length() - 1
        assignment ^= 1 << k
        free_weight += 1 if (assignment >> k) & 1 else -1
        dependent.xor_words(columns[k])

        weight = free_weight + dependent.popcount()
        # ties go to the assignment that comes first in counting order
        if weight < min_weight or (
            weight == min_weight and assignment < best_assignment
        ):
            min_weight = weight
            best_assignment = assignment
            best_dependent = dependent.copy()

    for j, pc in enumerate(pivcols):
        solution.set(pc, best_dependent.get(j))
    for k, fc in enumerate(frees):
        solution.set(fc, bool((best_assignment >> k) & 1))
    return solution

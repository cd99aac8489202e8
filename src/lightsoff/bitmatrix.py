from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from .bitvector import BitVector, word_count


class MalformedInputError(ValueError):
    """Raised when a text matrix is empty or one of its rows cannot be used."""

    pass


class BitMatrix:
    """Rows of BitVectors sharing one column count.

    A row slot is either a BitVector with ``word_count(n_cols)`` words or
    ``None`` (slots created by ``add_rows`` are filled by the caller).
    """

    def __init__(self, n_rows: int, n_cols: int):
        self.n_cols = n_cols
        # built locally so that a failure leaves no half-made matrix behind
        rows: List[Optional[BitVector]] = [
            BitVector(n_cols) for _ in range(n_rows)
        ]
        self.rows = rows

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def shape(self):
        return self.n_rows, self.n_cols

    @classmethod
    def read(cls, lines: Iterable[str]) -> "BitMatrix":
        """Read rows of '0'/'1' text until a blank line or end of input.

        The first row fixes the column count; a later row of another
        length is rejected.
        """
        matrix: Optional[BitMatrix] = None
        for line in lines:
            if not line.rstrip("\r\n"):
                break
            try:
                row = BitVector.from_bit_string(line)
            except ValueError as exc:
                raise MalformedInputError(str(exc)) from exc
            if matrix is None:
                matrix = cls(0, len(row))
            elif len(row) != matrix.n_cols:
                raise MalformedInputError(
                    f"row {matrix.n_rows} has {len(row)} columns, "
                    f"expected {matrix.n_cols}"
                )
            matrix.add_rows(1)
            matrix[matrix.n_rows - 1] = row
        if matrix is None:
            raise MalformedInputError("no rows in input")
        return matrix

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> "BitMatrix":
        return cls.read(rows)

    def add_rows(self, delta: int) -> None:
        """Append ``delta`` empty row slots, or drop the last ``-delta`` rows."""
        if delta > 0:
            self.rows.extend([None] * delta)
        elif delta < 0:
            del self.rows[max(self.n_rows + delta, 0) :]

    def swap_rows(self, i: int, j: int) -> None:
        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]

    def get(self, row: int, col: int) -> bool:
        return self.rows[row].get(col)

    def set(self, row: int, col: int, value: bool) -> None:
        self.rows[row].set(col, value)

    def xor(self, row: int, col: int, value: bool = True) -> None:
        self.rows[row].xor(col, value)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            row, col = key
            return self.get(row, col)
        return self.rows[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            row, col = key
            self.set(row, col, value)
            return
        if value is not None and len(value.words) != word_count(self.n_cols):
            raise ValueError(
                f"row has {len(value.words)} words, "
                f"expected {word_count(self.n_cols)}"
            )
        self.rows[key] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.to_array(), other.to_array())
        )

    def copy(self) -> "BitMatrix":
        out = BitMatrix(0, self.n_cols)
        out.rows = [None if r is None else r.copy() for r in self.rows]
        return out

    def to_array(self) -> np.ndarray:
        """Return the matrix as a (n_rows, n_cols) numpy bool array."""
        grid = np.zeros((self.n_rows, self.n_cols), dtype=bool)
        for i, row in enumerate(self.rows):
            if row is not None:
                grid[i] = row.to_bits(self.n_cols)
        return grid

    def count_on(self) -> int:
        return int(self.to_array().sum())

    def to_string(self) -> str:
        return "".join(
            "".join("1" if cell else "0" for cell in row) + "\n"
            for row in self.to_array()
        )

    def print(self) -> None:
        print(self.to_string())

    def __repr__(self):
        return f"BitMatrix(n_rows={self.n_rows}, n_cols={self.n_cols})"

    def __str__(self) -> str:
        return self.to_string()

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

WORD_BITS = 64
WORD_DTYPE = np.uint64
# Word byte order is fixed so that bit i of the packed bytes is bit i of the vector.
_WORD_LE = np.dtype("<u8")


def word_index(index: int) -> int:
    return index // WORD_BITS


def bit_index(index: int) -> int:
    return index % WORD_BITS


def bit_mask(index: int) -> np.uint64:
    return WORD_DTYPE(1 << bit_index(index))


def word_count(n_bits: int) -> int:
    """Number of machine words needed to store ``n_bits`` booleans."""
    return word_index(n_bits) + (0 if bit_index(n_bits) == 0 else 1)


def _pack(bits: np.ndarray) -> np.ndarray:
    n_words = word_count(len(bits))
    padded = np.zeros(n_words * WORD_BITS, dtype=bool)
    padded[: len(bits)] = bits
    packed = np.packbits(padded, bitorder="little")
    return packed.view(_WORD_LE).astype(WORD_DTYPE)


def _unpack(words: np.ndarray, n_bits: int) -> np.ndarray:
    raw = words.astype(_WORD_LE).view(np.uint8)
    return np.unpackbits(raw, bitorder="little")[:n_bits].astype(bool)


class BitVector:
    """Booleans packed into an array of 64-bit words.

    Bit ``i`` lives in word ``i // 64`` at position ``i % 64``. Indices are
    not range-checked beyond what numpy does for the word array; bits past
    ``length`` in the last word are kept as written.
    """

    __slots__ = ("length", "words")

    def __init__(self, length: int, words: Optional[np.ndarray] = None):
        self.length = length
        if words is None:
            self.words = np.zeros(word_count(length), dtype=WORD_DTYPE)
        else:
            assert len(words) == word_count(length)
            self.words = np.asarray(words, dtype=WORD_DTYPE).copy()

    @classmethod
    def from_bit_string(cls, string: str) -> "BitVector":
        """Parse a line of '0'/'1' characters; anything but '1' reads as 0."""
        line = string.rstrip("\r\n")
        if not line:
            raise ValueError("bit string is empty")
        bits = np.array([ch == "1" for ch in line], dtype=bool)
        return cls(len(line), _pack(bits))

    @classmethod
    def from_bits(cls, bits: Iterable) -> "BitVector":
        flat = np.array([bool(b) for b in bits], dtype=bool)
        return cls(len(flat), _pack(flat))

    def get(self, index: int) -> bool:
        word = int(self.words[word_index(index)])
        return bool((word >> bit_index(index)) & 1)

    def set(self, index: int, value: bool) -> None:
        if value:
            self.words[word_index(index)] |= bit_mask(index)
        else:
            self.words[word_index(index)] &= ~bit_mask(index)

    def xor(self, index: int, value: bool = True) -> None:
        # only a true value flips the bit
        if value:
            self.words[word_index(index)] ^= bit_mask(index)

    def xor_words(self, other: "BitVector") -> None:
        """XOR every word of ``other`` into this vector."""
        self.words ^= other.words

    def popcount(self, n_words: Optional[int] = None) -> int:
        words = self.words[:n_words]
        return int(np.unpackbits(words.view(np.uint8)).sum())

    def clear(self, n_words: Optional[int] = None) -> None:
        self.words[:n_words] = 0

    def to_bits(self, length: Optional[int] = None) -> np.ndarray:
        n = self.length if length is None else length
        return _unpack(self.words, n)

    def to_bit_string(self, length: Optional[int] = None) -> str:
        return "".join("1" if b else "0" for b in self.to_bits(length))

    def copy(self) -> "BitVector":
        return BitVector(self.length, self.words)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, value: bool) -> None:
        self.set(index, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.length == other.length and bool(
            np.array_equal(self.to_bits(), other.to_bits())
        )

    def __repr__(self):
        return f"BitVector({self.to_bit_string()!r})"

    def __str__(self) -> str:
        return self.to_bit_string()

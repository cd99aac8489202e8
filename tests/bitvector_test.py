import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lightsoff.bitvector import (
    WORD_BITS,
    BitVector,
    bit_index,
    bit_mask,
    word_count,
    word_index,
)

bit_strings = st.text(alphabet="01", min_size=1, max_size=300)


@given(st.integers(min_value=0, max_value=100_000))
def test_word_count(n_bits: int) -> None:
    assert word_count(n_bits) == math.ceil(n_bits / WORD_BITS)


def test_index_helpers():
    assert word_index(0) == 0
    assert word_index(WORD_BITS) == 1
    assert bit_index(WORD_BITS + 3) == 3
    assert int(bit_mask(WORD_BITS + 3)) == 8


def test_new_is_zero():
    bitvec = BitVector(130)
    assert len(bitvec) == 130
    assert len(bitvec.words) == 3
    assert bitvec.popcount() == 0
    assert bitvec.to_bit_string() == "0" * 130


@given(st.integers(min_value=1, max_value=500), st.data())
def test_set_get(length: int, data) -> None:
    bitvec = BitVector(length)
    index = data.draw(st.integers(min_value=0, max_value=length - 1))
    bitvec.set(index, True)
    assert bitvec.get(index) is True
    assert bitvec.popcount() == 1
    bitvec.set(index, False)
    assert bitvec.get(index) is False
    assert bitvec.popcount() == 0


@given(bit_strings, st.data())
def test_xor_twice_restores(bits: str, data) -> None:
    bitvec = BitVector.from_bit_string(bits)
    index = data.draw(st.integers(min_value=0, max_value=len(bits) - 1))
    original = bitvec.get(index)
    bitvec.xor(index, True)
    assert bitvec.get(index) is (not original)
    bitvec.xor(index, True)
    assert bitvec.get(index) is original


def test_xor_with_false_is_noop():
    bitvec = BitVector.from_bit_string("101")
    for index in range(3):
        bitvec.xor(index, False)
    assert bitvec.to_bit_string() == "101"


@given(bit_strings)
def test_bit_string_round_trip(bits: str) -> None:
    bitvec = BitVector.from_bit_string(bits)
    assert bitvec.to_bit_string(len(bits)) == bits
    assert BitVector.from_bit_string(bitvec.to_bit_string(len(bits))) == bitvec


@given(bit_strings)
def test_popcount_matches_ones(bits: str) -> None:
    bitvec = BitVector.from_bit_string(bits)
    assert bitvec.popcount() == bits.count("1")
    assert bitvec.popcount(word_count(len(bits))) == bits.count("1")


def test_popcount_limited_words():
    bitvec = BitVector(WORD_BITS * 2)
    bitvec.set(1, True)
    bitvec.set(WORD_BITS + 1, True)
    assert bitvec.popcount(1) == 1
    assert bitvec.popcount(2) == 2


def test_from_bit_string_strips_newline():
    bitvec = BitVector.from_bit_string("0110\n")
    assert len(bitvec) == 4
    assert bitvec.to_bit_string() == "0110"


def test_from_bit_string_other_characters_read_as_zero():
    bitvec = BitVector.from_bit_string("1x2 1")
    assert bitvec.to_bit_string() == "10001"


@pytest.mark.parametrize("line", ["", "\n"])
def test_from_bit_string_empty(line):
    with pytest.raises(ValueError):
        BitVector.from_bit_string(line)


def test_from_bits():
    assert BitVector.from_bits([1, 0, True, False]).to_bit_string() == "1010"


def test_clear():
    bitvec = BitVector.from_bit_string("1" * 100)
    bitvec.clear(1)
    assert bitvec.popcount() == 100 - WORD_BITS
    bitvec.clear()
    assert bitvec.popcount() == 0


def test_bits_past_length_keep_their_value():
    bitvec = BitVector(3)
    bitvec.set(10, True)
    assert bitvec.get(10) is True
    assert bitvec.to_bit_string() == "000"
    assert bitvec.popcount() == 1


def test_xor_words():
    left = BitVector.from_bit_string("1100" * 20)
    right = BitVector.from_bit_string("1010" * 20)
    left.xor_words(right)
    assert left.to_bit_string() == "0110" * 20


def test_copy_is_independent():
    bitvec = BitVector.from_bit_string("101")
    clone = bitvec.copy()
    clone.set(1, True)
    assert bitvec.to_bit_string() == "101"
    assert clone.to_bit_string() == "111"

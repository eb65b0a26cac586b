"""Tests for packed boolean vectors"""

import copy
import itertools
import logging

import numpy as np
import pytest

from unitmath.domain.bool_vector import (
    BoolVector,
    BoolVector2,
    BoolVector3,
    BoolVector4,
    bool_vector_type,
)
from unitmath.domain.exceptions import BoolVectorIndexError, SegmentValueError
from unitmath.domain.tags import ZeroInit


@pytest.fixture
def all_true():
    return BoolVector3(True)


@pytest.fixture
def all_false():
    return BoolVector3(False)


class TestConstruction:
    def test_default_is_all_false(self):
        v = BoolVector3()
        assert v.none()
        assert v == BoolVector3(ZeroInit)
        assert v == BoolVector3(False)
        assert v.data == b"\x00"

    def test_fill_true(self):
        v = BoolVector4(True)
        assert v.all()
        assert not v.none()
        assert v.any()
        assert v.SIZE == 4
        assert BoolVector4.SIZE == 4

    def test_raw_segment(self):
        v = BoolVector4(0b1010)
        assert [v[i] for i in range(4)] == [False, True, False, True]

    def test_numpy_bool_fill(self):
        assert BoolVector3(np.bool_(True)).all()
        assert BoolVector3(np.bool_(True)).data == b"\x07"
        assert BoolVector3(np.bool_(False)).none()

    def test_raw_segment_masks_padding_bits(self):
        v = BoolVector3(0b11111111)
        assert v.data == b"\x07"
        assert v == BoolVector3(True)
        assert v.all()

    def test_cleared_padding_bits_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="unitmath"):
            BoolVector3(0b00000111)
            assert "Cleared padding bits" not in caplog.text
            BoolVector3(0b11111111)
        assert "Cleared padding bits of BoolVector3 segments [255]" in caplog.text

    def test_raw_segments_for_wide_vectors(self):
        vector_type = bool_vector_type(12)
        v = vector_type(0xFF, 0xFF)
        assert v.data == b"\xff\x0f"
        assert v == vector_type(True)

    @pytest.mark.parametrize("segments", [(1, 2), (256,), (-1,)])
    def test_bad_segments_raise(self, segments):
        with pytest.raises(SegmentValueError):
            BoolVector3(*segments)

    @pytest.mark.parametrize("segment", ["1", 1.5, None])
    def test_non_integer_segment_raises(self, segment):
        with pytest.raises(TypeError, match="Segment values must be integers"):
            BoolVector3(segment)

    def test_bool_among_segments_raises(self):
        with pytest.raises(TypeError):
            bool_vector_type(9)(True, 1)

    def test_from_bits(self):
        v = BoolVector4.from_bits([1, 0, 1, 1])
        assert v.data == bytes([0b1101])
        assert list(v) == [True, False, True, True]

    def test_from_bits_wrong_length_raises(self):
        with pytest.raises(SegmentValueError, match="expects 3 bits, got 2"):
            BoolVector3.from_bits([True, False])

    def test_abstract_base_cannot_be_constructed(self):
        with pytest.raises(TypeError, match="abstract"):
            BoolVector()


class TestWidths:
    def test_known_widths_are_cached(self):
        assert bool_vector_type(2) is BoolVector2
        assert bool_vector_type(3) is BoolVector3
        assert bool_vector_type(4) is BoolVector4
        assert bool_vector_type(17) is bool_vector_type(17)

    @pytest.mark.parametrize(
        "size, data_size", [(1, 1), (2, 1), (8, 1), (9, 2), (16, 2), (17, 3)]
    )
    def test_data_size(self, size, data_size):
        vector_type = bool_vector_type(size)
        assert vector_type.SIZE == size
        assert vector_type.DATA_SIZE == data_size
        assert len(vector_type()) == size
        assert vector_type.__name__ == f"BoolVector{size}"

    @pytest.mark.parametrize("size", [0, -3])
    def test_non_positive_size_raises(self, size):
        with pytest.raises(ValueError):
            bool_vector_type(size)

    def test_subclass_without_size_raises(self):
        with pytest.raises(TypeError, match="must define an integer SIZE"):

            class Broken(BoolVector):
                __slots__ = ()


class TestPredicates:
    def test_bool_is_any(self):
        assert not BoolVector3()
        assert BoolVector3(0b010)

    @pytest.mark.parametrize(
        "segment, all_, any_, none_",
        [(0b000, False, False, True), (0b001, False, True, False), (0b111, True, True, False)],
    )
    def test_aggregates(self, segment, all_, any_, none_):
        v = BoolVector3(segment)
        assert v.all() is all_
        assert v.any() is any_
        assert v.none() is none_

    def test_all_across_segments(self):
        vector_type = bool_vector_type(10)
        v = vector_type(True)
        assert v.all()
        v[9] = False
        assert not v.all()
        assert v.any()


class TestBitAccess:
    def test_set_single_bit(self):
        v = BoolVector3()
        assert v.get(0) is False
        v.set(1, True)
        assert v.get(1) is True
        assert v.get(0) is False
        assert v.get(2) is False

    def test_item_syntax(self):
        v = BoolVector4()
        v[3] = True
        assert v[3]
        v[3] = False
        assert not v[3]
        assert v.none()

    def test_set_in_second_segment(self):
        v = bool_vector_type(10)()
        v[9] = True
        assert v.data == b"\x00\x02"
        assert list(v) == [False] * 9 + [True]

    @pytest.mark.parametrize("index", [3, 4, 100, -1])
    def test_get_out_of_range_raises(self, index):
        with pytest.raises(BoolVectorIndexError, match="out of range for a 3-bit vector"):
            BoolVector3().get(index)

    def test_set_out_of_range_raises(self):
        v = BoolVector2()
        with pytest.raises(IndexError):
            v[2] = True
        assert v.none()

    def test_index_error_carries_details(self):
        with pytest.raises(BoolVectorIndexError) as exc_info:
            BoolVector4()[4]
        assert exc_info.value.index == 4
        assert exc_info.value.size == 4

    def test_non_integer_index_raises(self):
        with pytest.raises(TypeError):
            BoolVector3().get(1.0)

    def test_rejected_index_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="unitmath"):
            with pytest.raises(BoolVectorIndexError):
                BoolVector3().get(3)
        assert "Rejected bit index 3" in caplog.text


class TestBitwise:
    def test_complement_masks_padding(self):
        v = ~BoolVector3(False)
        assert v.data == b"\x07"
        assert [v[i] for i in range(3)] == [True, True, True]

    def test_complement_wide_vector(self):
        v = ~bool_vector_type(12)()
        assert v.data == b"\xff\x0f"
        assert ~v == bool_vector_type(12)()

    def test_operators(self):
        a, b = BoolVector4(0b1100), BoolVector4(0b1010)
        assert a & b == BoolVector4(0b1000)
        assert a | b == BoolVector4(0b1110)
        assert a ^ b == BoolVector4(0b0110)

    @pytest.mark.parametrize(
        "x, y", list(itertools.combinations_with_replacement(range(8), 2))
    )
    def test_algebra(self, x, y, all_true, all_false):
        a, b = BoolVector3(x), BoolVector3(y)
        assert a & b == b & a
        assert a | b == b | a
        assert a ^ b == b ^ a
        assert a ^ a == all_false
        assert a & all_true == a
        assert a | all_false == a
        assert ~~a == a

    def test_in_place_operators_mutate_receiver(self):
        a = BoolVector4(0b1100)
        alias = a
        a &= BoolVector4(0b0110)
        assert alias == BoolVector4(0b0100)
        a |= BoolVector4(0b0001)
        assert alias == BoolVector4(0b0101)
        a ^= BoolVector4(0b1111)
        assert alias == BoolVector4(0b1010)
        assert a is alias

    def test_results_do_not_alias_operands(self):
        a = BoolVector3(0b001)
        b = a | BoolVector3()
        b[2] = True
        assert a == BoolVector3(0b001)

    def test_mismatched_widths_raise(self):
        with pytest.raises(TypeError):
            BoolVector2() & BoolVector3()
        with pytest.raises(TypeError):
            BoolVector3() ^ True
        v = BoolVector2()
        with pytest.raises(TypeError):
            v |= BoolVector4()


class TestComparison:
    def test_equality(self):
        assert BoolVector3(0b101) == BoolVector3.from_bits([1, 0, 1])
        assert BoolVector3(0b101) != BoolVector3(0b100)

    def test_different_widths_never_equal(self):
        assert BoolVector2() != BoolVector3()
        assert not BoolVector2(True) == BoolVector3(True)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(BoolVector3())


class TestRendering:
    def test_repr(self):
        assert repr(BoolVector3(0b101)) == "BoolVector(0b00000101)"
        assert repr(BoolVector2()) == "BoolVector(0b00000000)"

    def test_repr_multiple_segments(self):
        v = bool_vector_type(9).from_bits([1] + [0] * 7 + [1])
        assert repr(v) == "BoolVector(0b00000001 0b00000001)"


def test_copy_is_independent():
    a = BoolVector4(0b0011)
    b = copy.copy(a)
    b[3] = True
    assert a == BoolVector4(0b0011)
    assert b == BoolVector4(0b1011)

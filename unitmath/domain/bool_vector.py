"""
Fixed-width packed boolean vectors.

Bits are packed into ``DATA_SIZE = ceil(SIZE / 8)`` byte segments, bit ``i``
stored in segment ``i // 8`` at position ``i % 8`` (least significant first).
Padding bits past index ``SIZE - 1`` are always zero.

Every width is its own class, so operands of different widths never mix:

    from unitmath import BoolVector3, bool_vector_type

    v = BoolVector3(0b101)
    v[1] = True
    v.all()                          # True
    bool_vector_type(3) is BoolVector3   # True
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from numbers import Integral
from typing import ClassVar, Self

import numpy as np

from unitmath.domain.constants import BITS_PER_SEGMENT, SEGMENT_MAX
from unitmath.domain.debug import format_segments, format_value
from unitmath.domain.exceptions import BoolVectorIndexError, SegmentValueError
from unitmath.domain.tags import ZeroInitT
from unitmath.logging_config import get_logger

logger = get_logger(__name__)

# SIZE -> concrete class, first registration wins
_WIDTHS: dict[int, type[BoolVector]] = {}


def _segment_masks(size: int) -> np.ndarray:
    """Per-segment masks with the padding bits of the last segment cleared."""
    data_size = -(-size // BITS_PER_SEGMENT)
    masks = np.full(data_size, SEGMENT_MAX, dtype=np.uint8)
    tail = size % BITS_PER_SEGMENT
    if tail:
        masks[-1] = (1 << tail) - 1
    masks.setflags(write=False)
    return masks


class BoolVector:
    """Packed vector of ``SIZE`` bits.

    Abstract, subclasses set ``SIZE``; ``DATA_SIZE`` and the padding masks
    are derived from it when the subclass is created.
    """

    SIZE: ClassVar[int]
    DATA_SIZE: ClassVar[int]
    _MASKS: ClassVar[np.ndarray]

    __slots__ = ("_data",)

    # Make numpy defer to the operators below
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        size = getattr(cls, "SIZE", None)
        if not isinstance(size, Integral) or isinstance(size, bool):
            raise TypeError(f"{cls.__name__} must define an integer SIZE")
        if size < 1:
            raise ValueError(f"BoolVector size must be >= 1, got {size}")
        cls.DATA_SIZE = -(-size // BITS_PER_SEGMENT)
        cls._MASKS = _segment_masks(size)
        _WIDTHS.setdefault(size, cls)

    def __init__(self, *args: bool | int | ZeroInitT) -> None:
        """
        Construct a vector.

        Args:
            *args: nothing or ``ZeroInit`` for all bits false, a single
                ``bool`` to set every bit to it, or exactly ``DATA_SIZE``
                segment bytes. Padding bits of raw segments are cleared.

        Raises:
            TypeError: If called on the abstract base or with arguments of
                the wrong kind.
            SegmentValueError: If the segment count or a segment value
                doesn't fit the storage.
        """
        if not hasattr(type(self), "SIZE"):
            raise TypeError(
                "BoolVector is abstract, use bool_vector_type(n) for a concrete width"
            )

        if not args or (len(args) == 1 and isinstance(args[0], ZeroInitT)):
            self._data = np.zeros(self.DATA_SIZE, dtype=np.uint8)
        elif len(args) == 1 and isinstance(args[0], (bool, np.bool_)):
            if args[0]:
                self._data = self._MASKS.copy()
            else:
                self._data = np.zeros(self.DATA_SIZE, dtype=np.uint8)
        else:
            self._data = self._pack_segments(args)

    @classmethod
    def _pack_segments(cls, segments: tuple) -> np.ndarray:
        if len(segments) != cls.DATA_SIZE:
            raise SegmentValueError(
                f"{cls.__name__} expects {cls.DATA_SIZE} segment(s), got {len(segments)}"
            )

        values = []
        for segment in segments:
            if isinstance(segment, (bool, np.bool_)) or not isinstance(segment, Integral):
                raise TypeError(
                    f"Segment values must be integers, got {type(segment).__name__}"
                )
            if not 0 <= segment <= SEGMENT_MAX:
                raise SegmentValueError(f"Segment value {segment} doesn't fit in a byte")
            values.append(int(segment))

        data = np.array(values, dtype=np.uint8)
        masked = data & cls._MASKS
        if not np.array_equal(masked, data):
            logger.debug(f"Cleared padding bits of {cls.__name__} segments {values}")
        return masked

    @classmethod
    def _from_data(cls, data: np.ndarray) -> Self:
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def from_bits(cls, bits: Iterable[object]) -> Self:
        """Construct from exactly ``SIZE`` truthy values, index 0 first."""
        values = [bool(bit) for bit in bits]
        if len(values) != cls.SIZE:
            raise SegmentValueError(
                f"{cls.__name__} expects {cls.SIZE} bits, got {len(values)}"
            )
        return cls._from_data(
            np.packbits(np.array(values, dtype=bool), bitorder="little")
        )

    @property
    def data(self) -> bytes:
        """Raw segment bytes."""
        return self._data.tobytes()

    # Predicates

    def __bool__(self) -> bool:
        return self.any()

    def all(self) -> bool:
        return bool(np.array_equal(self._data, self._MASKS))

    def none(self) -> bool:
        return not self._data.any()

    def any(self) -> bool:
        return bool(self._data.any())

    # Bit access

    def _check_index(self, i: int) -> int:
        index = operator.index(i)
        if not 0 <= index < self.SIZE:
            logger.debug(f"Rejected bit index {index} of {type(self).__name__}")
            raise BoolVectorIndexError(index, self.SIZE)
        return index

    def get(self, i: int) -> bool:
        index = self._check_index(i)
        segment, bit = divmod(index, BITS_PER_SEGMENT)
        return bool((int(self._data[segment]) >> bit) & 1)

    def set(self, i: int, value: bool) -> None:
        index = self._check_index(i)
        segment, bit = divmod(index, BITS_PER_SEGMENT)
        if value:
            self._data[segment] |= np.uint8(1 << bit)
        else:
            self._data[segment] &= np.uint8(SEGMENT_MAX ^ (1 << bit))

    __getitem__ = get
    __setitem__ = set

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[bool]:
        bits = np.unpackbits(self._data, count=self.SIZE, bitorder="little")
        return (bool(bit) for bit in bits)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not np.array_equal(self._data, other._data)

    # Mutable through set() and the in-place operators
    __hash__ = None  # type: ignore[assignment]

    # Bitwise operators

    def __invert__(self) -> Self:
        return self._from_data(~self._data & self._MASKS)

    def __and__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._from_data(self._data & other._data)

    def __iand__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        self._data &= other._data
        return self

    def __or__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._from_data(self._data | other._data)

    def __ior__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        self._data |= other._data
        return self

    def __xor__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._from_data(self._data ^ other._data)

    def __ixor__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        self._data ^= other._data
        return self

    def __copy__(self) -> Self:
        return self._from_data(self._data.copy())

    def __repr__(self) -> str:
        return format_value("BoolVector", format_segments(self._data))


def bool_vector_type(size: int) -> type[BoolVector]:
    """Concrete ``BoolVector`` class for ``size`` bits, created on first use."""
    size = operator.index(size)
    if size < 1:
        raise ValueError(f"BoolVector size must be >= 1, got {size}")
    if size not in _WIDTHS:
        type(
            f"BoolVector{size}",
            (BoolVector,),
            {
                "__slots__": (),
                "__doc__": f"{size}-component bool vector",
                "__module__": __name__,
                "SIZE": size,
            },
        )
    return _WIDTHS[size]


class BoolVector2(BoolVector):
    """Two-component bool vector."""

    __slots__ = ()
    SIZE = 2


class BoolVector3(BoolVector):
    """Three-component bool vector."""

    __slots__ = ()
    SIZE = 3


class BoolVector4(BoolVector):
    """Four-component bool vector."""

    __slots__ = ()
    SIZE = 4

"""
Strongly typed angle units.

Each unit and precision combination is its own class, so degrees and
radians (or float32 and float64 values) never mix without an explicit
conversion:

    Deg   degrees, float32
    Rad   radians, float32
    Degd  degrees, float64
    Radd  radians, float64

Usage:
    from unitmath import Deg, Rad

    right = Deg(90.0)
    Rad(right)              # Rad(1.5708)
    right / Deg(45.0)       # 2.0, a bare scalar
    right + Rad(1.0)        # TypeError, convert first
"""

from __future__ import annotations

import numbers
from typing import ClassVar, Literal, Self, overload

import numpy as np

from unitmath.domain.constants import DEG_TO_RAD, DOUBLE, FLOAT, RAD_TO_DEG
from unitmath.domain.debug import format_scalar, format_value
from unitmath.domain.tags import ZeroInit, ZeroInitT

AngleUnit = Literal["deg", "rad"]

_UNIT_FACTORS: dict[tuple[AngleUnit, AngleUnit], float] = {
    ("deg", "rad"): DEG_TO_RAD,
    ("rad", "deg"): RAD_TO_DEG,
}

# (unit, precision) -> concrete class, filled by _Angle.__init_subclass__
_VARIANTS: dict[tuple[AngleUnit, type[np.floating]], type[_Angle]] = {}


def _ieee() -> np.errstate:
    # Inf/NaN propagate silently
    return np.errstate(all="ignore")


class _Angle:
    """Scalar value tagged with an angle unit and a precision."""

    UNIT: ClassVar[AngleUnit]
    TYPE: ClassVar[type[np.floating]]

    __slots__ = ("_value",)

    # Make numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _VARIANTS[cls.UNIT, cls.TYPE] = cls

    def __init__(self, value: float | _Angle | ZeroInitT = ZeroInit) -> None:
        if isinstance(value, ZeroInitT):
            self._value = self.TYPE(0)
        elif isinstance(value, _Angle):
            self._value = self._convert(value)
        elif isinstance(value, numbers.Real):
            with _ieee():
                self._value = self.TYPE(value)
        else:
            raise TypeError(
                f"{type(self).__name__}() expects a real number or an angle, "
                f"got {type(value).__name__}"
            )

    @classmethod
    def _convert(cls, other: _Angle) -> np.floating:
        """Convert the unit in the source precision, then cast."""
        value = other._value
        with _ieee():
            if other.UNIT != cls.UNIT:
                value = value * other.TYPE(_UNIT_FACTORS[other.UNIT, cls.UNIT])
            return cls.TYPE(value)

    def _scalar(self, other: object) -> np.floating | None:
        """Cast a bare real to the class precision, ``None`` for anything else.

        ``bool`` is a real number here, so ``Deg(2.0) * True == Deg(2.0)``.
        """
        if isinstance(other, _Angle) or not isinstance(other, numbers.Real):
            return None
        with _ieee():
            return self.TYPE(other)

    def to_underlying(self) -> np.floating:
        """Bare value in the class precision, without the unit."""
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    # Conversions

    def to_deg(self) -> _Angle:
        return _VARIANTS["deg", self.TYPE](self)

    def to_rad(self) -> _Angle:
        return _VARIANTS["rad", self.TYPE](self)

    def to_float(self) -> _Angle:
        return _VARIANTS[self.UNIT, FLOAT](self)

    def to_double(self) -> _Angle:
        return _VARIANTS[self.UNIT, DOUBLE](self)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value == other._value)

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value != other._value)

    def __lt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value < other._value)

    def __gt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value > other._value)

    def __le__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value <= other._value)

    def __ge__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value >= other._value)

    # Mutable through the in-place operators
    __hash__ = None  # type: ignore[assignment]

    # Arithmetic

    def __neg__(self) -> Self:
        return type(self)(-self._value)

    def __pos__(self) -> Self:
        return type(self)(self._value)

    def __abs__(self) -> Self:
        return type(self)(abs(self._value))

    def __add__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        with _ieee():
            return type(self)(self._value + other._value)

    def __iadd__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        with _ieee():
            self._value = self._value + other._value
        return self

    def __sub__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        with _ieee():
            return type(self)(self._value - other._value)

    def __isub__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        with _ieee():
            self._value = self._value - other._value
        return self

    def __mul__(self, other: float) -> Self:
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        with _ieee():
            return type(self)(self._value * scalar)

    __rmul__ = __mul__

    def __imul__(self, other: float) -> Self:
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        with _ieee():
            self._value = self._value * scalar
        return self

    @overload
    def __truediv__(self, other: Self) -> np.floating: ...

    @overload
    def __truediv__(self, other: float) -> Self: ...

    def __truediv__(self, other):
        # Ratio of two same-unit angles is dimensionless
        if type(other) is type(self):
            with _ieee():
                return self._value / other._value
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        with _ieee():
            return type(self)(self._value / scalar)

    def __itruediv__(self, other: float) -> Self:
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        with _ieee():
            self._value = self._value / scalar
        return self

    def __copy__(self) -> Self:
        return type(self)(self._value)

    def __repr__(self) -> str:
        return format_value(type(self).__name__, format_scalar(self._value))


class Deg(_Angle):
    """Float degrees."""

    __slots__ = ()
    UNIT: ClassVar[AngleUnit] = "deg"
    TYPE: ClassVar[type[np.floating]] = FLOAT


class Rad(_Angle):
    """Float radians."""

    __slots__ = ()
    UNIT: ClassVar[AngleUnit] = "rad"
    TYPE: ClassVar[type[np.floating]] = FLOAT


class Degd(_Angle):
    """Double degrees."""

    __slots__ = ()
    UNIT: ClassVar[AngleUnit] = "deg"
    TYPE: ClassVar[type[np.floating]] = DOUBLE


class Radd(_Angle):
    """Double radians."""

    __slots__ = ()
    UNIT: ClassVar[AngleUnit] = "rad"
    TYPE: ClassVar[type[np.floating]] = DOUBLE

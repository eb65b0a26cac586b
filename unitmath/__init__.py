"""Unit-tagged angles and packed boolean vectors."""

from unitmath.domain import (
    BoolVector,
    BoolVector2,
    BoolVector3,
    BoolVector4,
    BoolVectorIndexError,
    Deg,
    Degd,
    Rad,
    Radd,
    SegmentValueError,
    UnitMathException,
    ZeroInit,
    ZeroInitT,
    bool_vector_type,
)

__all__ = [
    "Deg",
    "Rad",
    "Degd",
    "Radd",
    "BoolVector",
    "BoolVector2",
    "BoolVector3",
    "BoolVector4",
    "bool_vector_type",
    "ZeroInit",
    "ZeroInitT",
    "BoolVectorIndexError",
    "SegmentValueError",
    "UnitMathException",
]

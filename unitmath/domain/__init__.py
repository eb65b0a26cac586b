# unitmath/domain/__init__.py
from .tags import ZeroInit, ZeroInitT
from .angle import Deg, Degd, Rad, Radd
from .bool_vector import (
    BoolVector,
    BoolVector2,
    BoolVector3,
    BoolVector4,
    bool_vector_type,
)
from .exceptions import BoolVectorIndexError, SegmentValueError, UnitMathException

__all__ = [
    "ZeroInit",
    "ZeroInitT",
    "Deg",
    "Rad",
    "Degd",
    "Radd",
    "BoolVector",
    "BoolVector2",
    "BoolVector3",
    "BoolVector4",
    "bool_vector_type",
    "BoolVectorIndexError",
    "SegmentValueError",
    "UnitMathException",
]

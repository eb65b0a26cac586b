class UnitMathException(Exception):
    """
    Base exception for all unitmath errors.
    """


class BoolVectorIndexError(UnitMathException, IndexError):
    """
    Raised when a bit index is outside of [0, SIZE).
    Never clamped or wrapped.
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Bit index {index} out of range for a {size}-bit vector"
        )


class SegmentValueError(UnitMathException, ValueError):
    """
    Raised when raw segment data doesn't fit the vector storage.
    """

"""Canonical debug formatting shared by the value types."""

import numpy as np

from unitmath.domain.constants import BITS_PER_SEGMENT, DEBUG_DIGITS


def format_scalar(value: np.floating) -> str:
    """Format a scalar with the digit count of its precision.

    Uses ``%g`` style, so integral values are printed without a fraction
    (``45``), and no trailing newline is produced.
    """
    digits = DEBUG_DIGITS[type(value)]
    return f"{float(value):.{digits}g}"


def format_segments(segments: np.ndarray) -> str:
    """Format packed segments as binary, most significant bit first.

    Segments are printed in storage order separated by a space, so a
    9-bit vector renders as ``0b00000001 0b00000001``.
    """
    return " ".join(
        f"0b{int(segment):0{BITS_PER_SEGMENT}b}" for segment in segments
    )


def format_value(name: str, body: str) -> str:
    return f"{name}({body})"

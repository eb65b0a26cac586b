"""Constants used across the package."""

import math

import numpy as np

# Angle unit conversion factors
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Scalar precisions of the angle types
FLOAT = np.float32
DOUBLE = np.float64

# Significant digits printed by the debug formatter, per precision
DEBUG_DIGITS = {
    FLOAT: 6,
    DOUBLE: 15,
}

# Packed bit storage
BITS_PER_SEGMENT = 8
SEGMENT_MAX = 0xFF

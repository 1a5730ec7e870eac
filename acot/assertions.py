import math
import struct


def is_nan(x: float) -> bool:
    return math.isnan(x)


def is_positive_zero(x: float) -> bool:
    return x == 0.0 and math.copysign(1.0, x) > 0.0


def is_negative_zero(x: float) -> bool:
    return x == 0.0 and math.copysign(1.0, x) < 0.0


def _to_ordinal(x: float) -> int:
    """
    Maps a non-NaN double to an integer such that adjacent doubles map to adjacent
    integers. 0.0 maps to 0 and -0.0 to -1.
    """
    n = struct.unpack("<q", struct.pack("<d", x))[0]
    if n < 0:
        n = ~(n + 2 ** 63)
    return n


def ulp_distance(a: float, b: float) -> int:
    """
    Number of steps between two doubles along the sequence of representable values.

    :raises ValueError: if either argument is NaN.
    """
    if math.isnan(a) or math.isnan(b):
        raise ValueError("ULP distance is undefined for NaN")
    return abs(_to_ordinal(float(a)) - _to_ordinal(float(b)))

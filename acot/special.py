import math

from .constants import HALF_PI


def acot(x: float) -> float:
    """
    Computes the inverse cotangent of a double-precision floating-point number.

    The result lies in (-π/2, π/2]. The sign of zero is significant: `acot(0.0)` is
    π/2 and `acot(-0.0)` is -π/2, while the infinities map to zeros of the same
    sign. NaN propagates.

    >>> acot(1.0)
    0.7853981633974483
    >>> acot(-0.0)
    -1.5707963267948966
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        return math.copysign(HALF_PI, x)
    if math.isinf(x):
        return math.copysign(0.0, x)
    return math.atan(1.0 / x)

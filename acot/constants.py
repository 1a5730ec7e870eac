import math
import sys

#: Difference between 1.0 and the next representable double.
EPS: float = sys.float_info.epsilon

PINF: float = math.inf
NINF: float = -math.inf

HALF_PI: float = math.pi / 2.0

import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

from . import process
from .assertions import ulp_distance
from .constants import EPS
from .fixtures import Fixture


@dataclass
class Deviation:
    x: float
    y: float
    expected: float
    delta: float
    tolerance: float

    def __str__(self) -> str:
        return (
            f"x: {self.x}. y: {self.y}. E: {self.expected}. "
            f"tol: {self.tolerance}. Δ: {self.delta}."
        )


def tolerance(expected: float, multiplier: Optional[float] = None) -> float:
    if multiplier is None:
        multiplier = process.tolerance_multiplier
    return multiplier * EPS * abs(expected)


def within_tolerance(
    y: float, expected: float, multiplier: Optional[float] = None
) -> bool:
    """
    Whether `y` matches `expected` exactly, or lies within
    `multiplier * EPS * |expected|` of it.
    """
    if y == expected:
        return True
    return abs(y - expected) <= tolerance(expected, multiplier)


def deviations(
    function: Callable[[float], float],
    fixture: Fixture,
    multiplier: Optional[float] = None,
) -> List[Deviation]:
    """
    Evaluates `function` on every input of `fixture`, and collects the points where
    the result falls outside tolerance of the reference output.
    """
    found = []
    for (x, expected) in fixture:
        y = function(x)
        if within_tolerance(y, expected, multiplier):
            continue

        deviation = Deviation(
            x=x,
            y=y,
            expected=expected,
            delta=abs(y - expected),
            tolerance=tolerance(expected, multiplier),
        )
        if not (math.isnan(y) or math.isnan(expected)):
            logger.trace(f"{ulp_distance(y, expected)} ulp off at x={x}.")
        logger.warning(f"Outside tolerance in {fixture.name}: {deviation}")
        found.append(deviation)

    logger.debug(
        f"Checked {len(fixture)} points of {fixture.name}: {len(found)} deviations."
    )
    return found

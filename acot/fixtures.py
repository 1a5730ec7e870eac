import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple

import numpy as np
from loguru import logger
from typing_extensions import Literal

from . import process
from .exceptions import FixtureError

Magnitude = Literal["medium", "large", "larger", "huge"]
Sign = Literal["positive", "negative"]

MAGNITUDES: Tuple[Magnitude, ...] = ("medium", "large", "larger", "huge")
SIGNS: Tuple[Sign, ...] = ("positive", "negative")


@dataclass
class Fixture:
    """
    A group of reference points: `expected[i]` is the reference output for `x[i]`.
    """

    name: str
    x: np.ndarray
    expected: np.ndarray

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for (x, expected) in zip(self.x, self.expected):
            yield float(x), float(expected)


def _as_float_array(values, key: str, path: Path) -> np.ndarray:
    if not isinstance(values, list):
        raise FixtureError(f"{path}: `{key}` must be a list")
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exception:
        raise FixtureError(f"{path}: `{key}` must contain only numbers") from exception
    if array.ndim != 1:
        raise FixtureError(f"{path}: `{key}` must be a flat list")
    return array


def load_fixture(path: Path) -> Fixture:
    """
    Reads a fixture file holding two parallel sequences, `x` and `expected`.

    :param path: Path to a JSON file of the form `{"x": [...], "expected": [...]}`.
    :return: The parsed fixture, named after the file stem.
    :raises FixtureError: If the file cannot be read or is malformed.
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError as exception:
        raise FixtureError(f"fixture file not found: {path}") from exception
    except json.JSONDecodeError as exception:
        raise FixtureError(f"{path}: invalid JSON: {exception}") from exception

    if not isinstance(data, dict):
        raise FixtureError(f"{path}: expected a JSON object")
    for key in ("x", "expected"):
        if key not in data:
            raise FixtureError(f"{path}: missing `{key}`")

    x = _as_float_array(data["x"], "x", path)
    expected = _as_float_array(data["expected"], "expected", path)
    if len(x) != len(expected):
        raise FixtureError(
            f"{path}: `x` has {len(x)} values but `expected` has {len(expected)}"
        )

    logger.debug(f"Loaded {len(x)} points from {path}.")
    return Fixture(name=path.stem, x=x, expected=expected)


def load_group(
    magnitude: Magnitude, sign: Sign, directory: Optional[Path] = None
) -> Fixture:
    """
    Loads the fixture group for one magnitude band and sign from `directory`, which
    defaults to `process.fixture_path`.
    """
    if magnitude not in MAGNITUDES:
        raise FixtureError(f"unknown magnitude: {magnitude!r}")
    if sign not in SIGNS:
        raise FixtureError(f"unknown sign: {sign!r}")

    if directory is None:
        directory = process.fixture_path
    return load_fixture(Path(directory) / f"{magnitude}_{sign}.json")


def iter_groups(directory: Optional[Path] = None) -> Iterator[Fixture]:
    for magnitude in MAGNITUDES:
        for sign in SIGNS:
            yield load_group(magnitude, sign, directory)

"""
Holds some per-process settings used by the accuracy harness.
"""

from pathlib import Path

#: Reference fixtures (`<magnitude>_<sign>.json`) are read from here.
fixture_path: Path = Path(__file__).parent / "test" / "fixtures"

#: Points are accepted when within `tolerance_multiplier * EPS * |expected|`.
tolerance_multiplier: float = 1.0

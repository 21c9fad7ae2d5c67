"""Free-text number parsing and small numeric helpers shared by both scorers."""

import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

# "2 years", "1 year 6 months", "18 Months"
_YEARS_RE = re.compile(r"(\d+)\s*year", re.IGNORECASE)
_MONTHS_RE = re.compile(r"(\d+)\s*month", re.IGNORECASE)
_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)")

LEVEL_ORDINALS: dict[str, int] = {
    "entry": 1,
    "mid": 2,
    "senior": 3,
    "executive": 4,
}
_DEFAULT_LEVEL = LEVEL_ORDINALS["mid"]


def is_number(value: object) -> bool:
    """True for finite ints and floats. Bools are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def parse_years(value: object) -> float | None:
    """Parse a duration like "2 years 3 months" into fractional years.

    Numbers pass through unchanged. Text without a year/month unit falls back
    to the first number found ("5+" -> 5.0). Returns None when nothing
    numeric can be read.
    """
    if is_number(value):
        return float(value)
    if not isinstance(value, str) or not value.strip():
        return None

    year_match = _YEARS_RE.search(value)
    month_match = _MONTHS_RE.search(value)
    if year_match or month_match:
        years = int(year_match.group(1)) if year_match else 0
        months = int(month_match.group(1)) if month_match else 0
        total = years + months / 12
        if total > 0:
            return total

    number_match = _NUMBER_RE.search(value)
    if number_match:
        return float(number_match.group(1))
    return None


def parse_experience_gap(value: object) -> float | None:
    """Read the first number in a gap description ("2 years short" -> 2.0)."""
    if is_number(value):
        return float(value)
    if not isinstance(value, str):
        return None
    match = _NUMBER_RE.search(value)
    return float(match.group(1)) if match else None


def level_ordinal(label: str | None) -> int:
    """Seniority rank, entry=1 .. executive=4. Unknown labels rank as mid."""
    if not label:
        return _DEFAULT_LEVEL
    return LEVEL_ORDINALS.get(label.strip().lower(), _DEFAULT_LEVEL)


def to_record(value: object) -> dict[str, Any] | None:
    """Plain dict view of an analysis given as a mapping or pydantic model."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return dict(value)
    return None


def clamp_score(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    if math.isnan(value):
        return lo
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    # Scores ending in .5 round up (72.5 -> 73), never to even.
    return int(math.floor(value + 0.5))

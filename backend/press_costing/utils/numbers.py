import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any, Optional, Tuple

SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[x×]\s*(\d+(?:\.\d+)?)\s*(mm|cm)?\s*$", re.I)
COLORS_PLUS_RE = re.compile(r"(\d+)\s*\+\s*(\d+)")
DIGITS_RE = re.compile(r"\d+")


def to_number(value: Any) -> Optional[float]:
    """Coerce form/database values to a finite float, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)):
        try:
            v = float(value)
        except (ValueError, OverflowError):
            return None
        return v if math.isfinite(v) else None
    if isinstance(value, str):
        s = value.strip().replace(",", "")
        if not s or "_" in s:
            return None
        try:
            v = float(s)
        except ValueError:
            return None
        return v if math.isfinite(v) else None
    return None


def parse_colors_count(value: Any) -> int:
    """'4+4' -> 8, '4' -> 4, '' -> 0."""
    if value is None or value == "":
        return 0
    s = str(value)
    plus = COLORS_PLUS_RE.search(s)
    if plus:
        return int(plus.group(1)) + int(plus.group(2))
    single = DIGITS_RE.search(s)
    return int(single.group(0)) if single else 0


def parse_size(value: Optional[str]) -> Optional[Tuple[float, float]]:
    """Parse '90x55mm' or '9x5.5cm' into (width, height) in cm.

    A size without a unit is taken to be in cm.
    """
    if not value:
        return None
    m = SIZE_RE.match(value)
    if not m:
        return None
    w, h = float(m.group(1)), float(m.group(2))
    if (m.group(3) or "").lower() == "mm":
        w, h = w / 10, h / 10
    return w, h

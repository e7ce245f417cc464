# bikeflow/traffic/minutes.py
from __future__ import annotations

import numbers

MINUTES_PER_DAY = 1440
UNFILTERED = -1


def minutes_since_midnight(ts) -> int:
    """
    Minute-of-day of a datetime / pandas Timestamp, taken at face value
    (no timezone conversion).
    """
    return int(ts.hour) * 60 + int(ts.minute)


def validate_filter(value) -> int:
    """
    Filter values are ints in [-1, 1440]:
      -1        -> no filter
      0..1439   -> window center
      1440      -> end-of-day midnight, same as 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"filter must be an int, got {value!r}")
    value = int(value)
    if value < UNFILTERED or value > MINUTES_PER_DAY:
        raise ValueError(
            f"filter must be in [{UNFILTERED}, {MINUTES_PER_DAY}], got {value}"
        )
    if value == MINUTES_PER_DAY:
        return 0
    return value


def format_minute(m: int) -> str:
    if m == UNFILTERED:
        return "All day"
    m = int(m) % MINUTES_PER_DAY
    return f"{m // 60:02d}:{m % 60:02d}"

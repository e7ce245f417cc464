# bikeflow/traffic/window.py
from __future__ import annotations

import numbers
from typing import List

from bikeflow.traffic.bucketer import slot_count
from bikeflow.traffic.minutes import MINUTES_PER_DAY, UNFILTERED, validate_filter


DEFAULT_HALF_WIDTH_MINUTES = 60


def resolve_window(
    center: int,
    half_width: int = DEFAULT_HALF_WIDTH_MINUTES,
    n_slots: int = MINUTES_PER_DAY,
) -> List[int] | None:
    """
    Slot indices in [center - half_width, center + half_width], wrapping
    around n_slots. Returns None when center is the UNFILTERED sentinel,
    meaning "use every trip".

    All arguments are in slots (minutes when n_slots == 1440).

      center=0,    h=60 -> [1380..1439] + [0..60]
      center=1439, h=60 -> [1379..1439] + [0..59]
    """
    if center == UNFILTERED:
        return None

    n_slots = int(n_slots)
    half_width = int(half_width)
    if n_slots <= 0:
        raise ValueError("n_slots must be > 0")
    if half_width < 0 or 2 * half_width + 1 > n_slots:
        raise ValueError(
            f"half_width must be in [0, {(n_slots - 1) // 2}], got {half_width}"
        )
    if isinstance(center, bool) or not isinstance(center, numbers.Integral):
        raise ValueError(f"center must be an int, got {center!r}")
    center = int(center)
    if center < 0 or center >= n_slots:
        raise ValueError(f"center must be in [0, {n_slots - 1}], got {center}")

    lo = (center - half_width + n_slots) % n_slots
    hi = (center + half_width) % n_slots

    if lo <= hi:
        return list(range(lo, hi + 1))

    # straddles midnight
    return list(range(lo, n_slots)) + list(range(0, hi + 1))


def resolve_minute_window(
    filter_value: int,
    *,
    half_width_minutes: int = DEFAULT_HALF_WIDTH_MINUTES,
    bucket_minutes: int = 1,
) -> List[int] | None:
    """
    Same as resolve_window, but takes a raw filter value in minutes
    (validated, -1..1440) and converts it to slots of bucket_minutes.
    """
    m = validate_filter(filter_value)
    if m == UNFILTERED:
        return None

    n_slots = slot_count(bucket_minutes)
    bucket_minutes = int(bucket_minutes)
    half_width_minutes = int(half_width_minutes)
    if half_width_minutes % bucket_minutes != 0:
        raise ValueError("half_width_minutes must be a multiple of bucket_minutes")

    return resolve_window(
        m // bucket_minutes,
        half_width_minutes // bucket_minutes,
        n_slots,
    )

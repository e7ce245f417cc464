from __future__ import annotations

from datetime import datetime

from bikeflow.traffic.types import Trip


def at(hhmm: str, day: int = 1) -> datetime:
    h, m = hhmm.split(":")
    return datetime(2024, 9, day, int(h), int(m))


def trip(start: str, end: str, started: str, ended: str, *, end_day: int = 1) -> Trip:
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=at(started),
        ended_at=at(ended, end_day),
    )

# bikeflow/traffic/aggregate.py
from __future__ import annotations

from typing import Dict, Iterable, Sequence

from bikeflow.traffic.bucketer import TripBuckets
from bikeflow.traffic.types import Trip

DEPARTURES = "departures"
ARRIVALS = "arrivals"


def _station_key(kind: str):
    if kind == DEPARTURES:
        return lambda t: t.start_station_id
    if kind == ARRIVALS:
        return lambda t: t.end_station_id
    raise ValueError(f"kind must be '{DEPARTURES}' or '{ARRIVALS}', got {kind!r}")


def count_trips(trips: Iterable[Trip], kind: str) -> Dict[str, int]:
    """
    station_id -> number of trips, keyed by start station for departures
    and end station for arrivals. Stations with no trips are absent.
    """
    key = _station_key(kind)
    counts: Dict[str, int] = {}
    for t in trips:
        sid = key(t)
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def select_trips(buckets: TripBuckets, kind: str, window: Sequence[int]):
    """
    Yield the trips in the given slots, in window order.
    """
    slots = buckets.departures if kind == DEPARTURES else buckets.arrivals
    for slot in window:
        for i in slots[slot]:
            yield buckets.trips[i]


def aggregate(
    buckets: TripBuckets,
    kind: str,
    window: Sequence[int] | None,
) -> Dict[str, int]:
    """
    Per-station counts for the slots in window; window=None counts every trip.
    """
    _station_key(kind)
    if window is None:
        return count_trips(buckets.trips, kind)
    return count_trips(select_trips(buckets, kind, window), kind)

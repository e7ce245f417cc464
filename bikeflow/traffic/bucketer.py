# bikeflow/traffic/bucketer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from bikeflow.traffic.minutes import MINUTES_PER_DAY, minutes_since_midnight
from bikeflow.traffic.types import Trip


DEFAULT_BUCKET_MINUTES = 1


def slot_count(bucket_minutes: int) -> int:
    bucket_minutes = int(bucket_minutes)
    if bucket_minutes <= 0:
        raise ValueError("bucket_minutes must be > 0")
    if MINUTES_PER_DAY % bucket_minutes != 0:
        raise ValueError("bucket_minutes must divide 1440 (e.g., 60, 30, 15, 10, 5, 1)")
    return MINUTES_PER_DAY // bucket_minutes


@dataclass(frozen=True)
class TripBuckets:
    """
    trips:      every ingested trip, owned here
    departures: slot -> indices into trips, keyed by start time
    arrivals:   slot -> indices into trips, keyed by end time
    """
    trips: Sequence[Trip]
    departures: Sequence[Sequence[int]]
    arrivals: Sequence[Sequence[int]]
    bucket_minutes: int = DEFAULT_BUCKET_MINUTES

    @property
    def n_slots(self) -> int:
        return len(self.departures)


def bucket_trips(
    trips: Sequence[Trip],
    *,
    bucket_minutes: int = DEFAULT_BUCKET_MINUTES,
) -> TripBuckets:
    """
    Put every trip in exactly one departure slot and one arrival slot.
    Trips are not filtered on station ids; unknown stations still occupy a slot.
    """
    n = slot_count(bucket_minutes)
    trips = tuple(trips)

    departures: List[List[int]] = [[] for _ in range(n)]
    arrivals: List[List[int]] = [[] for _ in range(n)]

    for i, trip in enumerate(trips):
        start_slot = minutes_since_midnight(trip.started_at) // bucket_minutes
        end_slot = minutes_since_midnight(trip.ended_at) // bucket_minutes
        departures[start_slot].append(i)
        arrivals[end_slot].append(i)

    return TripBuckets(
        trips=trips,
        departures=tuple(tuple(b) for b in departures),
        arrivals=tuple(tuple(b) for b in arrivals),
        bucket_minutes=int(bucket_minutes),
    )

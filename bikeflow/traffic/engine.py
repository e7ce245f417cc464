# bikeflow/traffic/engine.py
from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np
from colorama import Fore, Style

from bikeflow.traffic.aggregate import ARRIVALS, DEPARTURES, aggregate
from bikeflow.traffic.bucketer import DEFAULT_BUCKET_MINUTES, bucket_trips
from bikeflow.traffic.minutes import MINUTES_PER_DAY, UNFILTERED, validate_filter
from bikeflow.traffic.types import Station, StationRegistry, TrafficView, Trip
from bikeflow.traffic.view import build_traffic_view, unknown_station_counts
from bikeflow.traffic.window import DEFAULT_HALF_WIDTH_MINUTES, resolve_minute_window


class TrafficEngine:
    """
    Owns one ingested data load: the station registry and the trip buckets.
    Both are read-only after construction, so every query is a pure
    window -> aggregate -> view pass.

    Build a new engine for a new data load; nothing is shared between them.
    """

    def __init__(
        self,
        stations: Sequence[Station] | StationRegistry,
        trips: Sequence[Trip],
        *,
        half_width_minutes: int = DEFAULT_HALF_WIDTH_MINUTES,
        bucket_minutes: int = DEFAULT_BUCKET_MINUTES,
        verbose: bool = False,
    ):
        if isinstance(stations, StationRegistry):
            self.registry = stations
        else:
            self.registry = StationRegistry(stations)

        self.half_width_minutes = int(half_width_minutes)
        self.bucket_minutes = int(bucket_minutes)

        # fail at construction rather than on the first filtered query
        resolve_minute_window(
            0,
            half_width_minutes=self.half_width_minutes,
            bucket_minutes=self.bucket_minutes,
        )

        if verbose:
            print(
                f"{Fore.CYAN}Bucketing {len(trips):,} trips "
                f"(bucket_minutes={self.bucket_minutes})…{Style.RESET_ALL}"
            )
        self.buckets = bucket_trips(trips, bucket_minutes=self.bucket_minutes)

        # the all-day maps never change for this load
        self._all_departures = aggregate(self.buckets, DEPARTURES, None)
        self._all_arrivals = aggregate(self.buckets, ARRIVALS, None)

        if verbose:
            unknown = set(unknown_station_counts(self.registry, self._all_departures))
            unknown |= set(unknown_station_counts(self.registry, self._all_arrivals))
            if unknown:
                print(
                    f"{Fore.YELLOW}{len(unknown)} station ids in trips are not "
                    f"in the station registry{Style.RESET_ALL}"
                )
            print(
                f"{Fore.GREEN}Traffic engine ready: {len(self.registry):,} stations, "
                f"{len(self.buckets.trips):,} trips.{Style.RESET_ALL}"
            )

    @property
    def trip_count(self) -> int:
        return len(self.buckets.trips)

    def window(self, filter_value: int) -> List[int] | None:
        return resolve_minute_window(
            filter_value,
            half_width_minutes=self.half_width_minutes,
            bucket_minutes=self.bucket_minutes,
        )

    def _counts(self, kind: str, window: List[int] | None) -> Dict[str, int]:
        """
        Counts for one side. The all-day maps are returned as-is, not copied.
        """
        if window is None:
            return self._all_departures if kind == DEPARTURES else self._all_arrivals
        return aggregate(self.buckets, kind, window)

    def departures(self, filter_value: int = UNFILTERED) -> Dict[str, int]:
        return dict(self._counts(DEPARTURES, self.window(filter_value)))

    def arrivals(self, filter_value: int = UNFILTERED) -> Dict[str, int]:
        return dict(self._counts(ARRIVALS, self.window(filter_value)))

    def view(self, filter_value: int = UNFILTERED) -> TrafficView:
        filter_value = validate_filter(filter_value)
        window = self.window(filter_value)

        return TrafficView(
            filter_value=filter_value,
            records=build_traffic_view(
                self.registry,
                self._counts(DEPARTURES, window),
                self._counts(ARRIVALS, window),
            ),
            window=window,
        )

    def departure_profile(self, bin_minutes: int = 60) -> List[int]:
        """
        Total departures per bin_minutes bin across the day (24 bins by default).
        """
        bin_minutes = int(bin_minutes)
        if bin_minutes <= 0 or MINUTES_PER_DAY % bin_minutes != 0:
            raise ValueError("bin_minutes must be > 0 and divide 1440")
        if bin_minutes % self.bucket_minutes != 0:
            raise ValueError("bin_minutes must be a multiple of bucket_minutes")

        per_bin = bin_minutes // self.bucket_minutes
        sizes = np.fromiter(
            (len(idxs) for idxs in self.buckets.departures),
            dtype=np.int64,
            count=self.buckets.n_slots,
        )
        return sizes.reshape(-1, per_bin).sum(axis=1).astype(int).tolist()


class TrafficFilter:
    """
    Filter lifecycle on top of an engine:
      Unfiltered -> Filtered(minute) on set(), back to Unfiltered on clear().
    Each transition rebuilds the view; only the latest view is kept.
    """

    def __init__(self, engine: TrafficEngine):
        self.engine = engine
        self.value = UNFILTERED
        self.view = engine.view(UNFILTERED)

    @property
    def is_filtered(self) -> bool:
        return self.value != UNFILTERED

    def set(self, filter_value: int) -> TrafficView:
        view = self.engine.view(filter_value)
        self.value = view.filter_value
        self.view = view
        return view

    def clear(self) -> TrafficView:
        return self.set(UNFILTERED)

# bikeflow/traffic/view.py
from __future__ import annotations

from typing import Dict, List, Mapping

from bikeflow.traffic.types import StationRegistry, TrafficRecord


def build_traffic_view(
    registry: StationRegistry,
    departures: Mapping[str, int],
    arrivals: Mapping[str, int],
) -> List[TrafficRecord]:
    """
    One record per registered station, in registry order.
    Missing counts default to 0; ids that only appear in the count maps
    are ignored.
    """
    records: List[TrafficRecord] = []
    for s in registry:
        records.append(
            TrafficRecord(
                station=s,
                arrivals=int(arrivals.get(s.station_id, 0)),
                departures=int(departures.get(s.station_id, 0)),
            )
        )
    return records


def unknown_station_counts(
    registry: StationRegistry,
    counts: Mapping[str, int],
) -> Dict[str, int]:
    """
    Counts for ids the registry doesn't know about.
    """
    return {sid: c for sid, c in counts.items() if sid not in registry}

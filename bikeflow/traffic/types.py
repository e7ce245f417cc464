# bikeflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, List


@dataclass(frozen=True)
class Station:
    station_id: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime


@dataclass(frozen=True)
class TrafficRecord:
    """
    A station plus its counts for the active filter.
    total_traffic is always arrivals + departures.
    """
    station: Station
    arrivals: int
    departures: int

    @property
    def total_traffic(self) -> int:
        return self.arrivals + self.departures

    def to_dict(self) -> dict:
        return {
            "station_id": self.station.station_id,
            "name": self.station.name,
            "lat": self.station.lat,
            "lon": self.station.lon,
            "arrivals": self.arrivals,
            "departures": self.departures,
            "total_traffic": self.total_traffic,
        }


@dataclass(frozen=True)
class TrafficView:
    filter_value: int
    records: List[TrafficRecord]
    window: List[int] | None = None

    @property
    def max_total_traffic(self) -> int:
        return max((r.total_traffic for r in self.records), default=0)


class StationRegistry:
    """
    Ordered, id-unique set of known stations.
    The first station seen for an id wins.
    """

    def __init__(self, stations):
        self._by_id: Dict[str, Station] = {}
        for s in stations:
            if s.station_id in self._by_id:
                continue
            self._by_id[s.station_id] = s

    def __iter__(self) -> Iterator[Station]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, station_id) -> bool:
        return str(station_id) in self._by_id

    def get(self, station_id) -> Station | None:
        return self._by_id.get(str(station_id))

    def ids(self) -> List[str]:
        return list(self._by_id)

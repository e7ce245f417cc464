from __future__ import annotations

import pytest

from bikeflow.traffic.types import Station

from tripdata import trip


@pytest.fixture
def stations():
    return [
        Station("A", "King St W / Bay St", 43.6479, -79.3805),
        Station("B", "Queen St E / Broadview", 43.6590, -79.3490),
        Station("C", "Union Station", 43.6452, -79.3806),
    ]


@pytest.fixture
def scenario_trips():
    return [
        trip("A", "B", "08:05", "08:20"),
        trip("B", "A", "08:50", "09:10"),
        trip("A", "A", "23:50", "00:10", end_day=2),
    ]

from __future__ import annotations

import json
import textwrap
from datetime import datetime

import pytest

from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trip_csv


def _write_stations(path, stations):
    path.write_text(json.dumps({"data": {"stations": stations}}), encoding="utf-8")


def test_load_stations(tmp_path):
    p = tmp_path / "station_information.json"
    _write_stations(
        p,
        [
            {"station_id": 7000, "name": "Fort York", "lat": 43.639, "lon": -79.396, "capacity": 35},
            {"station_id": "7001", "name": "Wellesley", "lat": 43.667, "lon": -79.386},
            {"station_id": "7002", "name": "No coords"},
            {"station_id": "7000", "name": "Duplicate", "lat": 0, "lon": 0},
        ],
    )

    registry = load_stations(p)
    assert registry.ids() == ["7000", "7001"]
    assert registry.get("7000").name == "Fort York"
    assert registry.get(7001).lat == pytest.approx(43.667)


def test_load_stations_rejects_other_json(tmp_path):
    p = tmp_path / "x.json"
    p.write_text(json.dumps({"stations": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_stations(p)


def test_load_trip_csv(tmp_path):
    csv_text = textwrap.dedent(
        """\
        Trip Id,Trip  Duration,Start Station Id,Start Time,Start Station Name,End Station Id,End Time,End Station Name,Bike Id,User Type
        1,900,7000,09/01/2024 08:05,Fort York,7001,09/01/2024 08:20,Wellesley,100,Annual Member
        2,600,7001,09/01/2024 23:50,Wellesley,7000,09/02/2024 00:10,Fort York,101,Casual Member
        3,600,7001,not a time,Wellesley,7000,09/02/2024 00:10,Fort York,102,Casual Member
        4,600,,09/01/2024 10:00,,7000,09/01/2024 10:10,Fort York,103,Casual Member
        """
    )
    p = tmp_path / "trips.csv"
    p.write_text(csv_text, encoding="utf-8")

    trips = load_trip_csv(p, progress=False)
    assert len(trips) == 2
    assert trips[0].start_station_id == "7000"
    assert trips[0].end_station_id == "7001"
    assert trips[0].started_at == datetime(2024, 9, 1, 8, 5)
    assert trips[1].ended_at == datetime(2024, 9, 2, 0, 10)


def test_load_trip_csv_requires_columns(tmp_path):
    p = tmp_path / "trips.csv"
    p.write_text("Trip Id,Start Time,End Time\n1,09/01/2024 08:05,09/01/2024 08:20\n")
    with pytest.raises(ValueError):
        load_trip_csv(p, progress=False)

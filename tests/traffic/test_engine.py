from __future__ import annotations

import numpy as np
import pytest

from bikeflow.traffic.engine import TrafficEngine, TrafficFilter
from bikeflow.traffic.minutes import UNFILTERED
from bikeflow.traffic.types import StationRegistry
from bikeflow.traffic.view import build_traffic_view

from tripdata import trip


def _by_id(view):
    return {r.station.station_id: r for r in view.records}


def test_view_for_morning_window(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    view = engine.view(8 * 60)
    recs = _by_id(view)

    assert (recs["A"].departures, recs["A"].arrivals) == (1, 0)
    assert (recs["B"].departures, recs["B"].arrivals) == (1, 1)
    assert recs["C"].total_traffic == 0
    assert view.max_total_traffic == 2
    assert len(view.window) == 121


def test_unfiltered_view(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    view = engine.view()
    recs = _by_id(view)

    assert view.window is None
    assert view.filter_value == UNFILTERED
    assert (recs["A"].departures, recs["A"].arrivals) == (2, 2)
    assert (recs["B"].departures, recs["B"].arrivals) == (1, 1)


def test_total_is_arrivals_plus_departures(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    for m in (UNFILTERED, 0, 485, 1439):
        for r in engine.view(m).records:
            assert r.total_traffic == r.arrivals + r.departures


def test_every_registered_station_appears_once(stations):
    engine = TrafficEngine(stations, [])
    view = engine.view(600)
    assert [r.station.station_id for r in view.records] == ["A", "B", "C"]
    assert all(r.total_traffic == 0 for r in view.records)
    assert view.max_total_traffic == 0


def test_unknown_station_counted_but_not_shown(stations):
    engine = TrafficEngine(stations, [trip("ghost", "A", "10:00", "10:05")])

    assert engine.departures(600) == {"ghost": 1}
    ids = [r.station.station_id for r in engine.view(600).records]
    assert "ghost" not in ids
    assert _by_id(engine.view(600))["A"].arrivals == 1


def test_cached_unfiltered_maps_are_not_leaked(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    dep = engine.departures()
    dep["A"] = 999
    assert engine.departures() == {"A": 2, "B": 1}


def test_bad_filter_fails_fast(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    with pytest.raises(ValueError):
        engine.view(1441)
    with pytest.raises(ValueError):
        engine.view(-2)


def test_bad_config_fails_at_construction(stations):
    with pytest.raises(ValueError):
        TrafficEngine(stations, [], bucket_minutes=7)
    with pytest.raises(ValueError):
        TrafficEngine(stations, [], half_width_minutes=720)
    with pytest.raises(ValueError):
        TrafficEngine(stations, [], half_width_minutes=50, bucket_minutes=15)


def test_departure_profile(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    profile = engine.departure_profile()
    assert len(profile) == 24
    assert profile[8] == 2
    assert profile[23] == 1
    assert sum(profile) == 3

    assert len(engine.departure_profile(15)) == 96
    with pytest.raises(ValueError):
        engine.departure_profile(7)


def test_coarse_engine_matches_slot_window(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips, bucket_minutes=15)
    # 07:00..09:14 in 15 min slots
    assert engine.departures(8 * 60) == {"A": 1, "B": 1}


def test_filter_lifecycle(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    f = TrafficFilter(engine)
    assert not f.is_filtered
    assert f.view.window is None

    view = f.set(8 * 60)
    assert f.is_filtered
    assert f.value == 480
    assert f.view is view

    f.clear()
    assert not f.is_filtered
    assert _by_id(f.view)["A"].departures == 2


def test_filter_rejects_bad_value_and_keeps_state(stations, scenario_trips):
    f = TrafficFilter(TrafficEngine(stations, scenario_trips))
    f.set(480)
    with pytest.raises(ValueError):
        f.set(2000)
    assert f.value == 480


def test_registry_first_station_wins(stations):
    dup = stations + [stations[0].__class__("A", "Other", 0.0, 0.0)]
    registry = StationRegistry(dup)
    assert len(registry) == 3
    assert registry.get("A").name == "King St W / Bay St"
    assert "A" in registry and "Z" not in registry


def test_build_view_ignores_unregistered_ids(stations):
    records = build_traffic_view(StationRegistry(stations), {"A": 3, "X": 9}, {"C": 1})
    totals = {r.station.station_id: r.total_traffic for r in records}
    assert totals == {"A": 3, "B": 0, "C": 1}


def test_record_to_dict(stations):
    records = build_traffic_view(StationRegistry(stations), {"A": 3}, {"A": 1})
    d = records[0].to_dict()
    assert d["station_id"] == "A"
    assert d["total_traffic"] == 4
    assert set(d) == {
        "station_id", "name", "lat", "lon", "arrivals", "departures", "total_traffic",
    }


def test_numpy_filter_values(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    assert engine.departures(np.int64(480)) == {"A": 1, "B": 1}
    assert engine.arrivals(np.int64(480)) == {"B": 1}
    view = engine.view(np.int64(480))
    assert view.filter_value == 480
    assert type(view.filter_value) is int


def test_zero_bucket_minutes_is_value_error(stations):
    with pytest.raises(ValueError):
        TrafficEngine(stations, [], bucket_minutes=0)


def test_view_and_count_maps_agree(stations, scenario_trips):
    engine = TrafficEngine(stations, scenario_trips)
    for m in (UNFILTERED, 480, 1439):
        recs = _by_id(engine.view(m))
        dep = engine.departures(m)
        arr = engine.arrivals(m)
        for sid, r in recs.items():
            assert r.departures == dep.get(sid, 0)
            assert r.arrivals == arr.get(sid, 0)

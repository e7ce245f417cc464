import json

from bikeflow.traffic.types import Station, StationRegistry


def load_stations(path):
    """
    Load Bike Share stations from station_information.json (GBFS).
    Returns a StationRegistry with only the fields we care about.
    Stations without coordinates are skipped.
    """
    with open(path) as f:
        payload = json.load(f)

    try:
        raw = payload["data"]["stations"]
    except (KeyError, TypeError):
        raise ValueError(f"{path} is not a GBFS station_information file") from None

    stations = []
    for s in raw:
        if s.get("lat") is None or s.get("lon") is None:
            continue
        stations.append(
            Station(
                station_id=str(s["station_id"]),
                name=s.get("name", str(s["station_id"])),
                lat=float(s["lat"]),
                lon=float(s["lon"]),
            )
        )

    return StationRegistry(stations)

# main.py

from bikeflow.traffic.engine import TrafficEngine
from bikeflow.traffic.minutes import format_minute
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trip_csv
from bikeflow.viz.app.single import serve_traffic_map


TRIPS = "Bike share ridership 2024-09.csv"
STATIONS = "station_information.json"
PEEK_MINUTE = 8 * 60


def main():
    stations = load_stations(STATIONS)
    trips = load_trip_csv(TRIPS)

    engine = TrafficEngine(stations, trips, half_width_minutes=60, verbose=True)

    # ---- busiest stations around the morning peak ----
    view = engine.view(PEEK_MINUTE)
    busiest = sorted(view.records, key=lambda r: r.total_traffic, reverse=True)[:10]

    print(f"\nBusiest stations around {format_minute(PEEK_MINUTE)}:\n")
    for i, r in enumerate(busiest, 1):
        print(
            f"{i:02d}. "
            f"{r.station.name} | "
            f"dep={r.departures:4d} arr={r.arrivals:4d} "
            f"total={r.total_traffic:4d}"
        )

    # ---- UI ----
    serve_traffic_map(
        engine=engine,
        port=8080,
        title="Bike Share Station Traffic",
    )


if __name__ == "__main__":
    main()

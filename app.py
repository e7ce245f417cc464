import os

from bikeflow.traffic.engine import TrafficEngine
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trip_csv
from bikeflow.viz.app.single import serve_traffic_map

TRIPS = os.environ.get("TRIPS_CSV", "Bike share ridership 2024-09.csv")
STATIONS = os.environ.get("STATIONS_JSON", "station_information.json")
HALF_WIDTH_MINUTES = int(os.environ.get("HALF_WIDTH_MINUTES", "60"))
BUCKET_MINUTES = int(os.environ.get("BUCKET_MINUTES", "1"))
TITLE = "Bike Share Station Traffic"


def build_engine():
  stations = load_stations(STATIONS)
  trips = load_trip_csv(TRIPS, progress=False)

  return TrafficEngine(
      stations,
      trips,
      half_width_minutes=HALF_WIDTH_MINUTES,
      bucket_minutes=BUCKET_MINUTES,
      verbose=True,
  )


def main():
  engine = build_engine()

  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      engine=engine,
      port=port,
      title=TITLE,
      host=os.environ.get("HOST", "0.0.0.0"),
  )


if __name__ == "__main__":
  main()

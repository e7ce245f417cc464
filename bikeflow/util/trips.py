# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.traffic.types import Trip


DEFAULT_TIME_FMT = "%m/%d/%Y %H:%M"


def _clean_station_id(value) -> str:
    if pd.isna(value):
        return ""
    s = str(value).strip()
    # pandas reads integer id columns with gaps as float
    if s.endswith(".0"):
        s = s[:-2]
    return s


def load_trip_csv(
    trips_csv: str | Path,
    *,
    time_fmt: str | None = DEFAULT_TIME_FMT,
    progress: bool = True,
) -> List[Trip]:
    """
    Loads Bike Share Toronto trips CSV with columns like:

      Trip Id, Trip  Duration, Start Station Id, Start Time, ...
      End Station Id, End Time, ...

    Rows with unparseable times or missing station ids are dropped, so every
    returned Trip has valid timestamps. time_fmt=None lets pandas infer.
    """
    trips_csv = Path(trips_csv)

    print(f"{Fore.CYAN}Reading trips from {trips_csv}…{Style.RESET_ALL}")
    df = pd.read_csv(trips_csv, dtype=str, encoding="utf-8-sig")

    # header names in the published files have stray spaces
    colmap = {c.strip(): c for c in df.columns}
    start_station_col = colmap.get("Start Station Id")
    end_station_col = colmap.get("End Station Id")
    start_time_col = colmap.get("Start Time")
    end_time_col = colmap.get("End Time")

    if start_station_col is None or end_station_col is None:
        raise ValueError(
            "Trips CSV missing 'Start Station Id' or 'End Station Id' columns."
        )
    if start_time_col is None or end_time_col is None:
        raise ValueError("Trips CSV missing 'Start Time' or 'End Time' columns.")

    out = pd.DataFrame()
    out["start_station_id"] = df[start_station_col].map(_clean_station_id)
    out["end_station_id"] = df[end_station_col].map(_clean_station_id)
    out["start_time"] = pd.to_datetime(df[start_time_col], format=time_fmt, errors="coerce")
    out["end_time"] = pd.to_datetime(df[end_time_col], format=time_fmt, errors="coerce")

    n_raw = len(out)
    out = out.dropna(subset=["start_time", "end_time"])
    out = out[(out["start_station_id"] != "") & (out["end_station_id"] != "")]

    dropped = n_raw - len(out)
    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped:,} malformed trip rows{Style.RESET_ALL}")

    rows = out.itertuples(index=False)
    if progress:
        rows = tqdm(rows, total=len(out), desc="Loading trips")

    trips = [
        Trip(
            start_station_id=r.start_station_id,
            end_station_id=r.end_station_id,
            started_at=r.start_time.to_pydatetime(),
            ended_at=r.end_time.to_pydatetime(),
        )
        for r in rows
    ]

    print(f"{Fore.GREEN}Loaded {len(trips):,} trips.{Style.RESET_ALL}")
    return trips

"""
Plain-dict and DataFrame views of snapshots and alerts.

Field names match what the radar client reads:
  planes: callsign, aircraft_type, latitude, longitude, altitude_ft, speed_kn, heading_deg
  alerts: plane1_callsign, plane2_callsign, distance_nm, altitude_diff_ft
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Iterable, Mapping

import numpy as np
import pandas as pd

from fcsim.sim.conflict import Alert
from fcsim.sim.dynamics import Aircraft

AIRCRAFT_FIELDS = [
    "callsign", "aircraft_type",
    "latitude", "longitude", "altitude_ft",
    "speed_kn", "heading_deg",
]

ALERT_FIELDS = [
    "plane1_callsign", "plane2_callsign",
    "distance_nm", "altitude_diff_ft",
]

# Keep CSV schemas stable
TRAJECTORY_COLUMNS = ["t_s"] + AIRCRAFT_FIELDS
ALERT_COLUMNS = ["t_s"] + ALERT_FIELDS


def aircraft_to_dict(aircraft: Aircraft) -> dict:
    return asdict(aircraft)


def alert_to_dict(alert: Alert) -> dict:
    return asdict(alert)


def aircraft_from_dict(d: Mapping) -> Aircraft:
    """
    Build an Aircraft from a dict using the field names above.
    A missing key raises KeyError, a non-numeric value ValueError.
    """
    return Aircraft(
        callsign=str(d["callsign"]),
        aircraft_type=str(d["aircraft_type"]),
        latitude=float(d["latitude"]),
        longitude=float(d["longitude"]),
        altitude_ft=float(d["altitude_ft"]),
        speed_kn=float(d["speed_kn"]),
        heading_deg=float(d["heading_deg"]),
    )


def snapshot_payload(planes: Iterable[Aircraft], alerts: Iterable[Alert]) -> dict:
    return {
        "planes": [aircraft_to_dict(p) for p in planes],
        "alerts": [alert_to_dict(a) for a in alerts],
    }


def trajectory_frame(rows: list[dict]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=TRAJECTORY_COLUMNS)


def alert_frame(rows: list[dict]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=ALERT_COLUMNS)


def summarize_alerts(alerts: pd.DataFrame) -> pd.DataFrame:
    """
    Reduce per-tick alert rows to one row per aircraft pair:
      n_ticks, first_alert_t_s, min_distance_nm, min_altitude_diff_ft

    A pair is keyed on its sorted callsigns so (A, B) and (B, A) fold together.
    """
    out_cols = [
        "plane1_callsign", "plane2_callsign",
        "n_ticks", "first_alert_t_s", "min_distance_nm", "min_altitude_diff_ft",
    ]
    if alerts.empty:
        return pd.DataFrame(columns=out_cols)

    pairs = np.sort(alerts[["plane1_callsign", "plane2_callsign"]].to_numpy(dtype=str), axis=1)
    df = alerts.copy()
    df["plane1_callsign"] = pairs[:, 0]
    df["plane2_callsign"] = pairs[:, 1]

    summary = (
        df.groupby(["plane1_callsign", "plane2_callsign"], sort=True)
        .agg(
            n_ticks=("t_s", "size"),
            first_alert_t_s=("t_s", "min"),
            min_distance_nm=("distance_nm", "min"),
            min_altitude_diff_ft=("altitude_diff_ft", "min"),
        )
        .reset_index()
    )
    return summary[out_cols]

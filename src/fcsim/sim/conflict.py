from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np

from fcsim.sim.dynamics import Aircraft

# Separation thresholds
HORIZONTAL_THRESHOLD_NM = 5.0
VERTICAL_THRESHOLD_FT = 1000.0

EARTH_RADIUS_NM = 3440.065


@dataclass(frozen=True)
class Alert:
    plane1_callsign: str
    plane2_callsign: str
    distance_nm: float
    altitude_diff_ft: float


def pairwise_distance_nm(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle (haversine) distance between two lat/lng points in nautical miles
    """
    phi1 = np.deg2rad(lat1)
    phi2 = np.deg2rad(lat2)
    dphi = np.deg2rad(lat2 - lat1)
    dlmb = np.deg2rad(lng2 - lng1)

    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(EARTH_RADIUS_NM * c)


def horizontal_separation_nm(a: Aircraft, b: Aircraft) -> float:
    return pairwise_distance_nm(a.latitude, a.longitude, b.latitude, b.longitude)


def altitude_separation_ft(a: Aircraft, b: Aircraft) -> float:
    """
    Vertical separation between aircraft in feet
    """
    return float(abs(a.altitude_ft - b.altitude_ft))


def check_pair(a: Aircraft, b: Aircraft) -> Optional[Alert]:
    """
    Returns an Alert if the two aircraft are too close horizontally AND vertically.

    The horizontal test is inclusive (<= 5 NM), the vertical one strict (< 1000 ft).
    """
    h = horizontal_separation_nm(a, b)
    v = altitude_separation_ft(a, b)
    if h <= HORIZONTAL_THRESHOLD_NM and v < VERTICAL_THRESHOLD_FT:
        return Alert(
            plane1_callsign=a.callsign,
            plane2_callsign=b.callsign,
            distance_nm=h,
            altitude_diff_ft=v,
        )
    return None


def scan(population: Sequence[Aircraft]) -> list[Alert]:
    """
    Check every unordered pair (i < j, in input order) once and collect the alerts.
    """
    alerts = []
    n = len(population)
    for i in range(n):
        for j in range(i + 1, n):
            alert = check_pair(population[i], population[j])
            if alert is not None:
                alerts.append(alert)
    return alerts

# an aircraft in the scene carries:
# callsign and a free-form type label
# position as latitude / longitude in degrees
# altitude in feet
# ground speed in knots (nautical miles per hour)
# heading in compass degrees (0 = north, clockwise)

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable
import numpy as np

# unit converters
kts_to_nm_per_s = 1 / 3600  # knots = nautical miles / hour
nm_per_deg_lat = 60.0  # one minute of arc ~ one nautical mile


@dataclass(frozen=True)
class Aircraft:
    """
    One aircraft in a snapshot. Never mutated; a tick builds a new one.
    """
    callsign: str
    aircraft_type: str
    latitude: float  # degrees
    longitude: float  # degrees, not wrapped after propagation
    altitude_ft: float
    speed_kn: float
    heading_deg: float  # 0 = north, 90 = east


def step_aircraft(aircraft: Aircraft, dt_s: float) -> Aircraft:
    """
    Move one aircraft along its heading for dt_s seconds.

    Flat-earth approximation: 60 nm per degree of latitude, and longitude
    degrees shrinking with cos(latitude). Only good for short hops away
    from the poles; at latitude +-90 the longitude offset is undefined
    and is left that way.
    """
    heading_rad = np.deg2rad(aircraft.heading_deg)
    lat_rad = np.deg2rad(aircraft.latitude)

    distance_nm = aircraft.speed_kn * kts_to_nm_per_s * dt_s
    dlat = (distance_nm / nm_per_deg_lat) * np.cos(heading_rad)
    dlng = (distance_nm / nm_per_deg_lat) * np.sin(heading_rad) / np.cos(lat_rad)

    return replace(
        aircraft,
        latitude=float(aircraft.latitude + dlat),
        longitude=float(aircraft.longitude + dlng),
    )


def advance(population: Iterable[Aircraft], elapsed_s: float) -> list[Aircraft]:
    """
    Advance every aircraft in a snapshot by elapsed_s seconds.
    Same order and length as the input; altitude, speed and heading are copied.
    """
    return [step_aircraft(ac, elapsed_s) for ac in population]

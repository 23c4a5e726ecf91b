from __future__ import annotations

import logging
import math
import random
import string
from typing import Optional

from fcsim.sim.dynamics import Aircraft

logger = logging.getLogger(__name__)

# Linz Airport
CENTER_LAT = 48.238575
CENTER_LNG = 14.191473

KM_PER_DEG_LAT = 111.32
DEFAULT_RADIUS_KM = 100.0

# callsign prefix reserved for the two fixed aircraft
TEST_CALLSIGN_PREFIX = "TEST"

AIRCRAFT_TYPES = (
    "A319", "A320", "A321", "A359",
    "B737", "B738", "B77W", "B789",
    "E190", "CRJ9", "DH8D", "AT76",
)


def make_test_pair(center_lat: float = CENTER_LAT, center_lng: float = CENTER_LNG):
    """
    Returns the two fixed aircraft placed on the reference meridian, 0.1 deg
    (~6 NM) apart and straddling the reference point, flying toward each other
    500 ft apart in altitude.
    TEST01 starts south heading north (0 deg)
    TEST02 starts north heading south (180 deg)
    """
    a = Aircraft(
        callsign=f"{TEST_CALLSIGN_PREFIX}01",
        aircraft_type="A320",
        latitude=center_lat - 0.05,
        longitude=center_lng,
        altitude_ft=30000.0,
        speed_kn=250.0,
        heading_deg=0.0,
    )
    b = Aircraft(
        callsign=f"{TEST_CALLSIGN_PREFIX}02",
        aircraft_type="B738",
        latitude=center_lat + 0.05,
        longitude=center_lng,
        altitude_ft=30500.0,
        speed_kn=250.0,
        heading_deg=180.0,
    )
    return a, b


def gen_callsign(rng: random.Random) -> str:
    """Three letters followed by three digits, e.g. 'KQZ042'."""
    letters = "".join(rng.choice(string.ascii_uppercase) for _ in range(3))
    digits = "".join(rng.choice(string.digits) for _ in range(3))
    return letters + digits


def offset_position(center_lat: float, center_lng: float, bearing_deg: float, distance_km: float):
    """
    Polar (bearing, distance) around the center to a lat/lng offset on a local flat plane.
    """
    brng = math.radians(bearing_deg)
    dlat = distance_km * math.cos(brng) / KM_PER_DEG_LAT
    dlng = distance_km * math.sin(brng) / (KM_PER_DEG_LAT * math.cos(math.radians(center_lat)))
    return center_lat + dlat, center_lng + dlng


def make_random_aircraft(
    rng: random.Random,
    callsign: str,
    center_lat: float = CENTER_LAT,
    center_lng: float = CENTER_LNG,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> Aircraft:
    bearing = rng.uniform(0.0, 360.0)
    r = rng.random() * radius_km
    lat, lng = offset_position(center_lat, center_lng, bearing, r)

    return Aircraft(
        callsign=callsign,
        aircraft_type=rng.choice(AIRCRAFT_TYPES),
        latitude=lat,
        longitude=lng,
        altitude_ft=rng.uniform(15000.0, 35000.0),
        speed_kn=rng.uniform(80.0, 450.0),
        # uniform() can hit the upper bound, keep heading in [0, 360)
        heading_deg=rng.uniform(0.0, 360.0) % 360.0,
    )


def generate(
    count: int,
    rng: Optional[random.Random] = None,
    *,
    center_lat: float = CENTER_LAT,
    center_lng: float = CENTER_LNG,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> list[Aircraft]:
    """
    Build an initial snapshot: the two fixed test aircraft first, then
    count - 2 random aircraft scattered within radius_km of the center.

    Callsigns are unique across the whole population; a colliding random
    callsign is drawn again.
    """
    if count < 2:
        raise ValueError(f"count must be >= 2 (got {count})")
    if rng is None:
        rng = random.Random()

    planes = list(make_test_pair(center_lat, center_lng))
    taken = {p.callsign for p in planes}

    while len(planes) < count:
        callsign = gen_callsign(rng)
        if callsign in taken:
            logger.debug(f"callsign collision on {callsign}, drawing again")
            continue
        taken.add(callsign)
        planes.append(make_random_aircraft(rng, callsign, center_lat, center_lng, radius_km))

    logger.debug(f"generated scene with {len(planes)} aircraft")
    return planes

"""
Shared pytest fixtures for the scene simulation tests.
"""
import random

import pytest

from fcsim.sim.dynamics import Aircraft


def make_aircraft(callsign="ABC123", lat=48.25, lng=14.191473, alt_ft=30000.0,
                  speed_kn=0.0, heading_deg=0.0, aircraft_type="A320"):
    return Aircraft(
        callsign=callsign,
        aircraft_type=aircraft_type,
        latitude=lat,
        longitude=lng,
        altitude_ft=alt_ft,
        speed_kn=speed_kn,
        heading_deg=heading_deg,
    )


@pytest.fixture
def rng():
    """Fixed-seed random source"""
    return random.Random(1234)


@pytest.fixture
def aircraft_factory():
    return make_aircraft


@pytest.fixture
def close_pair():
    """~0.9 NM and 500 ft apart"""
    return (
        make_aircraft("AAA111", lat=48.250000, alt_ft=30000.0),
        make_aircraft("BBB222", lat=48.265000, alt_ft=30500.0),
    )


@pytest.fixture
def far_pair():
    """~6 NM and 500 ft apart"""
    return (
        make_aircraft("AAA111", lat=48.250000, alt_ft=30000.0),
        make_aircraft("CCC333", lat=48.350000, alt_ft=30500.0),
    )

"""
Scene configuration using Pydantic settings.
"""
from __future__ import annotations

import random
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fcsim.sim.scene_generators import CENTER_LAT, CENTER_LNG, DEFAULT_RADIUS_KM


class SceneConfig(BaseSettings):
    """Scene settings, overridable through FCSIM_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FCSIM_",
        env_ignore_empty=True,
        frozen=True,
    )

    # reference point the scene is scattered around
    center_lat: float = CENTER_LAT
    center_lng: float = CENTER_LNG

    num_aircraft: int = 20
    radius_km: float = DEFAULT_RADIUS_KM

    # simulated seconds per tick (also the wall-clock period of the stream)
    tick_s: float = 1.0

    seed: Optional[int] = None

    @field_validator("num_aircraft")
    @classmethod
    def _at_least_two(cls, v: int) -> int:
        if v < 2:
            raise ValueError(f"num_aircraft must be >= 2 (got {v})")
        return v

    @field_validator("tick_s", "radius_km")
    @classmethod
    def _positive(cls, v: float, info) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0 (got {v})")
        return v

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

"""Tests for dict / DataFrame conversion"""
import json

import pandas as pd
import pytest

from fcsim.sim.conflict import scan
from fcsim.sim.records import (
    ALERT_COLUMNS,
    TRAJECTORY_COLUMNS,
    aircraft_from_dict,
    aircraft_to_dict,
    alert_frame,
    alert_to_dict,
    snapshot_payload,
    summarize_alerts,
    trajectory_frame,
)
from fcsim.sim.scene_generators import make_test_pair
from fcsim.sim.simulate import simulate_scene


class TestDicts:

    def test_aircraft_field_names(self, aircraft_factory):
        d = aircraft_to_dict(aircraft_factory())
        assert list(d) == [
            "callsign", "aircraft_type", "latitude", "longitude",
            "altitude_ft", "speed_kn", "heading_deg",
        ]

    def test_aircraft_from_dict(self, aircraft_factory):
        ac = aircraft_factory(speed_kn=250.0, heading_deg=90.0)
        assert aircraft_from_dict(aircraft_to_dict(ac)) == ac

    def test_aircraft_from_dict_coerces_strings(self):
        ac = aircraft_from_dict({
            "callsign": "ABC123", "aircraft_type": "A320", "latitude": "48.2",
            "longitude": "14.1", "altitude_ft": "30000", "speed_kn": "250", "heading_deg": "90",
        })
        assert ac.altitude_ft == 30000.0

    def test_aircraft_from_dict_missing_key(self, aircraft_factory):
        d = aircraft_to_dict(aircraft_factory())
        del d["heading_deg"]
        with pytest.raises(KeyError):
            aircraft_from_dict(d)

    def test_aircraft_from_dict_bad_value(self, aircraft_factory):
        d = aircraft_to_dict(aircraft_factory())
        d["latitude"] = "north"
        with pytest.raises(ValueError):
            aircraft_from_dict(d)

    def test_alert_field_names(self, close_pair):
        d = alert_to_dict(scan(list(close_pair))[0])
        assert list(d) == ["plane1_callsign", "plane2_callsign", "distance_nm", "altitude_diff_ft"]

    def test_snapshot_payload_is_json(self, close_pair):
        planes = list(close_pair)
        payload = snapshot_payload(planes, scan(planes))
        decoded = json.loads(json.dumps(payload))
        assert len(decoded["planes"]) == 2
        assert decoded["alerts"][0]["plane1_callsign"] == "AAA111"
        assert decoded["planes"][0]["latitude"] == 48.25


class TestFrames:

    def test_empty_frames_keep_columns(self):
        assert list(trajectory_frame([]).columns) == TRAJECTORY_COLUMNS
        assert list(alert_frame([]).columns) == ALERT_COLUMNS

    def test_trajectory_frame(self):
        traj_rows, _ = simulate_scene(list(make_test_pair()), dt_s=10.0, horizon_s=20.0)
        df = trajectory_frame(traj_rows)
        assert len(df) == 6
        assert list(df.columns) == TRAJECTORY_COLUMNS


class TestSummarizeAlerts:

    def test_empty(self):
        out = summarize_alerts(alert_frame([]))
        assert out.empty
        assert "min_distance_nm" in out.columns

    def test_test_pair_summary(self):
        _, alert_rows = simulate_scene(list(make_test_pair()), dt_s=10.0, horizon_s=50.0)
        out = summarize_alerts(alert_frame(alert_rows))
        assert len(out) == 1
        row = out.iloc[0]
        assert (row["plane1_callsign"], row["plane2_callsign"]) == ("TEST01", "TEST02")
        assert row["n_ticks"] == 5
        assert row["first_alert_t_s"] == 10.0
        assert row["min_distance_nm"] < 1.0
        assert row["min_altitude_diff_ft"] == 500.0

    def test_pair_order_folds(self):
        df = pd.DataFrame([
            {"t_s": 0.0, "plane1_callsign": "BBB222", "plane2_callsign": "AAA111",
             "distance_nm": 3.0, "altitude_diff_ft": 200.0},
            {"t_s": 1.0, "plane1_callsign": "AAA111", "plane2_callsign": "BBB222",
             "distance_nm": 2.0, "altitude_diff_ft": 300.0},
        ])
        out = summarize_alerts(df)
        assert len(out) == 1
        assert out.iloc[0]["n_ticks"] == 2
        assert out.iloc[0]["min_distance_nm"] == 2.0
        assert out.iloc[0]["min_altitude_diff_ft"] == 200.0

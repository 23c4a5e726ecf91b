"""Tests for the tick runner"""
import itertools

import pytest

from fcsim.sim.conflict import scan
from fcsim.sim.dynamics import advance
from fcsim.sim.scene_generators import generate, make_test_pair
from fcsim.sim.simulate import first_alert_time, iter_ticks, simulate_scene


class TestIterTicks:

    def test_tick_zero_is_input(self, rng):
        planes = generate(6, rng)
        tick = next(iter_ticks(planes, 1.0))
        assert tick.index == 0
        assert tick.t_s == 0.0
        assert tick.planes == planes
        assert tick.alerts == scan(planes)

    def test_each_tick_advances_previous(self, rng):
        planes = generate(6, rng)
        ticks = list(iter_ticks(planes, 2.0, n_ticks=4))
        assert [t.t_s for t in ticks] == [0.0, 2.0, 4.0, 6.0]
        for prev, cur in zip(ticks, ticks[1:]):
            assert cur.planes == advance(prev.planes, 2.0)
            assert cur.alerts == scan(cur.planes)

    def test_unbounded(self, rng):
        ticks = list(itertools.islice(iter_ticks(generate(3, rng), 1.0), 25))
        assert ticks[-1].index == 24

    @pytest.mark.parametrize("dt_s", [0.0, -1.0, float("nan")])
    def test_bad_dt(self, dt_s, rng):
        with pytest.raises(ValueError):
            next(iter_ticks(generate(2, rng), dt_s))


class TestSimulateScene:

    def test_row_counts(self):
        planes = list(make_test_pair())
        traj_rows, alert_rows = simulate_scene(planes, dt_s=10.0, horizon_s=50.0)
        # times 0,10,20,30,40,50 => 6 ticks x 2 aircraft
        assert len(traj_rows) == 12
        assert sorted({r["t_s"] for r in traj_rows}) == [0.0, 10.0, 20.0, 30.0, 40.0, 50.0]
        # ~6 NM apart at t=0, closing at 500 kts: inside 5 NM from t=10 on
        assert [r["t_s"] for r in alert_rows] == [10.0, 20.0, 30.0, 40.0, 50.0]

    def test_row_fields(self):
        traj_rows, alert_rows = simulate_scene(list(make_test_pair()), dt_s=10.0, horizon_s=20.0)
        assert set(traj_rows[0]) == {
            "t_s", "callsign", "aircraft_type", "latitude", "longitude",
            "altitude_ft", "speed_kn", "heading_deg",
        }
        assert set(alert_rows[0]) == {
            "t_s", "plane1_callsign", "plane2_callsign", "distance_nm", "altitude_diff_ft",
        }

    def test_test_pair_converges(self):
        traj_rows, _ = simulate_scene(list(make_test_pair()), dt_s=10.0, horizon_s=20.0)
        lat01 = [r["latitude"] for r in traj_rows if r["callsign"] == "TEST01"]
        lat02 = [r["latitude"] for r in traj_rows if r["callsign"] == "TEST02"]
        assert lat01 == sorted(lat01)
        assert lat02 == sorted(lat02, reverse=True)


class TestFirstAlertTime:

    def test_test_pair(self):
        # 1.0 NM to close at 500 kts ~ 7.2 s
        assert first_alert_time(list(make_test_pair()), dt_s=1.0, horizon_s=120.0) == 8.0

    def test_no_alert_within_horizon(self):
        assert first_alert_time(list(make_test_pair()), dt_s=1.0, horizon_s=5.0) == -1.0

    def test_alert_at_start(self, close_pair):
        assert first_alert_time(list(close_pair), dt_s=1.0, horizon_s=10.0) == 0.0

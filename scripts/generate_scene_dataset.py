"""
Scene dataset generator: simulates randomly seeded scenes around the
reference airport and records every tick.

Outputs (in ./data by default):
- trajectories.csv : per-tick aircraft states
- alerts.csv       : per-tick proximity alerts

Run from repo root:
  pip install -e .
  python scripts/generate_scene_dataset.py --n 10 --count 20

Then:
  python scripts/summarize_alerts.py
"""

from __future__ import annotations

import argparse
import csv
import random
from pathlib import Path

from fcsim.sim.records import TRAJECTORY_COLUMNS, ALERT_COLUMNS
from fcsim.sim.scene_generators import generate
from fcsim.sim.simulate import simulate_scene


# -------------------------
# CSV utilities
# -------------------------
def write_csv(path: Path, rows: list[dict], fieldnames: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        w.writeheader()
        w.writerows(rows)


# -------------------------
# Main
# -------------------------
def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=10, help="number of scenes")
    ap.add_argument("--count", type=int, default=20, help="aircraft per scene (>= 2)")
    ap.add_argument("--radius_km", type=float, default=100.0, help="scatter radius around the airport")
    ap.add_argument("--dt", type=float, default=1.0, help="timestep seconds")
    ap.add_argument("--horizon", type=float, default=600.0, help="horizon seconds")
    ap.add_argument("--seed", type=int, default=0, help="random seed")
    ap.add_argument("--out_dir", type=str, default="data", help="output directory")
    args = ap.parse_args()

    rng = random.Random(args.seed)

    traj_rows: list[dict] = []
    alert_rows: list[dict] = []

    for scenario_id in range(args.n):
        planes = generate(args.count, rng, radius_km=args.radius_km)
        rows, alerts = simulate_scene(planes, dt_s=args.dt, horizon_s=args.horizon)

        # Attach scenario id to each row
        for r in rows:
            r["scenario_id"] = int(scenario_id)
        for r in alerts:
            r["scenario_id"] = int(scenario_id)
        traj_rows.extend(rows)
        alert_rows.extend(alerts)

        if (scenario_id + 1) % max(1, args.n // 10) == 0:
            print(f"[{scenario_id+1}/{args.n}] alerts so far: {len(alert_rows)}")

    out_dir = Path(args.out_dir)
    traj_path = out_dir / "trajectories.csv"
    alerts_path = out_dir / "alerts.csv"

    write_csv(traj_path, traj_rows, ["scenario_id"] + TRAJECTORY_COLUMNS)
    write_csv(alerts_path, alert_rows, ["scenario_id"] + ALERT_COLUMNS)

    print("\nWrote:", traj_path, "rows:", len(traj_rows))
    print("Wrote:", alerts_path, "rows:", len(alert_rows))


if __name__ == "__main__":
    main()

from pathlib import Path
import pandas as pd

from fcsim.paths import DataPaths
from fcsim.sim.records import summarize_alerts

def main():
    paths = DataPaths.from_repo_root(Path.cwd())
    alerts_path = paths.alerts_csv
    out_path = paths.reports_dir / "alert_summary.csv"

    alerts = pd.read_csv(alerts_path)

    # one summary per scene, then stack them
    parts = []
    for sid, g in alerts.groupby("scenario_id", sort=True):
        s = summarize_alerts(g)
        s.insert(0, "scenario_id", int(sid))
        parts.append(s)

    if parts:
        summary = pd.concat(parts, ignore_index=True)
    else:
        summary = summarize_alerts(alerts)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(out_path, index=False)

    print("alert rows:", len(alerts))
    print("distinct pairs:", len(summary))
    if len(summary) > 0:
        print("closest approach (NM):", float(summary["min_distance_nm"].min()))
        print("longest conflict (ticks):", int(summary["n_ticks"].max()))
    print("Wrote:", out_path)

if __name__ == "__main__":
    main()

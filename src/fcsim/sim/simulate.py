from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from fcsim.sim.conflict import Alert, scan
from fcsim.sim.dynamics import Aircraft, advance
from fcsim.sim.records import aircraft_to_dict, alert_to_dict


@dataclass(frozen=True)
class Tick:
    index: int
    t_s: float
    planes: list[Aircraft]
    alerts: list[Alert]


def _check_dt(dt_s: float) -> None:
    if not dt_s > 0:
        raise ValueError(f"dt_s must be > 0 (got {dt_s})")


def iter_ticks(population: Sequence[Aircraft], dt_s: float, n_ticks: Optional[int] = None) -> Iterator[Tick]:
    """
    Yield one Tick per simulation step. Tick 0 is the input snapshot as-is;
    every later tick advances the previous snapshot by dt_s.

    Runs forever when n_ticks is None.
    """
    _check_dt(dt_s)

    planes = list(population)
    counter = itertools.count() if n_ticks is None else range(n_ticks)
    for i in counter:
        if i > 0:
            planes = advance(planes, dt_s)
        yield Tick(index=i, t_s=float(i * dt_s), planes=planes, alerts=scan(planes))


def simulate_scene(population: Sequence[Aircraft], dt_s: float, horizon_s: float):
    """
    Simulate a whole scene forward in time and record it.

    Returns:
        traj_rows: one dict per aircraft per timestep (t_s + aircraft fields)
        alert_rows: one dict per alert per timestep (t_s + alert fields)
    """
    _check_dt(dt_s)
    steps = int(horizon_s / dt_s)

    traj_rows = []
    alert_rows = []

    for tick in iter_ticks(population, dt_s, n_ticks=steps + 1):
        for ac in tick.planes:
            traj_rows.append({"t_s": tick.t_s, **aircraft_to_dict(ac)})
        for alert in tick.alerts:
            alert_rows.append({"t_s": tick.t_s, **alert_to_dict(alert)})

    return traj_rows, alert_rows


def first_alert_time(population: Sequence[Aircraft], dt_s: float, horizon_s: float) -> float:
    """
    Seconds until the first timestep with any alert, checking t=0 too.
    If no alert within horizon_s: -1.0
    """
    _check_dt(dt_s)
    steps = int(horizon_s / dt_s)

    for tick in iter_ticks(population, dt_s, n_ticks=steps + 1):
        if tick.alerts:
            return tick.t_s

    return -1.0

import random

from fcsim.sim.scene_generators import generate
from fcsim.sim.simulate import simulate_scene, first_alert_time

def main():
    planes = generate(2, random.Random(0))
    traj_rows, alert_rows = simulate_scene(planes, dt_s=10.0, horizon_s=50.0)

    print("Number of trajectory rows:", len(traj_rows))
    print("First row:", traj_rows[0])
    print("Last row:", traj_rows[-1])
    print("Alert rows:", len(alert_rows))
    print("First alert time (s):", first_alert_time(planes, dt_s=1.0, horizon_s=120.0))

    print("\nExpected:")
    print("- dt=10, horizon=50 => times 0,10,20,30,40,50 => 6 ticks x 2 aircraft = 12 rows")
    print("- TEST01 latitude should increase each step, TEST02 decrease")
    print("- first alert once they close to 5 NM: ~8 s at 250 kts each (500 kts closure)")

if __name__ == "__main__":
    main()

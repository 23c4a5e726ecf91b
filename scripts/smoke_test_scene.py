import random

from fcsim.sim.scene_generators import generate
from fcsim.sim.conflict import scan

def main():
    planes = generate(20, random.Random(0))
    alerts = scan(planes)

    print("Aircraft:", len(planes))
    for p in planes[:4]:
        print(" ", p)
    print("Alerts at t=0:", alerts)
    print("Expected: 20 aircraft, TEST01 and TEST02 first, ~6 NM apart so no alert between them yet")

if __name__ == "__main__":
    main()

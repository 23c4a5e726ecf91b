from fcsim.sim.dynamics import Aircraft
from fcsim.sim.conflict import check_pair, horizontal_separation_nm, altitude_separation_ft


def plane(callsign, lat, alt_ft):
    return Aircraft(callsign=callsign, aircraft_type="A320", latitude=lat, longitude=14.191473,
                    altitude_ft=alt_ft, speed_kn=0.0, heading_deg=0.0)


def main():
    a = plane("AAA111", 48.250000, 30000.0)
    b = plane("BBB222", 48.265000, 30500.0)
    c = plane("CCC333", 48.350000, 30500.0)

    # a-b: 0.015 deg of latitude ~ 0.9 NM, 500 ft
    # a-c: 0.1 deg of latitude ~ 6.0 NM, 500 ft
    print("a-b horizontal (NM):", horizontal_separation_nm(a, b))
    print("a-b vertical (ft):", altitude_separation_ft(a, b))
    print("a-b alert:", check_pair(a, b))
    print("a-c horizontal (NM):", horizontal_separation_nm(a, c))
    print("a-c alert:", check_pair(a, c))

    print("\nExpected:")
    print("- a-b alert present (<= 5 NM and < 1000 ft)")
    print("- a-c None (~6 NM apart)")

if __name__ == "__main__":
    main()

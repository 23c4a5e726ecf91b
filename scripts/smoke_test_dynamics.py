from fcsim.sim.dynamics import Aircraft, step_aircraft

def main():
    # test of starting at the reference point, altitude of 30,000 ft
    # speed will be 360 knots
    # heading will be 0 degrees (north)

    s = Aircraft(
        callsign="SMK001",
        aircraft_type="A320",
        latitude=48.238575,
        longitude=14.191473,
        altitude_ft=30000,
        speed_kn=360,
        heading_deg=0,
    )

    # move the object forward by 10 seconds
    dt_s = 10
    s2 = step_aircraft(s, dt_s=dt_s)

    print("start state: ", s)
    print("after 10s: ", s2)

    print("\nexpected: latitude up by ~1/60 deg (1 NM), longitude unchanged, alt_ft 30,000")

if __name__ == "__main__":
    main()

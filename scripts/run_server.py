"""
Serve the simulated scene to the radar client.

Run from repo root:
  pip install -e .
  python scripts/run_server.py --port 3000

The client then connects to http://127.0.0.1:3000/sse
"""
import argparse
import logging

import uvicorn

from fcsim.config import SceneConfig
from fcsim.server import create_app


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--host", type=str, default="127.0.0.1")
    ap.add_argument("--port", type=int, default=3000)
    ap.add_argument("--count", type=int, default=None, help="aircraft per scene (overrides FCSIM_NUM_AIRCRAFT)")
    ap.add_argument("--tick", type=float, default=None, help="seconds per tick (overrides FCSIM_TICK_S)")
    ap.add_argument("--seed", type=int, default=None, help="random seed (overrides FCSIM_SEED)")
    ap.add_argument("--log_level", type=str, default="info")
    args = ap.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    overrides = {}
    if args.count is not None:
        overrides["num_aircraft"] = args.count
    if args.tick is not None:
        overrides["tick_s"] = args.tick
    if args.seed is not None:
        overrides["seed"] = args.seed
    # explicit flags win over FCSIM_* variables
    config = SceneConfig(**overrides)

    print(f"Serving {config.num_aircraft} aircraft, tick {config.tick_s}s at http://{args.host}:{args.port}/sse")
    uvicorn.run(create_app(config), host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()

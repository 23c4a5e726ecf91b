"""
Server-Sent Events stream of the simulated scene for the radar client.

Every /sse connection gets its own freshly generated scene and receives
one `data: {"planes": [...], "alerts": [...]}` message per tick.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import AsyncIterator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from fcsim.config import SceneConfig
from fcsim.sim.records import snapshot_payload
from fcsim.sim.scene_generators import generate
from fcsim.sim.simulate import iter_ticks

logger = logging.getLogger(__name__)


def format_event(payload: dict) -> str:
    return f"data: {json.dumps(payload)}\n\n"


def new_scene(config: SceneConfig):
    return generate(
        config.num_aircraft,
        config.make_rng(),
        center_lat=config.center_lat,
        center_lng=config.center_lng,
        radius_km=config.radius_km,
    )


async def _never_disconnected() -> bool:
    return False


async def event_stream(
    config: SceneConfig,
    is_disconnected: Callable[[], Awaitable[bool]] = _never_disconnected,
    n_ticks: Optional[int] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> AsyncIterator[str]:
    """
    Yield one SSE message per tick, pausing tick_s between messages.
    Stops early once is_disconnected() reports the client gone.
    """
    planes = new_scene(config)
    logger.info(f"SSE stream started with {len(planes)} aircraft")
    try:
        for tick in iter_ticks(planes, config.tick_s, n_ticks=n_ticks):
            if tick.index > 0:
                await sleep(config.tick_s)
            if await is_disconnected():
                logger.info(f"SSE client disconnected after {tick.index} tick(s)")
                break
            if tick.alerts:
                logger.debug(f"tick {tick.index}: {len(tick.alerts)} alert(s)")
            yield format_event(snapshot_payload(tick.planes, tick.alerts))
    finally:
        logger.info("SSE stream closed")


def create_app(config: Optional[SceneConfig] = None, max_ticks: Optional[int] = None) -> FastAPI:
    """
    Build the app. max_ticks bounds every /sse stream; None streams until
    the client disconnects.
    """
    if config is None:
        config = SceneConfig()

    app = FastAPI(title="fcsim", version="0.1.0")
    app.state.scene_config = config
    app.state.max_ticks = max_ticks

    # radar client is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/snapshot")
    def snapshot():
        tick = next(iter_ticks(new_scene(config), config.tick_s, n_ticks=1))
        return snapshot_payload(tick.planes, tick.alerts)

    @app.get("/sse")
    async def sse(request: Request):
        return StreamingResponse(
            event_stream(config, request.is_disconnected, n_ticks=app.state.max_ticks),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache"},
        )

    return app

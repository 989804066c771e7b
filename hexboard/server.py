from __future__ import annotations

import logging
from typing import Any, Dict

import uvicorn
from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from hexboard import __version__
from hexboard.config import ServiceConfig
from hexboard.engine import maps as map_loader
from hexboard.engine.errors import MapConfigError
from hexboard.engine.serialize import to_dict

logger = logging.getLogger(__name__)

settings = ServiceConfig.from_env()

app = FastAPI(
    title="hexboard",
    description="Hex board topology service",
    version=__version__,
)


@app.exception_handler(MapConfigError)
async def map_config_error_handler(request: Request, exc: MapConfigError):
    logger.info("rejected map config on %s: %s %s", request.url.path, exc.message, exc.details)
    return JSONResponse(status_code=422, content={"message": exc.message, "details": exc.details})


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.get("/maps")
async def list_maps():
    return map_loader.list_presets()


@app.get("/maps/{preset_id}")
async def get_map(preset_id: str, players: int = settings.default_players):
    if map_loader.get_preset_meta(preset_id) is None:
        raise HTTPException(status_code=404, detail="unknown preset")
    g = map_loader.build_preset_game(preset_id, players)
    return to_dict(g)


@app.post("/topology")
async def build_from_config(data: Dict[str, Any] = Body(...), players: int = settings.default_players):
    g = map_loader.build_game(data, players)
    return to_dict(g)


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studframe.errors import InvalidWallError
from studframe.services.frame_service import FrameService
from studframe.api.routes import router

logger = logging.getLogger(__name__)


async def invalid_wall_handler(request: Request, exc: InvalidWallError) -> JSONResponse:
    logger.info("Rejected wall %s: %s", exc.wall_id, exc.problems)
    return JSONResponse(
        status_code=422,
        content={"detail": {"wall_id": exc.wall_id, "problems": exc.problems}},
    )


def create_app(service: FrameService | None = None) -> FastAPI:
    """Build the API around one framing service.

    Hosts with their own rule set or house framing params pass a configured
    `FrameService`; otherwise the default rules and params are used.
    """
    app = FastAPI(
        title="Wall Stud Framer",
        description="Stud, plate and opening framing for a single wall",
        version="0.1.0",
    )
    app.state.frame_service = service or FrameService()

    # CORS — the drawing host may run on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidWallError, invalid_wall_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()

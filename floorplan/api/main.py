"""FastAPI application factory."""

from __future__ import annotations
import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from floorplan.api import routes
from floorplan.io.serialization import MalformedFloorplanError
from floorplan.services.editor_service import EditorService

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    raw = os.environ.get("FLOORPLAN_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


async def _malformed_floorplan(request: Request, exc: MalformedFloorplanError) -> JSONResponse:
    logger.warning("Rejected import on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(service: EditorService | None = None) -> FastAPI:
    """Build the app; `service` replaces the shared editor service when given."""
    if service is not None:
        routes.reset_service(service)

    app = FastAPI(
        title="Floorplan Editor",
        description="Floorplan document engine with undo/redo and an agent command bridge",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(MalformedFloorplanError, _malformed_floorplan)
    app.include_router(routes.router, prefix="/api")
    return app


app = create_app()

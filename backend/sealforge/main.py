"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sealforge.config import settings
from sealforge.errors import DesignValidationError, RenderFailure

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.sealforge_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="SealForge",
        description="Circular company seal renderer",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all layer modules to trigger registration
    from sealforge.engine.compositor import register_layers

    register_layers()

    _register_error_handlers(app)

    from sealforge.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DesignValidationError)
    async def design_validation_error(request: Request, exc: DesignValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=422, content={"success": False, "error": exc.to_dict()})

    @app.exception_handler(RenderFailure)
    async def render_failure(request: Request, exc: RenderFailure) -> JSONResponse:
        logger.error("Render failed for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": {"type": "render_failure", "message": str(exc)}},
        )


app = create_app()

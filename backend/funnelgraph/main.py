"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from funnelgraph.config import settings
from funnelgraph.engine.errors import FunnelError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.funnel_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def funnel_error_handler(request: Request, exc: FunnelError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="FunnelGraph",
        description="Funnel chart geometry engine — axis points and segment outlines",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FunnelError, funnel_error_handler)

    from funnelgraph.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

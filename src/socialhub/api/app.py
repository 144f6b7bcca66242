"""
socialhub.api.app

FastAPI app factory for the SocialHub service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Translate concept errors into `{"msg": ...}` JSON responses.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from socialhub import __version__
from socialhub.api.routers.comments import router as comments_router
from socialhub.api.routers.events import router as events_router
from socialhub.api.routers.friends import router as friends_router
from socialhub.api.routers.health import router as health_router
from socialhub.api.routers.posts import router as posts_router
from socialhub.api.routers.users import router as users_router
from socialhub.concepts.errors import ConceptError
from socialhub.db.init_db import init_db
from socialhub.db.session import create_engine, create_sessionmaker
from socialhub.observability.logging import configure_logging, get_logger
from socialhub.observability.middleware import RequestContextMiddleware
from socialhub.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schemas are managed by Alembic.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="SocialHub",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(ConceptError, _concept_error_handler)

    app.include_router(health_router, tags=["health"])
    app.include_router(users_router)
    app.include_router(posts_router)
    app.include_router(comments_router)
    app.include_router(friends_router)
    app.include_router(events_router)

    return app


async def _concept_error_handler(request: Request, exc: ConceptError) -> JSONResponse:
    log.info(
        "concept_error",
        error=type(exc).__name__,
        status_code=exc.status_code,
        msg=exc.msg,
    )
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


# --- Module Notes -----------------------------------------------------------
# ConceptError subclasses map to HTTP statuses in one handler; bodies are always
# {"msg": ...}. Unexpected exceptions fall through to Starlette's 500 handling.

"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), map domain errors to HTTP, optional demo seeding.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from roster.api.v1.router import api_router
from roster.config import get_settings
from roster.core.exceptions import ConsistencyViolationError, InvalidInputError
from roster.core.logging import configure_logging

logger = logging.getLogger(__name__)


async def _seed_demo_data() -> None:
    from roster.db.base import Base
    from roster.db.seed import seed_demo_roster
    from roster.db.session import async_session_maker, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_session_maker() as session:
        await seed_demo_roster(session)
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load the demo roster when SEED_DEMO_DATA is set."""
    if get_settings().seed_demo_data:
        await _seed_demo_data()
    yield


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})


async def consistency_violation_handler(
    request: Request, exc: ConsistencyViolationError
) -> JSONResponse:
    logger.warning("search aborted: %s", exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Member/team data access with dynamic, paginated search over member LEFT JOIN team.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(ConsistencyViolationError, consistency_violation_handler)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()

# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from catalog.logging import logger
from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.prometheus import PrometheusMiddleware
from catalog.routing import collect_subrouters
from catalog.settings import app_settings
from catalog.storage.db import engine, wait_and_init_db
from catalog.storage.redis import RedisPool
from catalog.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown.

    Startup waits for the database and creates missing tables. Shutdown
    closes the Redis connection pools and disposes the database engine.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Initialized database and tables")

    yield

    logger.info("Application shutdown initiated")
    await RedisPool.close_all()
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    The application:
    - runs `lifespan` for database initialization and cleanup
    - includes the routers collected by `catalog.routing.collect_subrouters()`
    - answers framework errors with the JSON envelope
    - adds `PrometheusMiddleware` and `CorrelationIDMiddleware`

    Returns:
        The configured FastAPI application.
    """
    app = FastAPI(
        title=app_settings.API_TITLE,
        description="CRUD API for a library catalog of authors and books",
        version=app_settings.API_VERSION,
        lifespan=lifespan,
    )

    # Collect routers
    app.include_router(collect_subrouters())

    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → PrometheusMiddleware
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli

"""
Staff Directory API - FastAPI application entry point.
Run with: uvicorn staff_api.main:app
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staff_api import __version__
from staff_api.config import settings
from staff_api.database import Database
from staff_api.middleware import add_exception_handlers, add_request_logging
from staff_api.routers import RESOURCE_ROUTERS, health
from staff_api.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB connection on startup, close it on shutdown."""
    setup_logging()
    await Database.connect_db()
    logger.info(f"{settings.APP_NAME} started, docs at {settings.DOCS_URL}")
    yield
    await Database.close_db()
    logger.info(f"{settings.APP_NAME} shutting down")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=__version__,
        docs_url=settings.DOCS_URL,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_request_logging(app)
    add_exception_handlers(app)

    app.include_router(health.router)
    for router in RESOURCE_ROUTERS:
        app.include_router(router, prefix=settings.API_PREFIX)

    return app


app = create_app()

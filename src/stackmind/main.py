# src/stackmind/main.py
"""Main entry point for the StackMind application."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from stackmind.api.v1 import api_v1
from stackmind.core.errors import StackMindError
from stackmind.core.logging_config import setup_logging
from stackmind.core.settings import settings
from stackmind.db.store import BlogStore, connect_store

logger = logging.getLogger(__name__)


async def _handle_domain_error(request: Request, exc: StackMindError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg', 'invalid value')}" if location else str(first.get("msg"))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def _handle_store_error(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database operation failed"},
    )


def create_app(store: BlogStore | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        store: Pre-built store handle. When omitted, a MongoDB connection is
            opened on startup and a failure to reach the server aborts startup.
    """
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Blog platform API: posts, comments, wishlists and sessions",
        version=settings.app_version,
    )
    app.state.store = store
    app.state.owns_store = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_exception_handler(StackMindError, _handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(PyMongoError, _handle_store_error)  # type: ignore[arg-type]

    app.include_router(api_v1, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def on_startup() -> None:
        if app.state.store is not None:
            return
        try:
            connected = connect_store(settings)
            connected.ensure_indexes()
        except PyMongoError:
            logger.exception("Could not connect to MongoDB; shutting down")
            raise
        app.state.store = connected
        app.state.owns_store = True

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        if app.state.owns_store and app.state.store is not None:
            app.state.store.close()
            app.state.store = None

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "StackMind backend is running",
            "docs": "/docs",
        }

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("stackmind.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()

# src/blog_api/main.py
"""Main entry point for the Blog API application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from blog_api.api.v1 import (
    auth_router,
    comments_router,
    posts_router,
    quotes_router,
    reactions_router,
    tags_router,
    uploads_router,
    users_router,
)
from blog_api.core.settings import settings
from blog_api.services.activity import ActivitySweepWorker
from blog_api.services.errors import ServiceError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Blogging platform API: users, posts, comments, tags and quotes",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render domain errors as ``{"detail": ...}`` with their status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(reactions_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(tags_router, prefix="/api/v1")
app.include_router(quotes_router, prefix="/api/v1")
app.include_router(uploads_router, prefix="/api/v1")

# Uploaded files are served back from the upload directory
app.mount(
    settings.upload_url_prefix,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)


@app.on_event("startup")
async def on_startup() -> None:
    if settings.activity_sweep_enabled:
        worker = ActivitySweepWorker()
        await worker.start()
        app.state.activity_worker = worker
    else:
        app.state.activity_worker = None


@app.on_event("shutdown")
async def on_shutdown() -> None:
    worker: ActivitySweepWorker | None = getattr(app.state, "activity_worker", None)
    if worker:
        await worker.stop()


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
        "description": "Blogging platform API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("blog_api.main:app", host="0.0.0.0", port=8000, reload=settings.debug)

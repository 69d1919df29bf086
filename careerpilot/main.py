"""CareerPilot - job search tracking backend."""

import logging
import os
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from careerpilot import __version__
from careerpilot.core.config import settings
from careerpilot.core.exceptions import CareerPilotError
from careerpilot.core.storage import init_models
from careerpilot.routers import (
    analytics_router,
    dashboard_router,
    jobs_router,
    tracker_router,
)
from careerpilot.schemas.common import error_body

log_level = os.getenv("LOG_LEVEL", settings.log_level).upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    await init_models()
    logger.info("Application initialized")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="CareerPilot",
    description="Job search tracking backend",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tracker_router)
app.include_router(analytics_router)
app.include_router(jobs_router)
app.include_router(dashboard_router)


@app.exception_handler(CareerPilotError)
async def careerpilot_error_handler(request: Request, exc: CareerPilotError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} rejected "
            f"({exc.status_code}): {exc.message}"
        )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(", ".join(messages) or "Invalid request"),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server Error"),
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "success": True,
        "service": "careerpilot",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
    }

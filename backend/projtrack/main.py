"""FastAPI application entry point."""
from __future__ import annotations
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from projtrack.api import auth, groups, professors, projects, semester
from projtrack.container import get_store
from projtrack.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from projtrack.domain.errors import InternalError, TrackerError, ValidationError
from projtrack.domain.schemas import format_errors

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Startup: build and seed the store before serving
# ------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    get_store()
    logger.info("Store ready")
    yield


# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title="Project Tracker API",
    description="Projects, weekly schedules, groups and deliveries for one academic semester",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS — allow everything for local dev unless CORS_ORIGINS is set
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------------------------------------------------
# Error handlers: every error body is {"message": ...}
# ------------------------------------------------------------------
@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError("Invalid request body", errors=format_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(semester.router)
app.include_router(projects.router)
app.include_router(professors.router)
app.include_router(auth.router)
app.include_router(groups.router)


def run() -> None:
    import uvicorn
    uvicorn.run("projtrack.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())

# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .routes import health, public, recommendations
from .schemas.error import INVALID_INPUT_TYPE, NOT_FOUND_TYPE, ErrorResponse
from .services.errors import InvalidInputError, NotFoundError
from .services.store import init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())
    init_store(settings)
    yield


app = FastAPI(
    title="LoanMatch API",
    description="Loan offer comparison and recommendation",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _problem(
    request: Request,
    status_code: int,
    detail: str,
    request_id: str,
    problem_type: str = "about:blank",
) -> JSONResponse:
    body = ErrorResponse(
        type=problem_type,
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
        instance=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    return _problem(request, exc.status_code, str(exc.detail), _request_id(request))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    return _problem(request, 422, str(exc.errors()), _request_id(request))


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    """Figures the engine cannot score (zero income, non-positive amount)."""
    request_id = _request_id(request)
    logger.info("Rejected scoring input (request_id=%s): %s", request_id, exc)
    return _problem(request, 422, str(exc), request_id, INVALID_INPUT_TYPE)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _problem(request, 404, str(exc), _request_id(request), NOT_FOUND_TYPE)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    return _problem(request, 500, "An unexpected error occurred.", request_id)


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, prefix="/api/public", tags=["public"])
app.include_router(recommendations.router, prefix="/api", tags=["recommendations"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the LoanMatch API"}

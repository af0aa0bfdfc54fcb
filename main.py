import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from jobboard.api.router import api_router
from jobboard.core import messages
from jobboard.core.config import settings
from jobboard.core.database import close_db, init_db
from jobboard.core.logging_config import setup_logging

# Configure logging
setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up Job Board API...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Job Board API...")
    close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job board API: accounts, personal profiles, job listings and applications",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _empty_body_errors(request: Request) -> list:
    """Errors for a request sent without a body, checked as if it were ``{}``."""
    body_field = getattr(request.scope.get("route"), "body_field", None)
    model = getattr(body_field, "type_", None)
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        return []
    try:
        model.model_validate({})
    except ValidationError as exc:
        return exc.errors()
    return []


def _is_missing_body(error: dict) -> bool:
    return error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as 400 with one entry per failed rule."""
    raw_errors = []
    for error in exc.errors():
        if _is_missing_body(error):
            raw_errors.extend(_empty_body_errors(request) or [error])
        else:
            raw_errors.append(error)

    errors = []
    for error in raw_errors:
        ctx = error.get("ctx") or {}
        for message in ctx.get("messages") or [error.get("msg")]:
            errors.append({"message": message})

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": messages.BAD_REQUEST, "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Typed application errors (and routing errors) as ``{"message": ...}``."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": messages.UNEXPECTED_ERROR},
    )


# Include routers
app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )

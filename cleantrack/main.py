import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

# Import models so they're registered with SQLAlchemy Base before create_all
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS, LOG_LEVEL
from .database import Base, engine
from .domain.analytics.router import router as analytics_router
from .domain.apartments.router import router as apartments_router
from .domain.billing.router import router as settings_router
from .domain.cleaners.router import router as cleaners_router
from .domain.sessions.router import router as sessions_router
from .exceptions import CleanTrackError, StoreError
from .shared.responses import error_response
from .shared.validators import format_validation_errors

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except SQLAlchemyError as e:
        # Another worker may have created the tables first
        if "already exists" in str(e):
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="CleanTrack API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(CleanTrackError)
async def domain_exception_handler(request: Request, exc: CleanTrackError):
    """Render domain errors into the response envelope"""
    if isinstance(exc, StoreError):
        logger.error(f"{request.method} {request.url.path} - Store error: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {exc.status_code}: {exc.message}")
    return error_response(exc.message, exc.status_code, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters come back as 400 with per-field messages"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return error_response(
        "Validation failed",
        400,
        {"validation_errors": format_validation_errors(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} - Error: {str(exc)}", exc_info=exc)
    return error_response("Internal server error", 500)


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(apartments_router)
app.include_router(cleaners_router)
app.include_router(sessions_router)
app.include_router(analytics_router)
app.include_router(settings_router)


@app.get("/")
def root():
    return {"message": "CleanTrack API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}

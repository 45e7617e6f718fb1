"""
FastAPI application entry point.
"""

from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from . import __version__
from .config import setup_application_logging, get_settings
from .middleware.logging import logging_middleware
from .middleware.rate_limit import limiter, rate_limit_exceeded_handler
from .services import JWTService, PasswordHasher

from .routes import auth, sessions, teachers, users, monitoring

settings = get_settings()

# Configure structured logging
logger = setup_application_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""

    # Startup
    logger.info("Starting API service", environment=settings.environment)

    # Refuses placeholder secrets; startup must not continue past this
    app.state.jwt_service = JWTService.from_settings(settings)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

    from .database import init_database, check_database_connection

    if check_database_connection():
        logger.info("Database connection verified")

        await init_database()
        logger.info("Database initialization completed")
    else:
        logger.error("Database connection failed")
        # Don't exit - allow service to start for health checks

    logger.info("API service startup completed")

    yield

    # Shutdown
    logger.info("API service shutdown completed")


# Create FastAPI application
app = FastAPI(
    title="Yoga Studio API",
    description="REST API for yoga session booking",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Add custom middleware
app.middleware("http")(logging_middleware)


def _error_body(request: Request, message, error_code, details=None) -> dict:
    body = {
        "success": False,
        "message": message,
        "error_code": error_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": str(request.url.path),
    }
    if details:
        body["details"] = details
    return body


# Exception handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""

    # Translated domain errors carry a symbolic code, plain ones the status
    error_code = getattr(exc, "error_code", exc.status_code)
    details = jsonable_encoder(getattr(exc, "details", None))

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.detail, error_code, details),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request body and parameter validation failures are bad requests."""

    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            request, "Validation failed", "VALIDATION_ERROR", {"errors": errors}
        ),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions with logging."""

    logger.error(
        "Unhandled exception",
        path=str(request.url.path),
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "Internal server error", 500),
    )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""

    return {
        "service": "Yoga Studio API",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc),
        "documentation": "/docs",
        "health_check": "/api/v1/health",
        "endpoints": {
            "authentication": "/api/v1/auth",
            "sessions": "/api/v1/sessions",
            "teachers": "/api/v1/teachers",
            "users": "/api/v1/users",
        },
    }


# Register route modules
app.include_router(auth.router)
app.include_router(sessions.router)
app.include_router(teachers.router)
app.include_router(users.router)
app.include_router(monitoring.router)


if __name__ == "__main__":
    import uvicorn

    # Development server configuration
    uvicorn.run(
        "yoga_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.api_log_level,
        access_log=True,
    )

"""
Rate limiting for the authentication endpoints.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
import structlog

from ..config import get_settings
from .logging import security_logger

logger = structlog.get_logger(__name__)

_settings = get_settings()

# Login and register are keyed by client address; the caller is not known yet
limiter = Limiter(
    key_func=get_remote_address,
    enabled=_settings.rate_limit_enabled,
)

auth_rate_limit = _settings.auth_rate_limit


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Render a 429 in the API error envelope."""

    security_logger.log_rate_limit_exceeded(request, limit=str(exc.detail))

    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": f"Rate limit exceeded: {exc.detail}",
            "error_code": "RATE_LIMIT_EXCEEDED",
            "path": request.url.path,
        },
        headers={"Retry-After": "60"},
    )

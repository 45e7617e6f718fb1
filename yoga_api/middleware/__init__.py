"""
Middleware package for the API service.
"""

from .auth import get_current_user
from .logging import logging_middleware, audit_logger, security_logger
from .rate_limit import limiter, auth_rate_limit, rate_limit_exceeded_handler

__all__ = [
    "get_current_user",
    "logging_middleware",
    "audit_logger",
    "security_logger",
    "limiter",
    "auth_rate_limit",
    "rate_limit_exceeded_handler",
]

"""
Request logging middleware and audit loggers.
"""

import time
import uuid
from typing import Dict, Any, Optional

from fastapi import Request
import structlog

from ..config import get_settings

logger = structlog.get_logger(__name__)


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def logging_middleware(request: Request, call_next):
    """Request/response logging middleware."""

    # Generate request ID
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    start_time = time.time()

    request_info = {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client_ip": _client_ip(request),
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    logger.info("Request started", **request_info)

    try:
        response = await call_next(request)

        processing_time = time.time() - start_time

        response_info = {
            "status_code": response.status_code,
            "processing_time_ms": round(processing_time * 1000, 2),
        }

        # Authenticated routes set the caller on request state
        user_id = getattr(request.state, "user_id", None)
        if user_id is not None:
            response_info["user_id"] = user_id

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.3f}s"

        if response.status_code >= 400:
            logger.warning(
                "Request completed with error", **{**request_info, **response_info}
            )
        else:
            logger.info(
                "Request completed successfully", **{**request_info, **response_info}
            )

        return response

    except Exception as e:
        processing_time = time.time() - start_time

        logger.error(
            "Request failed with exception",
            **{
                **request_info,
                "processing_time_ms": round(processing_time * 1000, 2),
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        raise


class AuditLogger:
    """Audit logger for account and enrollment operations."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.audit_logger = structlog.get_logger("audit")

    def log_user_action(
        self,
        request: Request,
        action: str,
        user_id: Optional[int],
        details: Dict[str, Any] = None,
    ):
        """Log user action for audit trail."""

        if not self.enabled:
            return

        audit_entry = {
            "timestamp": time.time(),
            "request_id": getattr(request.state, "request_id", "unknown"),
            "action": action,
            "user_id": user_id,
            "ip_address": _client_ip(request),
            "endpoint": request.url.path,
            "method": request.method,
            "details": details or {},
        }

        self.audit_logger.info("User action", **audit_entry)

    def log_authentication(
        self,
        request: Request,
        auth_type: str,
        user_id: Optional[int] = None,
        email: str = None,
        success: bool = True,
        failure_reason: str = None,
    ):
        """Log authentication attempts."""

        if not self.enabled:
            return

        auth_entry = {
            "timestamp": time.time(),
            "request_id": getattr(request.state, "request_id", "unknown"),
            "auth_type": auth_type,
            "user_id": user_id,
            "email": email,
            "success": success,
            "ip_address": _client_ip(request),
            "user_agent": request.headers.get("user-agent", "unknown"),
            "failure_reason": failure_reason,
        }

        if success:
            self.audit_logger.info("Authentication successful", **auth_entry)
        else:
            self.audit_logger.warning("Authentication failed", **auth_entry)

    def log_enrollment(
        self,
        request: Request,
        action: str,
        session_id: Any,
        user_id: Any,
        requested_by: Optional[int] = None,
    ):
        """Log a join or leave of a yoga session."""

        if not self.enabled:
            return

        enrollment_entry = {
            "timestamp": time.time(),
            "request_id": getattr(request.state, "request_id", "unknown"),
            "action": action,
            "session_id": session_id,
            "user_id": user_id,
            "requested_by": requested_by,
            "ip_address": _client_ip(request),
        }

        self.audit_logger.info("Enrollment changed", **enrollment_entry)


# Global audit logger instance
audit_logger = AuditLogger(enabled=get_settings().audit_log_enabled)


class SecurityLogger:
    """Security-focused logging for suspicious activities."""

    def __init__(self):
        self.security_logger = structlog.get_logger("security")

    def log_suspicious_activity(
        self,
        request: Request,
        activity_type: str,
        severity: str = "medium",
        details: Dict[str, Any] = None,
    ):
        """Log suspicious activity."""

        security_entry = {
            "timestamp": time.time(),
            "request_id": getattr(request.state, "request_id", "unknown"),
            "activity_type": activity_type,
            "severity": severity,
            "ip_address": _client_ip(request),
            "user_agent": request.headers.get("user-agent", "unknown"),
            "endpoint": request.url.path,
            "method": request.method,
            "details": details or {},
        }

        if severity == "high":
            self.security_logger.error("High severity security event", **security_entry)
        elif severity == "medium":
            self.security_logger.warning(
                "Medium severity security event", **security_entry
            )
        else:
            self.security_logger.info("Low severity security event", **security_entry)

    def log_rate_limit_exceeded(self, request: Request, limit: str = None):
        """Log rate limit violations."""

        self.log_suspicious_activity(
            request,
            activity_type="rate_limit_exceeded",
            severity="medium",
            details={"limit": limit},
        )

    def log_authentication_failure(
        self,
        request: Request,
        failure_type: str,
        attempted_user: str = None,
        details: Dict[str, Any] = None,
    ):
        """Log authentication failures."""

        self.log_suspicious_activity(
            request,
            activity_type="authentication_failure",
            severity="medium",
            details={
                "failure_type": failure_type,
                "attempted_user": attempted_user,
                **(details or {}),
            },
        )


# Global security logger instance
security_logger = SecurityLogger()

"""
Consolidated middleware for the RepScale API
"""

import time
import logging
from datetime import date, datetime
from uuid import UUID, uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import (
    RepScaleError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
)

logger = logging.getLogger("repscale.middleware")

ERROR_CODES = {
    ServiceValidationError: "SERVICE_VALIDATION_ERROR",
    NotFoundError: "NOT_FOUND",
    ConflictError: "CONFLICT",
    UnauthorizedError: "UNAUTHORIZED",
}


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    elif isinstance(obj, UUID):
        return str(obj)
    elif isinstance(obj, bytes):
        return obj.decode(errors="replace")
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, (ValueError, TypeError)):
        return str(obj)
    return obj


def error_body(code: str, message: str, details=None) -> dict:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.utcnow().isoformat(),
    }


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            f"request_started request_id={request_id} "
            f"method={request.method} path={request.url.path}",
            extra={
                "request_id": request_id,
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                f"request_completed request_id={request_id} method={request.method} "
                f"path={request.url.path} status={response.status_code} "
                f"duration={process_time:.4f}s"
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                f"request_failed request_id={request_id} method={request.method} "
                f"path={request.url.path} error={str(exc)} duration={process_time:.4f}s",
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            make_serializable(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"HTTP_{exc.status_code}", exc.detail),
    )


async def repscale_exception_handler(request: Request, exc: RepScaleError):
    """Handle service-layer errors using the status carried by the exception"""
    code = exc.code or ERROR_CODES.get(type(exc), "SERVICE_ERROR")
    if exc.http_status >= 500:
        logger.error(f"Service error on {request.url}: {str(exc)}")
    else:
        logger.warning(f"{code} on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(code, str(exc), make_serializable(exc.details)),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )

"""
FastAPI middleware for logging, security headers and error handling
"""
import time
import uuid
from typing import Callable
from fastapi import Request, status
from fastapi.responses import JSONResponse
import logging

from guardian.orchestration.assembler import as_payload, assemble_error


logger = logging.getLogger(__name__)


async def logging_middleware(request: Request, call_next: Callable):
    """Request/response logging middleware"""

    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()
    client = request.client.host if request.client else None

    logger.info(
        "Request started",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "chain": request.query_params.get("chain"),
            "client": client
        }
    )

    try:
        response = await call_next(request)

        duration = time.time() - start_time

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2)
            }
        )

        response.headers["X-Request-ID"] = request_id

        return response

    except Exception as e:
        duration = time.time() - start_time

        logger.error(
            "Request failed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "duration_ms": round(duration * 1000, 2),
                "error": str(e)
            },
            exc_info=True
        )

        raise


async def security_headers_middleware(request: Request, call_next: Callable):
    """Security headers (supplemental to FastAPI CORS)"""
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-XSS-Protection"] = "1; mode=block"

    return response


async def error_handling_middleware(request: Request, call_next: Callable):
    """Last-resort error envelope for anything the routes did not handle"""
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(f"Unhandled exception: {str(e)}", exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=as_payload(assemble_error(str(e) or "Internal server error"))
        )

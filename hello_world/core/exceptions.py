"""
Exception handlers for the Hello World service.

The service defines no error types of its own. These handlers only add
logging around errors raised by the framework.
"""
import time

from fastapi import Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


async def framework_http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Log framework HTTP errors (404, 405, ...) and render them unchanged."""
    logger.warning(f"HTTP {exc.status_code} for {request.method} {request.url.path}: {exc.detail}")
    return await http_exception_handler(request, exc)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler for unhandled exceptions.

    Runs outside the timing middleware, so the X-Process-Time header is
    set here from the start time the middleware left on the request state.
    """
    logger.opt(exception=exc).error(f"Unhandled Exception: {str(exc)}")
    response = JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Internal server error"
        }
    )

    start_time = getattr(request.state, "start_time", None)
    if start_time is not None:
        response.headers["X-Process-Time"] = str(time.time() - start_time)

    return response

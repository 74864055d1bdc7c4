"""
Main application entry point for the Hello World service.
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_world.api.api import api_router
from hello_world.core.config import get_app_environment, settings
from hello_world.core.exceptions import framework_http_error_handler, generic_error_handler
from hello_world.core.logging import logger, setup_logging


# Setup application logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handle startup and shutdown events for the application.
    """
    logger.info(
        f"{settings.PROJECT_NAME} started "
        f"(service={settings.SERVICE_NAME}, version={settings.VERSION}, environment={get_app_environment()})"
    )
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan
)


# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Exception handlers
app.add_exception_handler(StarletteHTTPException, framework_http_error_handler)
app.add_exception_handler(Exception, generic_error_handler)


# Performance middleware to log request processing time
@app.middleware("http")
async def log_request_time(request: Request, call_next):
    """
    Middleware to log request processing time.
    """
    start_time = time.time()
    request.state.start_time = start_time
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.debug(f"Request {request.method} {request.url.path} processed in {process_time:.4f}s")
    response.headers["X-Process-Time"] = str(process_time)

    return response


app.include_router(api_router)

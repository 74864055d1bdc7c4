"""
Application info API endpoint.
"""
import platform

from fastapi import APIRouter, status
from loguru import logger

from hello_world.core.config import get_app_environment, settings
from hello_world.models.schemas import InfoResponse


router = APIRouter()


@router.get(
    "/info",
    response_model=InfoResponse,
    status_code=status.HTTP_200_OK,
    summary="Application Info",
    description="Report the application name, deployment environment and runtime version."
)
async def info():
    """
    Return application info.

    - **environment** comes from `APP_ENV`, read on every request
    - **java_version** carries the interpreter version; the key name is kept
      for clients of the original service
    """
    environment = get_app_environment()
    logger.debug(f"Serving info for environment {environment}")

    return InfoResponse(
        app=settings.PROJECT_NAME,
        environment=environment,
        java_version=platform.python_version()
    )

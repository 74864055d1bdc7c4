"""
Health check API endpoint.
"""
from fastapi import APIRouter, status

from hello_world.core.config import settings
from hello_world.models.schemas import HealthResponse


router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Report that the service is up, with its name and version."
)
async def health_check():
    return HealthResponse(
        status="UP",
        service=settings.SERVICE_NAME,
        version=settings.VERSION
    )

"""
Greeting API endpoint.
"""
from datetime import datetime

from fastapi import APIRouter, status

from hello_world.core.config import settings
from hello_world.models.schemas import HelloResponse


router = APIRouter()


@router.get(
    "/",
    response_model=HelloResponse,
    status_code=status.HTTP_200_OK,
    summary="Hello World",
    description="Return the greeting along with the current server time."
)
async def hello():
    """
    Return the greeting payload.

    The timestamp is local wall-clock time in ISO-8601 form, taken per call.
    """
    return HelloResponse(
        message=settings.GREETING_MESSAGE,
        author=settings.AUTHOR,
        position=settings.POSITION,
        timestamp=datetime.now().isoformat(),
        status="healthy"
    )

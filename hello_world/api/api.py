"""
Main API router that includes all endpoint groups.
"""
from fastapi import APIRouter

from hello_world.api.endpoints import hello, health, info

# Create the main API router
api_router = APIRouter()

# Include all endpoint groups
api_router.include_router(hello.router, tags=["Hello"])
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(info.router, tags=["Info"])

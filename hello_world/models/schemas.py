"""
Response schemas for the Hello World service.
"""
from pydantic import BaseModel, ConfigDict


class HelloResponse(BaseModel):
    """Greeting response schema."""
    message: str
    author: str
    position: str
    timestamp: str
    status: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Hello World from Akulaku SRE Test!",
                "author": "Arif Hidayatullah",
                "position": "Senior Site Reliability Engineer",
                "timestamp": "2025-05-06T01:08:25.123456",
                "status": "healthy"
            }
        }
    )


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    service: str
    version: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "UP",
                "service": "hello-world",
                "version": "1.0.0"
            }
        }
    )


class InfoResponse(BaseModel):
    """Application info response schema."""
    app: str
    environment: str
    java_version: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "app": "FastAPI Hello World",
                "environment": "production",
                "java_version": "3.12.3"
            }
        }
    )

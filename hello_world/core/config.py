"""
Configuration settings for the Hello World service.
"""
import json
import os
from typing import Annotated, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.
    """
    PROJECT_NAME: str = "FastAPI Hello World"
    PROJECT_DESCRIPTION: str = "Static informational endpoints for the hello-world service"

    # Service identity reported by /health
    SERVICE_NAME: str = "hello-world"
    VERSION: str = "1.0.0"

    # Greeting reported by /
    GREETING_MESSAGE: str = "Hello World from Akulaku SRE Test!"
    AUTHOR: str = "Arif Hidayatullah"
    POSITION: str = "Senior Site Reliability Engineer"

    # Fallback for APP_ENV, which is read per request
    DEFAULT_ENVIRONMENT: str = "production"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    DEBUG_MODE: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS settings
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and v.startswith("["):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


def get_app_environment() -> str:
    """
    Return the deployment environment name.

    APP_ENV is looked up on every call so a changed environment is
    reflected by the next request. Unset or empty falls back to the default.
    """
    return os.environ.get("APP_ENV") or settings.DEFAULT_ENVIRONMENT


# Create settings instance
settings = Settings()

"""Application settings."""
import json
from typing import Annotated, List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

NEW_RELIC_EU_GRAPHQL_URL = "https://api.eu.newrelic.com/graphql"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    """Application settings."""

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Project
    PROJECT_NAME: str = "ingest-key-gateway"
    VERSION: str = "0.1.0"

    # Host
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Accept a comma-separated string or a JSON list."""
        if isinstance(v, str) and v.startswith("["):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    # New Relic NerdGraph
    NEW_RELIC_API_KEY: str = ""  # User key forwarded in the API-Key header
    NEW_RELIC_GRAPHQL_URL: str = NEW_RELIC_EU_GRAPHQL_URL
    NEW_RELIC_TIMEOUT: int = 30  # seconds

    # Inbound service auth
    ENABLE_SERVICE_AUTH: bool = False
    SERVICE_API_KEY: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # Available formats: json, text, structured
    LOG_EXTRA_FIELDS: list[str] = []  # Additional fields for logs


settings = Settings()
